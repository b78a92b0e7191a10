import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["folio"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
            FOLIO_MARKDOWN={},
        )
        django.setup()


@pytest.fixture
def pandoc():
    """Skip the test when the pandoc binary is not installed."""
    pypandoc = pytest.importorskip("pypandoc")
    try:
        return pypandoc.get_pandoc_version()
    except OSError:
        pytest.skip("pandoc binary not available")
