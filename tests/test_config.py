import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from folio.markdown.config import ProcessorOptions, get_pandoc_config, get_processor_options


def test_defaults_enable_every_stage() -> None:
    options = ProcessorOptions()
    assert options.enable_emojis and options.enable_tags and options.enable_embeds
    assert options.mentions_base_url == "https://github.com/"


def test_from_mapping_accepts_camel_case() -> None:
    options = ProcessorOptions.from_mapping({"githubRepo": "o/r", "enable_tags": False})
    assert options.github_repo == "o/r"
    assert options.enable_tags is False


def test_merged_returns_a_copy() -> None:
    base = ProcessorOptions()
    changed = base.merged({"enable_emojis": False})
    assert base.enable_emojis is True
    assert changed.enable_emojis is False


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ImproperlyConfigured):
        ProcessorOptions.from_mapping({"colour": "red"})


def test_settings_must_be_a_mapping() -> None:
    with override_settings(FOLIO_MARKDOWN=["enable_tags"]):
        with pytest.raises(ImproperlyConfigured):
            get_processor_options()


def test_overrides_win_over_settings() -> None:
    with override_settings(FOLIO_MARKDOWN={"issue_base_url": "https://a/"}):
        assert get_processor_options().issue_base_url == "https://a/"
        assert get_processor_options(issue_base_url="https://b/").issue_base_url == "https://b/"


def test_pandoc_leaves_enrichment_syntax_to_preprocessors() -> None:
    config = get_pandoc_config()
    assert config["to"] == "html5"
    for extension in ("-footnotes", "-definition_lists", "-superscript", "-subscript", "-auto_identifiers"):
        assert extension in config["format"]
    assert "+raw_html" in config["format"]
    assert "+tex_math_dollars" in config["format"]
