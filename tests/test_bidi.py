import pytest

from folio.markdown.bidi import detect_direction, detect_rtl, wrap_bidi


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "auto"),
        ("   ", "auto"),
        ("Hello", "ltr"),
        ("שלום עולם", "rtl"),
        ("سلام Hello", "rtl"),
        ("Hello سلام دنیا", "ltr"),
        ("123 سلام", "rtl"),
        ("123 hello", "ltr"),
    ],
)
def test_detect_direction(text: str, expected: str) -> None:
    assert detect_direction(text) == expected


def test_detect_rtl_compares_counts() -> None:
    assert detect_rtl("سلام hi")
    assert not detect_rtl("hello سل")


def test_wrap_bidi() -> None:
    assert wrap_bidi("سلام") == '<bdi dir="rtl">سلام</bdi>'
    assert wrap_bidi("hello") == "hello"
