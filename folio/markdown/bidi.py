"""
Right-to-left text detection for mixed Persian/Arabic/Hebrew and Latin posts.

The heuristic counts characters from RTL scripts against Latin letters; when
the first strong character of a block is unambiguous it decides alone.
"""

from __future__ import annotations

import re
from typing import Literal

Direction = Literal["rtl", "ltr", "auto"]

RTL_CHARS_RE = re.compile("[\u0591-\u07FF\u200F\u202B\u202E\uFB1D-\uFDFD\uFE70-\uFEFC]")
LTR_CHARS_RE = re.compile("[A-Za-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02B8]")
_ASCII_LETTER_RE = re.compile("[A-Za-z]")


def detect_rtl(text: str) -> bool:
    """True when RTL characters outnumber Latin ones."""
    rtl = len(RTL_CHARS_RE.findall(text))
    ltr = len(LTR_CHARS_RE.findall(text))
    return rtl > ltr


def detect_direction(text: str) -> Direction:
    trimmed = text.strip()
    if not trimmed:
        return "auto"

    first = trimmed[0]
    if RTL_CHARS_RE.match(first):
        return "rtl"
    if _ASCII_LETTER_RE.match(first):
        return "ltr"
    return "rtl" if detect_rtl(trimmed) else "ltr"


def wrap_bidi(text: str) -> str:
    """Isolate right-to-left runs so they do not reorder surrounding text."""
    if detect_direction(text) == "rtl":
        return f'<bdi dir="rtl">{text}</bdi>'
    return text
