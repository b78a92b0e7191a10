"""
Inline extras: ==highlight==, ^superscript^ and ~subscript~.

Doubled markers (``^^``, ``~~``) are left alone so they never collide with
strikethrough, which the markdown renderer handles itself.
"""

import re

from .code_fences import map_prose

_HIGHLIGHT_RE = re.compile(r"==([^=\n]+)==")
_SUBSCRIPT_RE = re.compile(r"(?<!~)~([^~\s](?:[^~\n]*[^~\s])?)~(?!~)")
_SUPERSCRIPT_RE = re.compile(r"(?<!\^)\^([^\^\s](?:[^\^\n]*[^\^\s])?)\^(?!\^)")


def _rewrite(text: str) -> str:
    text = _HIGHLIGHT_RE.sub(r"<mark>\1</mark>", text)
    text = _SUBSCRIPT_RE.sub(r"<sub>\1</sub>", text)
    text = _SUPERSCRIPT_RE.sub(r"<sup>\1</sup>", text)
    return text


def process_inline_extras(markdown: str) -> str:
    return map_prose(markdown, _rewrite)


def inline_extras_default(text: str, context: dict) -> str:
    return process_inline_extras(text)
