"""
Author comments that must not reach the page:

    <!-- html comment -->
    [//: # (inline note)]
    [//]: # (reference-style note)
"""

import re

from .code_fences import map_prose

HTML_COMMENT_OPEN = "<!--"
HTML_COMMENT_CLOSE = "-->"

# Notes are capped so an unclosed "[//: # (" cannot scan the rest of the document
_LINK_COMMENT_RE = re.compile(r"\[//:\s*#\s*\([^)\n]{0,1000}\)\]")
_REFERENCE_COMMENT_RE = re.compile(r"^\[//\]:\s*#\s*\([^)\n]*\)[ \t]*(?:\n|\Z)", re.MULTILINE)


def _strip_html_comments(text: str) -> str:
    parts = []
    pos = 0
    while True:
        start = text.find(HTML_COMMENT_OPEN, pos)
        if start == -1:
            break
        end = text.find(HTML_COMMENT_CLOSE, start + len(HTML_COMMENT_OPEN))
        if end == -1:
            break
        parts.append(text[pos:start])
        pos = end + len(HTML_COMMENT_CLOSE)
    parts.append(text[pos:])
    return "".join(parts)


def _strip(text: str) -> str:
    text = _LINK_COMMENT_RE.sub("", text)
    text = _REFERENCE_COMMENT_RE.sub("", text)
    return _strip_html_comments(text)


def process_comments(markdown: str) -> str:
    return map_prose(markdown, _strip)


def comments_default(text: str, context: dict) -> str:
    return process_comments(text)
