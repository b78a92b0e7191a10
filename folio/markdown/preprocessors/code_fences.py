"""
Split markdown into fenced-code and prose spans.

Every preprocessor rewrites prose only; fenced blocks are carried through
untouched. Joining the span texts always reproduces the input exactly.
"""

from __future__ import annotations

import re
from typing import Callable, List, NamedTuple

CODE_FENCE_RE = re.compile(r"```.*?```", re.DOTALL)
# Tags emitted by earlier stages (or written inline); their attributes are never rewritten
HTML_TAG_RE = re.compile(r"(<[A-Za-z/!][^<>]*>)")


class Span(NamedTuple):
    text: str
    is_code: bool


def split_code_blocks(text: str) -> List[Span]:
    spans: List[Span] = []
    last = 0
    for match in CODE_FENCE_RE.finditer(text):
        spans.append(Span(text[last:match.start()], False))
        spans.append(Span(match.group(0), True))
        last = match.end()
    spans.append(Span(text[last:], False))
    return spans


def map_prose(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every prose span and reassemble the document."""
    return "".join(
        span.text if span.is_code else func(span.text)
        for span in split_code_blocks(text)
    )


def map_outside_tags(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to the text between HTML tags; the tags pass through as is."""
    parts = HTML_TAG_RE.split(text)
    # split() with a capture group alternates text, tag, text, ...
    return "".join(part if index % 2 else func(part) for index, part in enumerate(parts))
