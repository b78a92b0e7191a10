"""
Abbreviations.

    *[HTML]: HyperText Markup Language

Definition lines are removed and every whole-word, case-sensitive ``HTML``
outside code and outside HTML tags becomes
``<abbr title="HyperText Markup Language">HTML</abbr>``.
"""

from __future__ import annotations

import html
import re
from typing import Dict

from .code_fences import map_prose, split_code_blocks

_DEFINITION_RE = re.compile(r"^\*\[([^\]\n]+)\]:[ \t]+(.+)$", re.MULTILINE)
_DEFINITION_LINE_RE = re.compile(r"^\*\[[^\]\n]+\]:[ \t]+.+(?:\n|\Z)", re.MULTILINE)


def collect_abbreviations(markdown: str) -> Dict[str, str]:
    definitions: Dict[str, str] = {}
    for span in split_code_blocks(markdown):
        if span.is_code:
            continue
        for match in _DEFINITION_RE.finditer(span.text):
            definitions[match.group(1)] = match.group(2).strip()
    return definitions


def _abbreviation_pattern(definitions: Dict[str, str]) -> re.Pattern:
    # longest first so "HTML5" wins over "HTML"
    names = sorted(definitions, key=len, reverse=True)
    words = "|".join(re.escape(name) for name in names)
    # tags are matched first and passed through untouched
    return re.compile(r"(<[A-Za-z/!][^<>]*>)|(?<!\w)(%s)(?!\w)" % words)


def process_abbreviations(markdown: str) -> str:
    definitions = collect_abbreviations(markdown)
    if not definitions:
        return markdown

    pattern = _abbreviation_pattern(definitions)

    def replace(match: re.Match) -> str:
        if match.group(1):
            return match.group(1)
        name = match.group(2)
        title = html.escape(definitions[name], quote=True)
        return f'<abbr title="{title}">{name}</abbr>'

    def rewrite(text: str) -> str:
        return pattern.sub(replace, _DEFINITION_LINE_RE.sub("", text))

    return map_prose(markdown, rewrite)


def abbreviations_default(text: str, context: dict) -> str:
    return process_abbreviations(text)
