"""
Definition lists.

    Term
    : First definition
    : Second definition

becomes ``<dl><dt>Term</dt><dd>First definition</dd><dd>Second definition</dd></dl>``.
"""

import re

from .code_fences import map_prose

_DEFINITION_LIST_RE = re.compile(r"^([^\s:][^\n]*)\n((?::[ \t]+[^\n]*(?:\n|\Z))+)", re.MULTILINE)
_DEFINITION_PREFIX_RE = re.compile(r"^:\s*")


def _render(match: re.Match) -> str:
    term, block = match.group(1), match.group(2)
    definitions = [
        _DEFINITION_PREFIX_RE.sub("", line).strip()
        for line in block.split("\n")
        if line.strip().startswith(":")
    ]
    items = "".join(f"<dd>{d}</dd>" for d in definitions if d)
    trailer = "\n" if block.endswith("\n") else ""
    return f"<dl><dt>{term.strip()}</dt>{items}</dl>{trailer}"


def process_definition_lists(markdown: str) -> str:
    return map_prose(markdown, lambda text: _DEFINITION_LIST_RE.sub(_render, text))


def definition_lists_default(text: str, context: dict) -> str:
    return process_definition_lists(text)
