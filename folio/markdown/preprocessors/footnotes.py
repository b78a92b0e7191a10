# folio/markdown/preprocessors/footnotes.py
"""
Preprocessor that renders footnote references and the footnote list.

    Claim.[^src]

    [^src]: Where the claim comes from.

becomes a superscript link to ``#footnote-src`` and a list appended to the
end of the document:

    <div class="footnotes"><h4>Footnotes</h4><ol>
      <li id="footnote-src">Where the claim comes from. <a href="#ref-src" class="footnote-back">↩</a></li>
    </ol></div>

Identifiers are reduced to ``[A-Za-z0-9_-]``. Two different raw ids that
reduce to the same slug are kept apart with numeric suffixes (``a-b``,
``a-b-2``). References without a definition still link to their slug.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, Tuple

from .code_fences import map_prose, split_code_blocks

FOOTNOTE_FALLBACK_ID = "note"

_DEFINITION_RE = re.compile(r"^\[\^([^\]\n]+?)\]:[ \t]+(.+)$", re.MULTILINE)
_DEFINITION_LINE_RE = re.compile(r"^\[\^[^\]\n]+?\]:[ \t]+.+(?:\n|\Z)", re.MULTILINE)
_REFERENCE_RE = re.compile(r"\[\^([^\]\n]+?)\]")
_UNSAFE_ID_RE = re.compile(r"[^A-Za-z0-9_-]+")


def sanitize_footnote_id(raw_id: str) -> str:
    return _UNSAFE_ID_RE.sub("-", raw_id).strip("-") or FOOTNOTE_FALLBACK_ID


class FootnoteTable:
    """Footnote definitions of one document, keyed by sanitized slug."""

    def __init__(self) -> None:
        self._definitions: Dict[str, str] = {}
        self._slug_by_raw: Dict[str, str] = {}

    def define(self, raw_id: str, text: str) -> str:
        base = sanitize_footnote_id(raw_id)
        slug = base
        suffix = 2
        while slug in self._definitions:
            slug = f"{base}-{suffix}"
            suffix += 1
        self._definitions[slug] = text
        self._slug_by_raw.setdefault(raw_id, slug)
        return slug

    def resolve(self, raw_id: str) -> str:
        return self._slug_by_raw.get(raw_id) or sanitize_footnote_id(raw_id)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._definitions.items())

    def __len__(self) -> int:
        return len(self._definitions)

    def render(self) -> str:
        entries = "".join(
            f'<li id="footnote-{slug}">{text} '
            f'<a href="#ref-{slug}" class="footnote-back">↩</a></li>'
            for slug, text in self.items()
        )
        return f'<div class="footnotes"><h4>Footnotes</h4><ol>{entries}</ol></div>'


def collect_footnotes(markdown: str) -> FootnoteTable:
    table = FootnoteTable()
    for span in split_code_blocks(markdown):
        if span.is_code:
            continue
        for match in _DEFINITION_RE.finditer(span.text):
            table.define(match.group(1), match.group(2).strip())
    return table


def _reference(table: FootnoteTable, match: re.Match) -> str:
    slug = table.resolve(match.group(1))
    return f'<sup id="ref-{slug}"><a href="#footnote-{slug}">[{slug}]</a></sup>'


def process_footnotes(markdown: str, table: FootnoteTable | None = None) -> str:
    if table is None:
        table = collect_footnotes(markdown)

    def rewrite(text: str) -> str:
        text = _DEFINITION_LINE_RE.sub("", text)
        return _REFERENCE_RE.sub(lambda m: _reference(table, m), text)

    result = map_prose(markdown, rewrite)
    if len(table):
        result = result.rstrip("\n") + "\n\n" + table.render() + "\n"
    return result


def footnotes_default(text: str, context: dict) -> str:
    """
    Default configuration for footnotes.

    The definition table is left in the context for later stages.
    """
    table = collect_footnotes(text)
    context["footnotes"] = table
    return process_footnotes(text, table)
