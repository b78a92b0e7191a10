"""
Heading slugs used for in-page anchors and the table of contents.

    slugify_heading("Café au lait!")  -> "cafe-au-lait"
    slugify_heading("???")            -> "section"

Duplicate headings within one rendered document are disambiguated through a
SlugRegistry: "intro", "intro-2", "intro-3", ...
"""

from __future__ import annotations

import re
import unicodedata
from typing import Dict

DEFAULT_SLUG = "section"

_WHITESPACE_RE = re.compile(r"\s+")


def _keep_char(char: str) -> bool:
    # Unicode letters (L*) and numbers (N*), whitespace, hyphen
    return unicodedata.category(char)[0] in "LN" or char.isspace() or char == "-"


def slugify_heading(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", str(text))
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    kept = "".join(c for c in stripped.lower() if _keep_char(c))
    slug = _WHITESPACE_RE.sub("-", kept.strip())
    return slug or DEFAULT_SLUG


class SlugRegistry:
    """Per-document record of issued slugs."""

    def __init__(self) -> None:
        self._used: Dict[str, int] = {}

    def unique(self, text: str) -> str:
        base = slugify_heading(text)
        count = self._used.get(base, 0) + 1
        self._used[base] = count
        if count == 1:
            return base
        return f"{base}-{count}"

    def __contains__(self, slug: str) -> bool:
        return slug in self._used

    def __len__(self) -> int:
        return len(self._used)
