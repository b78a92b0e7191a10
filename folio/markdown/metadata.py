"""
Post metadata derived from front matter with fallbacks from the body.

    title        front matter "title", else the first "# " heading, else the slug
    description  front matter "description", else the first non-heading line
    tags         front matter "tags" as a list or a comma separated string
    read_time    minutes at 200 words per minute, at least 1
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .frontmatter import FrontMatter

WORDS_PER_MINUTE = 200

_TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


@dataclass
class PostMeta:
    title: str
    description: str = ""
    date: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    read_time: int = 1


def reading_time(body: str) -> int:
    words = len(body.split())
    # half-up, not banker's rounding
    return max(1, math.floor(words / WORDS_PER_MINUTE + 0.5))


def _first_paragraph_line(body: str) -> str:
    for line in body.split("\n"):
        if line.strip() and not line.startswith("#"):
            return line.strip()
    return ""


def _tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [tag.strip() for tag in value if tag.strip()]


def build_post_meta(front_matter: FrontMatter, body: str | None = None, slug: str = "") -> PostMeta:
    if body is None:
        body = front_matter.body

    title = front_matter.get("title")
    if not title:
        heading = _TITLE_RE.search(body)
        title = heading.group(1).strip() if heading else slug

    return PostMeta(
        title=title,
        description=front_matter.get("description") or _first_paragraph_line(body),
        date=front_matter.get("date"),
        tags=_tags(front_matter.get("tags")),
        read_time=reading_time(body),
    )
