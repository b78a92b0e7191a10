"""
Hashtags: ``#django`` at the start of a line or after whitespace.

With a base URL the tag links to ``<base_url><tag>``; without one it is an
inert styled span. Purely numeric tokens (``#42``) are issue references and
are left for the issue link stage.
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote

from .code_fences import map_outside_tags, map_prose

TAG_CLASS = "tag"

_TAG_RE = re.compile(r"(^|\s)#([A-Za-z0-9](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?)(?![A-Za-z0-9_-])")


def process_tags(markdown: str, base_url: str | None = None) -> str:
    def replace(match: re.Match) -> str:
        prefix, tag = match.group(1), match.group(2)
        if tag.isdigit():
            return match.group(0)
        if base_url:
            href = html.escape(f"{base_url}{quote(tag, safe='')}", quote=True)
            return f'{prefix}<a href="{href}" class="{TAG_CLASS}">#{tag}</a>'
        return f'{prefix}<span class="{TAG_CLASS}">#{tag}</span>'

    def rewrite(text: str) -> str:
        return _TAG_RE.sub(replace, text)

    return map_prose(markdown, lambda text: map_outside_tags(text, rewrite))


def tags_default(text: str, context: dict) -> str:
    return process_tags(text, context["options"].tags_base_url)
