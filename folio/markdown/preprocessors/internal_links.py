"""
Wiki-style internal links.

    [[Getting Started]]              -> <a href="#getting-started">Getting Started</a>
    [[Guide#Install Steps]]          -> <a href="#install-steps">Guide</a>
    [[#Install Steps|how to install]] -> <a href="#install-steps">how to install</a>

Anchors use the same slug rules as rendered headings. An optional base
path is prepended to the fragment. ``![[...]]`` is an embed, not a link.
"""

from __future__ import annotations

import html
import re

from ..slugs import slugify_heading
from .code_fences import map_outside_tags, map_prose

_WIKI_LINK_RE = re.compile(r"(?<!!)\[\[([^\[\]\n]+)\]\]")


def _render(inner: str, base_path: str | None) -> str:
    target, _, label = inner.partition("|")
    page, has_heading, heading = target.partition("#")
    if has_heading:
        anchor = slugify_heading(heading)
        default_label = page.strip() or heading.strip()
    else:
        anchor = slugify_heading(target)
        default_label = target.strip()
    href = html.escape(f"{base_path or ''}#{anchor}", quote=True)
    return f'<a href="{href}">{label.strip() or default_label}</a>'


def process_internal_links(markdown: str, base_path: str | None = None) -> str:
    def rewrite(text: str) -> str:
        return _WIKI_LINK_RE.sub(lambda m: _render(m.group(1), base_path), text)

    return map_prose(markdown, lambda text: map_outside_tags(text, rewrite))


def internal_links_default(text: str, context: dict) -> str:
    return process_internal_links(text, context["options"].internal_link_base_path)
