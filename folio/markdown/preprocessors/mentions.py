"""Mentions: ``@octocat`` links to ``<base_url>octocat``."""

from __future__ import annotations

import html
import re

from .code_fences import map_outside_tags, map_prose

DEFAULT_MENTIONS_BASE_URL = "https://github.com/"

# GitHub usernames: 1-39 characters, alphanumeric or hyphen, no leading hyphen
_MENTION_RE = re.compile(r"(^|\s)@([A-Za-z0-9][A-Za-z0-9-]{0,38})(?![A-Za-z0-9-])")


def process_mentions(markdown: str, base_url: str | None = None) -> str:
    base = html.escape(base_url or DEFAULT_MENTIONS_BASE_URL, quote=True)

    def rewrite(text: str) -> str:
        return _MENTION_RE.sub(
            lambda m: f'{m.group(1)}<a href="{base}{m.group(2)}">@{m.group(2)}</a>', text
        )

    return map_prose(markdown, lambda text: map_outside_tags(text, rewrite))


def mentions_default(text: str, context: dict) -> str:
    return process_mentions(text, context["options"].mentions_base_url)
