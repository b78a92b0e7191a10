"""
Emoji shortcodes such as ``:rocket:``.

The default table is read-only; callers pass overrides that are merged on
top for a single call.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .code_fences import map_prose

DEFAULT_EMOJI_MAP: Mapping[str, str] = MappingProxyType(
    {
        "smile": "\U0001F604",
        "rocket": "\U0001F680",
        "fire": "\U0001F525",
        "star": "⭐",
        "warning": "⚠️",
        "info": "ℹ️",
        "tada": "\U0001F389",
        "+1": "\U0001F44D",
        "-1": "\U0001F44E",
        "heart": "❤️",
    }
)

_SHORTCODE_RE = re.compile(r":([a-z0-9_+-]+):", re.IGNORECASE)


def emoji_map(override: Mapping[str, str] | None = None) -> Mapping[str, str]:
    if not override:
        return DEFAULT_EMOJI_MAP
    merged = dict(DEFAULT_EMOJI_MAP)
    merged.update({name.lower(): glyph for name, glyph in override.items()})
    return merged


def process_emojis(markdown: str, override: Mapping[str, str] | None = None) -> str:
    table = emoji_map(override)

    def replace(match: re.Match) -> str:
        return table.get(match.group(1).lower(), match.group(0))

    return map_prose(markdown, lambda text: _SHORTCODE_RE.sub(replace, text))


def emojis_default(text: str, context: dict) -> str:
    return process_emojis(text, context["options"].emoji_map_override)
