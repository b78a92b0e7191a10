"""Spoilers: ``>!hidden text!<`` is wrapped in a span the stylesheet blurs."""

from __future__ import annotations

import html

from .code_fences import map_prose

DEFAULT_SPOILER_CLASS = "spoiler"

OPEN_MARKER = ">!"
CLOSE_MARKER = "!<"


def _wrap_spoilers(text: str, css: str) -> str:
    parts = []
    pos = 0
    while True:
        start = text.find(OPEN_MARKER, pos)
        if start == -1:
            break
        end = text.find(CLOSE_MARKER, start + len(OPEN_MARKER))
        if end == -1:
            # no closer after this opener means none after any later one
            break
        parts.append(text[pos:start])
        parts.append(f'<span class="{css}">{text[start + len(OPEN_MARKER):end].strip()}</span>')
        pos = end + len(CLOSE_MARKER)
    parts.append(text[pos:])
    return "".join(parts)


def process_spoilers(markdown: str, class_name: str | None = None) -> str:
    css = html.escape(class_name or DEFAULT_SPOILER_CLASS, quote=True)
    return map_prose(markdown, lambda text: _wrap_spoilers(text, css))


def spoilers_default(text: str, context: dict) -> str:
    return process_spoilers(text, context["options"].spoiler_class_name)
