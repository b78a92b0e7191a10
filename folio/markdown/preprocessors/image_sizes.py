"""
Sized images: ``![alt](url =WxH)``, ``=W``, ``=Wx`` or ``=Wx*``.

The size suffix is moved into explicit width/height attributes on an
``<img>`` tag; a missing or ``*`` height keeps the aspect ratio.
"""

import html
import re

from .code_fences import map_prose

_SIZED_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\s*=([0-9]+)(?:x(\*|[0-9]+)?)?\)")


def _render(match: re.Match) -> str:
    alt, url, width, height = match.groups()
    height_attr = f' height="{height}"' if height and height != "*" else ""
    return (
        f'<img src="{html.escape(url, quote=True)}" width="{width}"{height_attr} '
        f'alt="{html.escape(alt, quote=True)}" />'
    )


def process_image_sizes(markdown: str) -> str:
    return map_prose(markdown, lambda text: _SIZED_IMAGE_RE.sub(_render, text))


def image_sizes_default(text: str, context: dict) -> str:
    return process_image_sizes(text)
