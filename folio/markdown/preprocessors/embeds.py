"""
Media embeds: ``![[path.ext|option]]``.

The file extension picks the element: images become ``<img>``, video
``<video controls>``, audio ``<audio controls>``; anything else is a plain
link. A numeric option sets the width of images and videos.
"""

from __future__ import annotations

import html
import re

from .code_fences import map_outside_tags, map_prose

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp", "svg")
VIDEO_EXTENSIONS = ("mp4", "webm", "ogg")
AUDIO_EXTENSIONS = ("mp3", "wav", "flac", "m4a")

_EMBED_RE = re.compile(r"!\[\[([^\]|\n]+)(?:\|([^\]\n]+))?\]\]")


def _extension(path: str) -> str:
    _, dot, ext = path.rpartition(".")
    return ext.lower() if dot else ""


def render_embed(path: str, option: str = "") -> str:
    src = html.escape(path.strip(), quote=True)
    option = option.strip()
    width = f' width="{option}"' if option.isdigit() else ""
    ext = _extension(path.strip())

    if ext in IMAGE_EXTENSIONS:
        return f'<img src="{src}"{width} alt="" />'
    if ext in VIDEO_EXTENSIONS:
        return f'<video controls src="{src}"{width}></video>'
    if ext in AUDIO_EXTENSIONS:
        return f'<audio controls src="{src}"></audio>'
    return f'<a href="{src}">{src}</a>'


def process_embeds(markdown: str) -> str:
    def rewrite(text: str) -> str:
        return _EMBED_RE.sub(lambda m: render_embed(m.group(1), m.group(2) or ""), text)

    return map_prose(markdown, lambda text: map_outside_tags(text, rewrite))


def embeds_default(text: str, context: dict) -> str:
    return process_embeds(text)
