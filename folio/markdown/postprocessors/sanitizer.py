# folio/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

# Media elements may only carry a source, dimensions and playback flags
_MEDIA_ATTRS = ["src", "width", "height", "controls", "loop", "muted", "autoplay", "preload"]


@lru_cache(maxsize=1)
def get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "mark",
            "del",
            "ins",
            "sup",  # superscript and footnote references
            "sub",  # subscript
            "kbd",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # disclosure
            "details",
            "summary",
            # code
            "pre",
            "code",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "caption",
            "colgroup",
            "col",
            "tr",
            "th",
            "td",
            # media
            "img",
            "figure",
            "figcaption",
            "iframe",
            "video",
            "audio",
            "canvas",
            # forms (for task lists)
            "input",
            # semantic
            "abbr",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "iframe": ["src", "width", "height", "allowfullscreen"],
        "video": _MEDIA_ATTRS,
        "audio": _MEDIA_ATTRS,
        "div": ["class", "role"],
        "span": ["class"],
        "abbr": ["title"],
        "code": ["class"],
        "pre": ["class"],
        "ol": ["start", "type", "class"],
        "th": ["colspan", "rowspan", "align"],
        "td": ["colspan", "rowspan", "align"],
        "col": ["span"],
        "colgroup": ["span"],
        "input": ["type", "checked", "disabled"],
        "details": ["open"],
    }

    # Secure transport only; relative URLs and fragments carry no protocol
    allowed_protocols = ["https"]

    return frozenset(allowed_tags), allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.
    """
    allowed_tags, allowed_attrs, allowed_protocols = get_bleach_config()

    sanitized = bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # Escape disallowed tags instead of dropping their text
    )
    if sanitized != html:
        logger.debug("Sanitizer rewrote %d characters of HTML", abs(len(sanitized) - len(html)))
    return sanitized
