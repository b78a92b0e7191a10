# folio/markdown/renderer.py

import logging
from dataclasses import dataclass, field

import pypandoc

from .config import get_pandoc_config
from .frontmatter import FrontMatter, parse_front_matter
from .metadata import PostMeta, build_post_meta
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors, build_context
from .toc import HeadingNode, extract_toc_from_html

logger = logging.getLogger(__name__)

RENDER_FALLBACK_MESSAGE = "This content could not be displayed."


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Markdown body (front matter already removed)
        context: Optional dict for processors; an "options" entry may hold
            ProcessorOptions or a mapping of option names
    """
    context = build_context(**(context or {}))

    # Pre-processing: enrichment pipeline over the markdown source
    text = apply_preprocessors(text, context)

    # Markdown conversion using pypandoc
    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to=pandoc_config["to"],
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )
    logger.debug("Pandoc produced %d characters of HTML", len(html))

    # Post-processing: sanitize, then decorate the HTML
    html = apply_postprocessors(html, context)

    return html


@dataclass
class RenderedDocument:
    html: str
    front_matter: FrontMatter
    meta: PostMeta
    toc: list[HeadingNode] = field(default_factory=list)


def render_document(raw, options=None, slug=""):
    """Render a full document: front matter, HTML body, TOC and post metadata."""
    front_matter = parse_front_matter(raw)
    html = render_markdown(front_matter.body, {"options": options})
    return RenderedDocument(
        html=html,
        front_matter=front_matter,
        meta=build_post_meta(front_matter, slug=slug),
        toc=extract_toc_from_html(html),
    )
