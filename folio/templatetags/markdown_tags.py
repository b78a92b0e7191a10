# folio/templatetags/markdown_tags.py

import logging

from django import template
from django.utils.html import escape
from django.utils.safestring import mark_safe

from folio.markdown.frontmatter import parse_front_matter
from folio.markdown.renderer import RENDER_FALLBACK_MESSAGE, render_markdown
from folio.markdown.toc import extract_toc_from_html

logger = logging.getLogger(__name__)

register = template.Library()


def _render_or_fallback(value, context=None):
    try:
        return mark_safe(render_markdown(value or "", context=context))
    except Exception:
        logger.exception("Markdown rendering failed")
        return mark_safe(f'<p class="render-error">{escape(RENDER_FALLBACK_MESSAGE)}</p>')


@register.filter(name="markdown")
def markdown_filter(value):
    """Render a document, dropping any front matter block."""
    return _render_or_fallback(parse_front_matter(value or "").body)


@register.filter(name="markdown_toc")
def markdown_toc_filter(html):
    """Table of contents nodes for already rendered HTML."""
    return extract_toc_from_html(str(html or ""))


@register.simple_tag(takes_context=True)
def markdown_with_options(context, value):
    """Template tag that passes "markdown_options" from the template context to processors"""
    options = context.get("markdown_options")
    return _render_or_fallback(parse_front_matter(value or "").body, context={"options": options})
