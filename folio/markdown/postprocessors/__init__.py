# folio/markdown/postprocessors/__init__.py

from .heading_ids import add_heading_ids
from .sanitizer import sanitize_html
from .text_direction import text_direction

POSTPROCESSORS = [
    sanitize_html,  # Must run first, on the raw Pandoc output
    add_heading_ids,  # Slug ids for anchors and the table of contents
    text_direction,  # dir="rtl"/"ltr" on text blocks
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
