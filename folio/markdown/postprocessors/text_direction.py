# folio/markdown/postprocessors/text_direction.py
"""
Postprocessor that marks the writing direction of text blocks.

Each paragraph, heading, list item and blockquote receives ``dir="rtl"`` or
``dir="ltr"`` (``auto`` when it holds no text). Right-to-left blocks also get
an ``rtl`` class so the stylesheet can mirror borders and indents.
"""

from bs4 import BeautifulSoup

from ..bidi import detect_direction

DIRECTIONAL_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "blockquote"]


def text_direction(html: str, context: dict) -> str:
    soup = BeautifulSoup(html, "html.parser")

    for block in soup.find_all(DIRECTIONAL_TAGS):
        direction = detect_direction(block.get_text())
        block["dir"] = direction
        if direction == "rtl":
            classes = block.get("class", [])
            if "rtl" not in classes:
                block["class"] = classes + ["rtl"]

    return str(soup)
