# folio/markdown/postprocessors/heading_ids.py

from bs4 import BeautifulSoup

from ..slugs import SlugRegistry

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def add_heading_ids(html: str, context: dict) -> str:
    """
    Give every heading (h1-h6) a stable id for anchors and the table of contents.

    Ids come from the render's SlugRegistry, so repeated headings become
    "intro", "intro-2", ... Headings that already carry an id keep it and
    reserve it in the registry.
    """
    registry = context.get("slugs")
    if registry is None:
        registry = context["slugs"] = SlugRegistry()

    soup = BeautifulSoup(html, "html.parser")
    for heading in soup.find_all(HEADING_TAGS):
        existing = heading.get("id")
        if existing:
            registry.unique(existing)
            continue
        heading["id"] = registry.unique(heading.get_text(" ", strip=True))

    return str(soup)
