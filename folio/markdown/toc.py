from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup, NavigableString, Tag

from .slugs import SlugRegistry

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    title_html: str
    children: list["HeadingNode"]


def _extract_heading_contents(heading: Tag) -> tuple[str, str]:
    """
    Return the plain text and inner HTML that should be displayed for a heading.

    Buttons inside headings (copy-link controls and the like) are skipped.
    """
    parts: list[str] = []
    html_parts: list[str] = []
    for child in heading.contents:
        if isinstance(child, NavigableString):
            value = str(child).strip()
            if value:
                parts.append(value)
                html_parts.append(value)
            continue

        if isinstance(child, Tag) and child.name == "button":
            continue

        if isinstance(child, Tag):
            text_value = child.get_text(separator=" ", strip=True)
            if text_value:
                parts.append(text_value)
            html_parts.append(str(child))

    text = " ".join(parts).strip()
    html = "".join(html_parts).strip() or text
    return text, html


def extract_toc_from_html(html: str, max_level: int = 6) -> list[HeadingNode]:
    """
    Given rendered HTML, return a hierarchical list of headings for a TOC.

    Each node contains:
        - level: Heading level (1-6)
        - id: HTML id/slug for the heading
        - title: Plain-text version of the heading
        - title_html: HTML snippet preserving inline formatting
        - children: Nested list of child headings

    Headings rendered without an id are slugged with a fresh registry, so the
    ids match what the heading_ids postprocessor would have assigned.
    """
    soup = BeautifulSoup(html, "html.parser")
    registry = SlugRegistry()
    toc: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(HEADING_TAGS[:max_level]):
        level = int(heading.name[1])  # "h2" -> 2
        text, html_contents = _extract_heading_contents(heading)
        if not text:
            continue

        identifier = heading.get("id")
        if identifier:
            registry.unique(identifier)
        else:
            identifier = registry.unique(text)

        node: HeadingNode = {
            "level": level,
            "id": identifier,
            "title": text,
            "title_html": html_contents,
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)

        stack.append(node)

    return toc


def flatten_toc(nodes: list[HeadingNode]) -> list[HeadingNode]:
    """Depth-first list of every node, for templates that render a flat index."""
    flat: list[HeadingNode] = []
    for node in nodes:
        flat.append(node)
        flat.extend(flatten_toc(node["children"]))
    return flat
