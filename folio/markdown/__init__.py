from .frontmatter import FrontMatter, Scalar, Sequence, parse_front_matter
from .preprocessors import compose_processors
from .renderer import RENDER_FALLBACK_MESSAGE, render_document, render_markdown
from .slugs import SlugRegistry, slugify_heading

__all__ = [
    "FrontMatter",
    "RENDER_FALLBACK_MESSAGE",
    "Scalar",
    "Sequence",
    "SlugRegistry",
    "compose_processors",
    "parse_front_matter",
    "render_document",
    "render_markdown",
    "slugify_heading",
]
