# folio/markdown/preprocessors/__init__.py

import logging
from typing import Callable, NamedTuple, Optional

from ..config import ProcessorOptions, get_processor_options
from ..slugs import SlugRegistry
from .abbreviations import abbreviations_default
from .callouts import callouts_default
from .comments import comments_default
from .definition_lists import definition_lists_default
from .embeds import embeds_default
from .emojis import emojis_default
from .footnotes import footnotes_default
from .image_sizes import image_sizes_default
from .inline_extras import inline_extras_default
from .internal_links import internal_links_default
from .issue_links import issue_links_default
from .mentions import mentions_default
from .spoilers import spoilers_default
from .tags import tags_default

logger = logging.getLogger(__name__)


class Preprocessor(NamedTuple):
    name: str
    func: Callable[[str, dict], str]
    # ProcessorOptions attribute that switches the stage off, None = always on
    flag: Optional[str] = None


PREPROCESSORS = (
    Preprocessor("callouts", callouts_default),
    Preprocessor("footnotes", footnotes_default),
    Preprocessor("inline_extras", inline_extras_default),
    Preprocessor("definition_lists", definition_lists_default),
    Preprocessor("abbreviations", abbreviations_default),
    Preprocessor("emojis", emojis_default, "enable_emojis"),
    Preprocessor("spoilers", spoilers_default),
    Preprocessor("comments", comments_default, "enable_comments_removal"),
    Preprocessor("tags", tags_default, "enable_tags"),
    Preprocessor("issue_links", issue_links_default),
    Preprocessor("mentions", mentions_default),
    Preprocessor("internal_links", internal_links_default, "enable_internal_links"),
    Preprocessor("embeds", embeds_default, "enable_embeds"),
    Preprocessor("image_sizes", image_sizes_default, "enable_image_sizes"),
    # Order matters - later stages must not re-read HTML emitted by earlier ones
)


def build_context(options=None, **extra):
    """
    Create the per-render context shared by pre- and post-processors.

    ``options`` may be a ProcessorOptions instance or a mapping of option
    names. Scratch state (slug registry, footnote table) is fresh for every
    call and never shared between documents.
    """
    if not isinstance(options, ProcessorOptions):
        options = get_processor_options(**(options or {}))
    context = {
        "options": options,
        "slugs": SlugRegistry(),
        "footnotes": None,
    }
    context.update(extra)
    return context


def apply_preprocessors(text, context):
    """Apply all enabled preprocessors in order"""
    options = context.get("options")
    if options is None:
        options = context["options"] = get_processor_options()

    for preprocessor in PREPROCESSORS:
        if preprocessor.flag and not getattr(options, preprocessor.flag):
            logger.debug("Skipping disabled preprocessor %s", preprocessor.name)
            continue
        text = preprocessor.func(text, context)
    return text


def compose_processors(text, options=None):
    """Run the enrichment pipeline over a markdown body with fresh state."""
    return apply_preprocessors(text, build_context(options))
