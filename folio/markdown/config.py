from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

SETTINGS_KEY = "FOLIO_MARKDOWN"

# camelCase names used by front-end configuration files
_OPTION_ALIASES = {
    "enableEmojis": "enable_emojis",
    "enableCommentsRemoval": "enable_comments_removal",
    "enableTags": "enable_tags",
    "enableInternalLinks": "enable_internal_links",
    "enableEmbeds": "enable_embeds",
    "enableImageSizes": "enable_image_sizes",
    "githubRepo": "github_repo",
    "issueBaseUrl": "issue_base_url",
    "mentionsBaseUrl": "mentions_base_url",
    "tagsBaseUrl": "tags_base_url",
    "spoilerClassName": "spoiler_class_name",
    "emojiMapOverride": "emoji_map_override",
    "internalLinkBasePath": "internal_link_base_path",
}


@dataclass(frozen=True)
class ProcessorOptions:
    """Switches and settings for the markdown enrichment pipeline."""

    enable_emojis: bool = True
    enable_comments_removal: bool = True
    enable_tags: bool = True
    enable_internal_links: bool = True
    enable_embeds: bool = True
    enable_image_sizes: bool = True
    github_repo: str | None = None
    issue_base_url: str | None = None
    mentions_base_url: str = "https://github.com/"
    tags_base_url: str | None = None
    spoiler_class_name: str | None = None
    emoji_map_override: Mapping[str, str] = field(default_factory=dict)
    internal_link_base_path: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "ProcessorOptions":
        return cls().merged(mapping)

    def merged(self, mapping: Mapping[str, Any] | None) -> "ProcessorOptions":
        """Return a copy with ``mapping`` applied on top of these options."""
        if not mapping:
            return self

        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ImproperlyConfigured(f"Unknown markdown option: {key!r}")
            changes[name] = value
        return replace(self, **changes)


def _settings_options() -> Mapping[str, Any]:
    if not settings.configured:
        return {}
    value = getattr(settings, SETTINGS_KEY, None) or {}
    if not isinstance(value, Mapping):
        raise ImproperlyConfigured(f"{SETTINGS_KEY} must be a mapping")
    return value


def get_processor_options(**overrides) -> ProcessorOptions:
    """
    Resolve pipeline options.

    Defaults come from ProcessorOptions, then the FOLIO_MARKDOWN Django
    setting, then keyword overrides.
    """
    options = ProcessorOptions().merged(_settings_options()).merged(overrides)
    logger.debug("Resolved markdown options: %s", options)
    return options


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Footnotes, definition lists, superscript/subscript and heading ids are
    produced by our own pre/post-processors, so the matching Pandoc
    extensions are switched off to keep Pandoc from re-interpreting them.
    """
    extensions = [
        "+autolink_bare_uris",
        "+strikeout",
        "+task_lists",
        "+pipe_tables",
        "+fenced_code_blocks",
        "+fenced_code_attributes",
        "+backtick_code_blocks",
        "+raw_html",
        "+markdown_in_html_blocks",
        "+tex_math_dollars",
        "-footnotes",
        "-definition_lists",
        "-superscript",
        "-subscript",
        "-auto_identifiers",
    ]
    return {
        "format": "markdown" + "".join(extensions),
        "to": "html5",
        "extra_args": [
            "--mathjax",
            "--wrap=none",
        ],
    }
