import time

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from folio.markdown.config import ProcessorOptions
from folio.markdown.preprocessors import PREPROCESSORS, build_context, compose_processors
from folio.markdown.preprocessors.comments import process_comments
from folio.markdown.preprocessors.issue_links import process_issue_links
from folio.markdown.preprocessors.spoilers import process_spoilers

FENCED = "```\n[!note] :rocket: #tag @bob #7 [[Page]] ![[a.png]] ==m== x^2^ [^1] >!s!< <!-- c -->\n```"


def test_stage_order() -> None:
    assert [p.name for p in PREPROCESSORS] == [
        "callouts",
        "footnotes",
        "inline_extras",
        "definition_lists",
        "abbreviations",
        "emojis",
        "spoilers",
        "comments",
        "tags",
        "issue_links",
        "mentions",
        "internal_links",
        "embeds",
        "image_sizes",
    ]


@pytest.mark.parametrize("preprocessor", PREPROCESSORS, ids=lambda p: p.name)
def test_every_stage_leaves_fenced_code_alone(preprocessor) -> None:
    context = build_context({"github_repo": "o/r", "tags_base_url": "https://t/"})
    text = f"intro\n\n{FENCED}\n\noutro"
    assert FENCED in preprocessor.func(text, context)


def test_issue_mention_scenario() -> None:
    result = compose_processors(
        "Check this: #42 and see owner/repo#7, cc @alice",
        {"issue_base_url": "https://x/issues/", "mentions_base_url": "https://gh/"},
    )
    assert '<a href="https://x/issues/42">#42</a>' in result
    assert '<a href="https://github.com/owner/repo/issues/7">owner/repo#7</a>' in result
    assert '<a href="https://gh/alice">@alice</a>' in result


def test_stages_compose() -> None:
    text = "[!tip] Shortcut\nPress ==Ctrl== :tada:\n\nSee [[Setup]] and ![[demo.mp4]]"
    result = compose_processors(text)
    assert '<div class="callout-content">Press <mark>Ctrl</mark> \U0001F389</div>' in result
    assert '<a href="#setup">Setup</a>' in result
    assert '<video controls src="demo.mp4"></video>' in result


@pytest.mark.parametrize(
    "options, text",
    [
        ({"enable_emojis": False}, ":rocket:"),
        ({"enableEmojis": False}, ":rocket:"),
        ({"enable_comments_removal": False}, "<!-- keep -->"),
        ({"enable_tags": False}, "#python"),
        ({"enable_internal_links": False}, "[[Page]]"),
        ({"enable_embeds": False}, "![[a.png]]"),
        ({"enable_image_sizes": False}, "![a](a.png =10x10)"),
    ],
)
def test_disabled_stages_pass_through(options, text) -> None:
    assert compose_processors(text, options) == text


def test_output_is_deterministic() -> None:
    text = "# Intro\n\nA[^n] #tag @me :fire:\n\n[^n]: note\n*[A]: Letter"
    assert compose_processors(text) == compose_processors(text)


def test_context_state_is_per_call() -> None:
    first, second = build_context(), build_context()
    assert first["slugs"] is not second["slugs"]
    assert isinstance(first["options"], ProcessorOptions)


def test_footnote_table_is_left_in_context() -> None:
    from folio.markdown.preprocessors import apply_preprocessors

    context = build_context()
    apply_preprocessors("A[^x]\n\n[^x]: note", context)
    assert list(context["footnotes"].items()) == [("x", "note")]


def test_unknown_option_is_a_configuration_error() -> None:
    with pytest.raises(ImproperlyConfigured):
        compose_processors("text", {"enable_everything": True})


def test_settings_provide_defaults() -> None:
    with override_settings(FOLIO_MARKDOWN={"enable_tags": False, "spoilerClassName": "hidden"}):
        assert compose_processors("#python >!x!<") == '#python <span class="hidden">x</span>'
        # call options win over settings
        assert compose_processors("#python", {"enable_tags": True}) == '<span class="tag">#python</span>'


def test_later_stages_leave_earlier_markup_alone() -> None:
    result = compose_processors("*[API]: Owned by @alice #team\nAPI docs")
    assert result == '<abbr title="Owned by @alice #team">API</abbr> docs'


def test_markdown_link_fragments_survive() -> None:
    text = "[see](https://example.com/docs/page#12)"
    assert compose_processors(text) == text


@pytest.mark.parametrize(
    "stage, text",
    [
        (process_spoilers, ">!" * 20000),
        (process_comments, "<!--" * 10000),
        (process_comments, "[//: # (" * 5000),
        (process_issue_links, "a-" * 20000),
        (process_issue_links, "a/" * 20000),
    ],
    ids=["spoilers", "html-comments", "inline-comments", "repo-hyphens", "repo-slashes"],
)
def test_unclosed_markers_scan_in_linear_time(stage, text) -> None:
    started = time.perf_counter()
    assert stage(text) == text
    assert time.perf_counter() - started < 1.0
