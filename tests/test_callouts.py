from folio.markdown.preprocessors.callouts import process_callouts


def test_plain_callout_with_title() -> None:
    result = process_callouts("[!note] Heads up\nBody line\n\nAfter")
    assert result == (
        '<div role="note" class="callout callout-note">'
        '<div class="callout-title">Heads up</div>'
        '<div class="callout-content">Body line</div></div>'
        "\n\nAfter"
    )


def test_type_name_is_the_default_header() -> None:
    result = process_callouts("[!TIP]\nUse the shortcut.")
    assert 'class="callout callout-tip"' in result
    assert '<div class="callout-title">Tip</div>' in result
    assert '<div class="callout-content">Use the shortcut.</div>' in result


def test_blockquote_callout_strips_quote_prefixes() -> None:
    result = process_callouts("> [!warning] Careful\n> line one\n> line two\nafter")
    assert result.startswith('<div role="note" class="callout callout-warning">')
    assert '<div class="callout-title">Careful</div>' in result
    assert '<div class="callout-content">line one\nline two</div>' in result
    assert result.endswith("</div>\nafter")


def test_next_marker_starts_a_new_callout() -> None:
    result = process_callouts("[!note]\nfirst\n[!danger]\nsecond")
    assert result.count('role="note"') == 2
    assert "callout-note" in result and "callout-danger" in result
    assert '<div class="callout-content">first</div>' in result


def test_text_without_marker_is_unchanged() -> None:
    text = "Just text with [note] and > a quote\n\n[!unknown] type"
    assert process_callouts(text) == text


def test_marker_inside_code_fence_is_untouched() -> None:
    text = "```\n[!note] literal\n```\n"
    assert process_callouts(text) == text
