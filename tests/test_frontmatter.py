from folio.markdown.frontmatter import FrontMatter, Scalar, Sequence, parse_front_matter


def test_parses_scalars_and_bracket_lists() -> None:
    doc = '---\ntitle: "Hello World"\ntags: [a, b, c]\n---\nBody text'
    result = parse_front_matter(doc)

    assert result.data == {"title": Scalar("Hello World"), "tags": Sequence(["a", "b", "c"])}
    assert result.as_dict() == {"title": "Hello World", "tags": ["a", "b", "c"]}
    assert result.body == "Body text"


def test_document_without_front_matter_is_all_body() -> None:
    doc = "# Title\n\nNo metadata here."
    result = parse_front_matter(doc)
    assert result.data == {}
    assert result.body == doc


def test_unterminated_block_is_not_front_matter() -> None:
    doc = "---\ntitle: Draft\nBody"
    assert parse_front_matter(doc) == FrontMatter(data={}, body=doc)


def test_single_quotes_are_stripped_and_mismatched_quotes_kept() -> None:
    doc = "---\na: 'single'\nb: \"mixed'\n---\n"
    assert parse_front_matter(doc).as_dict() == {"a": "single", "b": "\"mixed'"}


def test_comma_separated_tags_become_a_sequence() -> None:
    doc = "---\nTags: python, django ,\nsummary: one, two\n---\n"
    data = parse_front_matter(doc).data
    assert data["Tags"] == Sequence(["python", "django"])
    assert data["summary"] == Scalar("one, two")


def test_single_tag_without_comma_stays_scalar() -> None:
    doc = "---\ntags: python\n---\n"
    assert parse_front_matter(doc).data["tags"] == Scalar("python")


def test_value_keeps_everything_after_first_colon() -> None:
    doc = "---\nurl: https://example.com:8080/x\n---\n"
    assert parse_front_matter(doc).get("url") == "https://example.com:8080/x"


def test_continuation_lines_extend_scalars() -> None:
    doc = "---\nsummary: first line\n  second line\n---\n"
    assert parse_front_matter(doc).get("summary") == "first line\nsecond line"


def test_continuation_items_extend_sequences() -> None:
    doc = "---\ntags: [a]\n  - b\n  * c\n---\n"
    assert parse_front_matter(doc).get("tags") == ["a", "b", "c"]


def test_block_list_after_empty_value() -> None:
    doc = "---\ntags:\n  - python\n  - testing\n---\nBody"
    result = parse_front_matter(doc)
    assert result.get("tags") == ["python", "testing"]
    assert result.body == "Body"


def test_malformed_lines_are_skipped_and_last_duplicate_wins() -> None:
    doc = "---\nnot a pair\ntitle: First\ntitle: Second\n   \n---\n"
    assert parse_front_matter(doc).as_dict() == {"title": "Second"}


def test_empty_bracket_list() -> None:
    doc = "---\ntags: []\n---\n"
    assert parse_front_matter(doc).data["tags"] == Sequence([])


def test_get_returns_default_for_missing_keys() -> None:
    assert parse_front_matter("body").get("title", "untitled") == "untitled"


def test_free_text_under_a_list_folds_into_a_scalar() -> None:
    doc = "---\ntags: [a, b]\n  more text\n---\n"
    result = parse_front_matter(doc)
    assert result.data["tags"] == Scalar("a,b\nmore text")
    assert result.get("tags") == "a,b\nmore text"
