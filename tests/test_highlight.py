from __future__ import annotations

from revise.buffer import Row
from revise.highlight import RUST, Lexicon, Tag, is_separator, tokenize

PLAIN = Lexicon(name="Plain")
LITERALS = Lexicon(name="Literals", numbers=True, strings=True, comments=True)
BLOCKS = Lexicon(name="Blocks", multiline_comments=True, comments=True)
KEYWORDS = Lexicon(
    name="Keywords",
    primary_keywords=("if", "in", "format"),
    secondary_keywords=("i32", "&str"),
)


def tags_of(text: str, lexicon: Lexicon, continued: bool = False) -> list[Tag]:
    row = Row(text)
    row.highlight(lexicon, continued_from_comment=continued)
    return list(row.tags)


def spans(text: str, tags: list[Tag]) -> list[tuple[str, Tag]]:
    """Collapse per-cluster tags into (text, tag) runs for readable asserts."""

    row = Row(text)
    result: list[tuple[str, Tag]] = []
    for cluster, tag in zip(row.clusters, tags):
        if result and result[-1][1] is tag:
            result[-1] = (result[-1][0] + cluster, tag)
        else:
            result.append((cluster, tag))
    return result


def test_separator_predicate_is_ascii_only() -> None:
    assert is_separator(" ")
    assert is_separator(",")
    assert is_separator("\t")
    assert not is_separator("a")
    assert not is_separator("\u00a0")
    assert not is_separator("。")


def test_string_then_comment_swallows_number() -> None:
    text = 'he said "go" // stop 42'

    result = spans(text, tags_of(text, LITERALS))

    assert result == [
        ("he said ", Tag.NONE),
        ('"go"', Tag.STRING),
        (" ", Tag.NONE),
        ("// stop 42", Tag.COMMENT),
    ]


def test_tag_count_matches_cluster_count() -> None:
    text = "é = 1; // 👍🏽"
    tags = tags_of(text, RUST)

    assert len(tags) == len(Row(text))


def test_unterminated_string_runs_to_end_of_row() -> None:
    text = 'x = "open'

    assert spans(text, tags_of(text, LITERALS))[-1] == ('"open', Tag.STRING)


def test_numbers_need_leading_separator() -> None:
    text = "x1 (12.5) .5 1.2.3 7."

    result = spans(text, tags_of(text, LITERALS))

    assert ("12.5", Tag.NUMBER) in result
    assert ("1.2.3", Tag.NUMBER) in result
    assert ("x1 (", Tag.NONE) == result[0]
    # a leading dot never starts a number, the digit after it does
    assert (") .", Tag.NONE) in result
    assert ("5", Tag.NUMBER) in result
    assert result[-2:] == [("7", Tag.NUMBER), (".", Tag.NONE)]


def test_block_comment_continues_to_next_row() -> None:
    first = Row("let a = 1; /* start")
    second = Row("end */ x")

    assert first.highlight(BLOCKS) is True
    assert first.tags[-1] is Tag.MULTILINE_COMMENT
    assert second.highlight(BLOCKS, continued_from_comment=True) is False
    assert spans("end */ x", second.tags) == [
        ("end */", Tag.MULTILINE_COMMENT),
        (" x", Tag.NONE),
    ]


def test_block_comment_closed_on_same_row() -> None:
    text = "a /* b */ c"

    assert Row(text).highlight(BLOCKS) is False
    assert spans(text, tags_of(text, BLOCKS)) == [
        ("a ", Tag.NONE),
        ("/* b */", Tag.MULTILINE_COMMENT),
        (" c", Tag.NONE),
    ]


def test_whole_row_inside_continued_comment() -> None:
    row = Row("still // commented")

    assert row.highlight(BLOCKS, continued_from_comment=True) is True
    assert set(row.tags) == {Tag.MULTILINE_COMMENT}


def test_block_opener_needs_its_own_closer() -> None:
    assert Row("/*/").highlight(BLOCKS) is True


def test_continuation_ignored_without_multiline_comments() -> None:
    row = Row("end */ x")

    assert row.highlight(PLAIN, continued_from_comment=True) is False
    assert set(row.tags) == {Tag.NONE}


def test_keyword_requires_trailing_separator() -> None:
    assert set(tags_of("ifdef", KEYWORDS)) == {Tag.NONE}
    assert spans("if x", tags_of("if x", KEYWORDS)) == [
        ("if", Tag.PRIMARY_KEYWORD),
        (" x", Tag.NONE),
    ]


def test_keyword_requires_leading_separator() -> None:
    assert spans("xif in", tags_of("xif in", KEYWORDS)) == [
        ("xif ", Tag.NONE),
        ("in", Tag.PRIMARY_KEYWORD),
    ]
    assert Tag.PRIMARY_KEYWORD not in tags_of("formatted", KEYWORDS)


def test_secondary_keywords_and_punctuation_keywords() -> None:
    text = "(a: &str, b: i32)"

    result = spans(text, tags_of(text, KEYWORDS))

    assert ("&str", Tag.SECONDARY_KEYWORD) in result
    assert ("i32", Tag.SECONDARY_KEYWORD) in result


def test_char_literals() -> None:
    text = "'a' '\\n' it's ok"
    lexicon = Lexicon(name="Chars", chars=True)

    result = spans(text, tags_of(text, lexicon))

    assert result == [
        ("'a'", Tag.CHAR),
        (" ", Tag.NONE),
        ("'\\n'", Tag.CHAR),
        (" it's ok", Tag.NONE),
    ]


def test_unterminated_char_literal_at_end_of_row() -> None:
    lexicon = Lexicon(name="Chars", chars=True)

    assert spans("x = 'a", tags_of("x = 'a", lexicon))[-1] == ("'a", Tag.CHAR)


def test_rust_lifetime_is_not_a_char_literal() -> None:
    tags = tags_of("fn f<'a>(x: &'a str)", RUST)

    assert Tag.CHAR not in tags


def test_disabled_categories_are_not_tagged() -> None:
    text = '"s" 42 // c /* d'

    assert set(tags_of(text, PLAIN)) == {Tag.NONE}


def test_search_overlay_overrides_base_tags() -> None:
    row = Row('let x = "find me"; find')

    row.highlight(RUST, search_word="find")

    matched = [i for i, tag in enumerate(row.tags) if tag is Tag.MATCH]
    assert matched == [9, 10, 11, 12, 19, 20, 21, 22]
    assert row.tags[0] is Tag.PRIMARY_KEYWORD


def test_search_overlay_does_not_stick_after_clearing() -> None:
    row = Row("abc abc")
    row.highlight(PLAIN, search_word="abc")
    assert Tag.MATCH in row.tags

    row.highlight(PLAIN)

    assert set(row.tags) == {Tag.NONE}


def test_fresh_row_is_not_retagged() -> None:
    row = Row("let x = 5;")
    row.highlight(RUST)
    before = row.tags
    snapshot = list(before)

    row.highlight(RUST)

    assert row.tags is before
    assert row.tags == snapshot


def test_fresh_row_reports_cached_continuation() -> None:
    row = Row("x /* open")
    assert row.highlight(BLOCKS) is True
    before = row.tags

    assert row.highlight(BLOCKS) is True
    assert row.tags is before


def test_changed_continuation_forces_rescan() -> None:
    row = Row("a */ b")
    row.highlight(BLOCKS)
    assert set(row.tags) == {Tag.NONE}

    row.highlight(BLOCKS, continued_from_comment=True)

    assert row.tags[:4] == [Tag.MULTILINE_COMMENT] * 4


def test_tokenize_returns_tags_and_state() -> None:
    lexicon = Lexicon(name="Both", numbers=True, multiline_comments=True)

    tags, open_comment = tokenize(list("1 /*"), lexicon)

    assert tags == [Tag.NUMBER, Tag.NONE, Tag.MULTILINE_COMMENT, Tag.MULTILINE_COMMENT]
    assert open_comment is True


def test_needs_scan_tracks_freshness_and_continuation() -> None:
    row = Row("a */ b")
    assert row.needs_scan()

    row.highlight(BLOCKS)

    assert not row.needs_scan()
    assert row.needs_scan(continued_from_comment=True)
    row.highlight(BLOCKS, continued_from_comment=True)
    assert not row.needs_scan(continued_from_comment=True)
