from __future__ import annotations

import pytest

from revise.buffer import RenderedCell, Row, SearchDirection
from revise.highlight import Lexicon, Tag

SAMPLES = ["hello world", "naïve café", "e\u0301te\u0301", "🇫🇷 flag 👍🏽", ""]


def test_length_counts_grapheme_clusters() -> None:
    row = Row("e\u0301a👍🏽")

    assert len(row) == 3
    assert row.length() == 3
    assert row.clusters == ("e\u0301", "a", "👍🏽")


def test_insert_appends_past_end_and_splices_inside() -> None:
    row = Row("ac")

    row.insert(1, "b")
    row.insert(10, "d")

    assert row.text == "abcd"


def test_insert_combining_mark_joins_previous_cluster() -> None:
    row = Row("ea")

    row.insert(1, "\u0301")

    assert len(row) == 2
    assert row.clusters == ("e\u0301", "a")


def test_delete_removes_whole_cluster_and_ignores_out_of_range() -> None:
    row = Row("e\u0301xy")

    row.delete(0)
    row.delete(5)

    assert row.text == "xy"


@pytest.mark.parametrize("text", [s for s in SAMPLES if s])
def test_insert_then_delete_is_identity(text: str) -> None:
    for at in range(len(Row(text))):
        row = Row(text)
        row.insert(at, "z")
        row.delete(at)
        assert row.text == text
        assert len(row) == len(Row(text))


@pytest.mark.parametrize("text", SAMPLES)
def test_split_then_append_reconstructs(text: str) -> None:
    for at in range(len(Row(text)) + 1):
        left = Row(text)
        right = left.split(at)
        assert len(left) == at
        left.append(right)
        assert left.text == text


def test_from_text_segments_like_constructor() -> None:
    row = Row.from_text("e\u0301a")

    assert row.clusters == ("e\u0301", "a")
    assert not row.is_fresh


def test_append_concatenates_clusters_without_resegmenting() -> None:
    row = Row("e")

    row.append(Row("\u0301x"))

    assert len(row) == 3
    assert row.clusters == ("e", "\u0301", "x")
    assert not row.is_fresh


def test_edits_mark_row_stale() -> None:
    lexicon = Lexicon(name="Plain")
    row = Row("abc")
    row.highlight(lexicon)
    assert row.is_fresh

    row.insert(0, "x")
    assert not row.is_fresh

    row.highlight(lexicon)
    tail = row.split(2)
    assert not row.is_fresh
    assert not tail.is_fresh


def test_render_window_and_tabs() -> None:
    row = Row("a\tb👍🏽c")

    cells = row.render(1, 4)

    assert cells == [
        RenderedCell(" ", Tag.NONE),
        RenderedCell("b", Tag.NONE),
        RenderedCell("👍🏽", Tag.NONE),
    ]
    assert row.render(3, 100)[-1].text == "c"
    assert row.render(10, 20) == []


def test_render_uses_tags_once_highlighted() -> None:
    row = Row("x 42")
    row.highlight(Lexicon(name="Numbers", numbers=True))

    assert [cell.tag for cell in row.render(0, 10)] == [
        Tag.NONE,
        Tag.NONE,
        Tag.NUMBER,
        Tag.NUMBER,
    ]


def test_find_forward_and_backward() -> None:
    row = Row("abcabc")

    assert row.find("bc", 0, SearchDirection.FORWARD) == 1
    assert row.find("bc", 2, SearchDirection.FORWARD) == 4
    assert row.find("bc", 6, SearchDirection.BACKWARD) == 4
    assert row.find("bc", 5, SearchDirection.BACKWARD) == 1
    assert row.find("bc", 2, SearchDirection.BACKWARD) is None
    assert row.find("zz", 0) is None
    assert row.find("a", 7) is None


def test_find_reports_cluster_index_not_code_points() -> None:
    row = Row("éé cafe\u0301 e")

    assert row.find("cafe\u0301", 0) == 3
    assert row.find("e", 0) == 8


@pytest.mark.parametrize(
    ("text", "query"),
    [("one two one two", "two"), ("naïve naïve", "ïv"), ("🇫🇷🇫🇷x🇫🇷", "🇫🇷")],
)
def test_forward_then_backward_find_is_symmetric(text: str, query: str) -> None:
    row = Row(text)
    at = 0
    while (found := row.find(query, at, SearchDirection.FORWARD)) is not None:
        end = found + len(Row(query))
        assert row.find(query, end, SearchDirection.BACKWARD) == found
        at = found + 1


def test_as_bytes_excludes_tags() -> None:
    row = Row("π = 3.14")
    row.highlight(Lexicon(name="Numbers", numbers=True))

    assert row.as_bytes() == "π = 3.14".encode("utf-8")
