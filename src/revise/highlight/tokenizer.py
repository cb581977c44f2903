"""Single-row tokenizer producing one tag per grapheme cluster.

The scan walks a row left to right. At each position the rules in
``RULES`` are tried in order and the first one that matches consumes a run
of clusters; unmatched clusters are tagged ``Tag.NONE``. A row may start
inside a block comment opened on an earlier row, and reports whether it
leaves one open, so the caller can thread that state down the document.
"""

from __future__ import annotations

import string
from functools import lru_cache
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from revise.clusters import find_clusters, split_clusters

from .lexicon import Lexicon
from .tags import Tag

BLOCK_OPEN = ("/", "*")
BLOCK_CLOSE = ("*", "/")
LINE_COMMENT = ("/", "/")

_SEPARATORS = frozenset(string.punctuation) | frozenset(" \t\n\r\x0c")
_DIGITS = frozenset(string.digits)


class Token(NamedTuple):
    length: int
    tag: Tag
    unterminated: bool = False


Rule = Callable[[Sequence[str], int, Lexicon], Optional[Token]]


def is_separator(cluster: str) -> bool:
    """ASCII punctuation or whitespace; anything non-ASCII never separates."""

    return cluster in _SEPARATORS


def _is_digit(cluster: str) -> bool:
    return cluster in _DIGITS


def _starts_with(clusters: Sequence[str], index: int, marker: Tuple[str, ...]) -> bool:
    return tuple(clusters[index : index + len(marker)]) == marker


def find_block_close(clusters: Sequence[str], start: int) -> Optional[int]:
    """Index just past the first ``*/`` at or after ``start``."""

    found = find_clusters(clusters, BLOCK_CLOSE, start, len(clusters))
    if found is None:
        return None
    return found + len(BLOCK_CLOSE)


def _block_comment(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    if not lexicon.multiline_comments or not _starts_with(clusters, index, BLOCK_OPEN):
        return None
    end = find_block_close(clusters, index + len(BLOCK_OPEN))
    if end is None:
        return Token(len(clusters) - index, Tag.MULTILINE_COMMENT, unterminated=True)
    return Token(end - index, Tag.MULTILINE_COMMENT)


def _char_literal(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    if not lexicon.chars or clusters[index] != "'":
        return None
    closer = index + 1
    if closer < len(clusters) and clusters[closer] == "\\":
        closer += 1
    closer += 1
    if closer >= len(clusters):
        return Token(len(clusters) - index, Tag.CHAR)
    if clusters[closer] == "'":
        return Token(closer + 1 - index, Tag.CHAR)
    return None


def _line_comment(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    if not lexicon.comments or not _starts_with(clusters, index, LINE_COMMENT):
        return None
    return Token(len(clusters) - index, Tag.COMMENT)


@lru_cache(maxsize=64)
def _keyword_clusters(keywords: Tuple[str, ...]) -> Tuple[Tuple[str, ...], ...]:
    split = (tuple(split_clusters(keyword)) for keyword in keywords)
    return tuple(sorted(split, key=len, reverse=True))


def _match_keyword(
    clusters: Sequence[str], index: int, keywords: Tuple[str, ...], tag: Tag
) -> Optional[Token]:
    if not keywords:
        return None
    # Only the raw cluster before the keyword is checked, never its tag.
    if index > 0 and not is_separator(clusters[index - 1]):
        return None
    for keyword in _keyword_clusters(keywords):
        end = index + len(keyword)
        if end > len(clusters) or tuple(clusters[index:end]) != keyword:
            continue
        if end < len(clusters) and not is_separator(clusters[end]):
            continue
        return Token(len(keyword), tag)
    return None


def _primary_keyword(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    return _match_keyword(
        clusters, index, lexicon.primary_keywords, Tag.PRIMARY_KEYWORD
    )


def _secondary_keyword(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    return _match_keyword(
        clusters, index, lexicon.secondary_keywords, Tag.SECONDARY_KEYWORD
    )


def _string_literal(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    if not lexicon.strings or clusters[index] != '"':
        return None
    closer = find_clusters(clusters, ('"',), index + 1, len(clusters))
    if closer is None:
        return Token(len(clusters) - index, Tag.STRING)
    return Token(closer + 1 - index, Tag.STRING)


def _number(
    clusters: Sequence[str], index: int, lexicon: Lexicon
) -> Optional[Token]:
    if not lexicon.numbers or not _is_digit(clusters[index]):
        return None
    if index > 0 and not is_separator(clusters[index - 1]):
        return None
    end = index + 1
    while end < len(clusters):
        if _is_digit(clusters[end]):
            end += 1
        elif clusters[end] == "." and end + 1 < len(clusters) and _is_digit(
            clusters[end + 1]
        ):
            end += 1
        else:
            break
    return Token(end - index, Tag.NUMBER)


RULES: tuple[Rule, ...] = (
    _block_comment,
    _char_literal,
    _line_comment,
    _primary_keyword,
    _secondary_keyword,
    _string_literal,
    _number,
)


def tokenize(
    clusters: Sequence[str], lexicon: Lexicon, continued_from_comment: bool = False
) -> Tuple[List[Tag], bool]:
    """Tag every cluster of a row.

    Returns the tags and whether the row ends inside an open block comment.
    """

    length = len(clusters)
    tags: List[Tag] = []
    index = 0
    open_comment = False

    if continued_from_comment and lexicon.multiline_comments:
        end = find_block_close(clusters, 0)
        if end is None:
            return [Tag.MULTILINE_COMMENT] * length, True
        tags.extend([Tag.MULTILINE_COMMENT] * end)
        index = end

    while index < length:
        for rule in RULES:
            token = rule(clusters, index, lexicon)
            if token is not None:
                break
        else:
            tags.append(Tag.NONE)
            index += 1
            continue
        tags.extend([token.tag] * token.length)
        index += token.length
        open_comment = token.unterminated

    return tags, open_comment


def overlay_matches(clusters: Sequence[str], tags: List[Tag], word: str) -> int:
    """Force every non-overlapping occurrence of ``word`` to ``Tag.MATCH``.

    Mutates ``tags`` in place and returns how many occurrences were marked.
    """

    needle = split_clusters(word)
    if not needle:
        return 0
    count = 0
    start = 0
    while True:
        found = find_clusters(clusters, needle, start, len(clusters))
        if found is None:
            return count
        end = found + len(needle)
        tags[found:end] = [Tag.MATCH] * len(needle)
        count += 1
        start = end
