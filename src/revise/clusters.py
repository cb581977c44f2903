"""Grapheme cluster helpers shared by rows and the tokenizer."""

from __future__ import annotations

from typing import List, Optional, Sequence

import grapheme


def split_clusters(text: str) -> List[str]:
    """Return ``text`` as a list of user-perceived characters."""

    return list(grapheme.graphemes(text))


def find_clusters(
    haystack: Sequence[str],
    needle: Sequence[str],
    start: int,
    end: int,
    *,
    reverse: bool = False,
) -> Optional[int]:
    """Locate ``needle`` fully inside ``haystack[start:end]``.

    Returns the index of the first occurrence, or of the last one when
    ``reverse`` is set. Empty needles never match.
    """

    width = len(needle)
    end = min(end, len(haystack))
    if width == 0 or start < 0 or end - start < width:
        return None

    candidates = range(start, end - width + 1)
    if reverse:
        candidates = reversed(candidates)
    first = needle[0]
    for index in candidates:
        if haystack[index] == first and list(haystack[index : index + width]) == list(
            needle
        ):
            return index
    return None
