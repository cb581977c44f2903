"""A single line of text indexed by grapheme cluster, with cached tags."""

from __future__ import annotations

from typing import List, Optional

from revise.clusters import find_clusters, split_clusters
from revise.highlight.lexicon import Lexicon
from revise.highlight.tags import Tag
from revise.highlight.tokenizer import overlay_matches, tokenize

from .position import SearchDirection
from .sync import RenderedCell


class Row:
    """Editable line content plus the tags produced by the last highlight.

    Every index is a grapheme cluster count. ``tags`` only mirrors the
    content while ``is_fresh`` is set; edits leave the old tags in place
    until the next ``highlight`` call.
    """

    __slots__ = (
        "_content",
        "_base_tags",
        "_tags",
        "_continued_from",
        "_continues",
        "is_fresh",
    )

    def __init__(self, text: str = "") -> None:
        self._content: List[str] = split_clusters(text)
        self._base_tags: List[Tag] = []
        self._tags: List[Tag] = self._base_tags
        self._continued_from = False
        self._continues = False
        self.is_fresh = False

    @classmethod
    def from_text(cls, text: str) -> "Row":
        return cls(text)

    @classmethod
    def from_clusters(cls, clusters: List[str]) -> "Row":
        row = cls()
        row._content = clusters
        return row

    def __len__(self) -> int:
        return len(self._content)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Row({self.text!r})"

    def length(self) -> int:
        return len(self._content)

    def is_empty(self) -> bool:
        return not self._content

    @property
    def text(self) -> str:
        return "".join(self._content)

    @property
    def clusters(self) -> tuple[str, ...]:
        return tuple(self._content)

    @property
    def tags(self) -> List[Tag]:
        """Tags from the last highlight; treat as read-only."""

        return self._tags

    def as_bytes(self) -> bytes:
        return self.text.encode("utf-8")

    def invalidate(self) -> None:
        self.is_fresh = False

    def insert(self, at: int, ch: str) -> None:
        if at >= len(self._content):
            text = self.text + ch
        else:
            text = "".join(self._content[:at]) + ch + "".join(self._content[at:])
        # Re-segment so combining marks join the cluster they follow.
        self._content = split_clusters(text)
        self.is_fresh = False

    def delete(self, at: int) -> None:
        if at >= len(self._content):
            return
        del self._content[at]
        self._content = split_clusters(self.text)
        self.is_fresh = False

    def append(self, other: "Row") -> None:
        self._content = self._content + list(other._content)
        self.is_fresh = False

    def split(self, at: int) -> "Row":
        tail = Row.from_clusters(self._content[at:])
        self._content = self._content[:at]
        self.is_fresh = False
        return tail

    def render(self, start: int, end: int) -> List[RenderedCell]:
        end = min(end, len(self._content))
        start = min(start, end)
        cells: List[RenderedCell] = []
        for index in range(start, end):
            cluster = self._content[index]
            tag = self._tags[index] if index < len(self._tags) else Tag.NONE
            cells.append(RenderedCell(" " if cluster == "\t" else cluster, tag))
        return cells

    def find(
        self,
        query: str,
        at: int,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[int]:
        if at > len(self._content):
            return None
        needle = split_clusters(query)
        if direction is SearchDirection.FORWARD:
            return find_clusters(self._content, needle, at, len(self._content))
        return find_clusters(self._content, needle, 0, at, reverse=True)

    def needs_scan(self, continued_from_comment: bool = False) -> bool:
        """Whether the next highlight has to re-tag the content."""

        return not self.is_fresh or self._continued_from != continued_from_comment

    def highlight(
        self,
        lexicon: Lexicon,
        search_word: Optional[str] = None,
        continued_from_comment: bool = False,
    ) -> bool:
        """Tag the row and report whether it ends inside a block comment.

        The content scan is skipped when the row is fresh and was last
        scanned with the same continuation state. The search overlay is
        rebuilt on every call and never counts towards freshness.
        """

        if self.needs_scan(continued_from_comment):
            self._base_tags, self._continues = tokenize(
                self._content, lexicon, continued_from_comment
            )
            self._continued_from = continued_from_comment
            self.is_fresh = True

        if search_word:
            tags = list(self._base_tags)
            overlay_matches(self._content, tags, search_word)
            self._tags = tags
        else:
            self._tags = self._base_tags
        return self._continues
