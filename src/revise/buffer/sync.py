"""Adapter boundary types handed to rendering and file collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from revise.highlight.tags import Tag


@dataclass(frozen=True, slots=True)
class RenderedCell:
    """One visible grapheme and the tag it should be painted with."""

    text: str
    tag: Tag = Tag.NONE


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """Host-friendly summary of a document for status lines and save hooks."""

    filename: str | None
    file_type: str
    lines: tuple[str, ...]
    is_changed: bool

    @property
    def line_count(self) -> int:
        return len(self.lines)
