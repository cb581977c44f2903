"""Ordered rows of a file plus the cross-row editing operations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from revise.highlight.defaults import default_registry
from revise.highlight.lexicon import Lexicon
from revise.highlight.registry import LexiconRegistry
from revise.runtime.telemetry import record_event, span

from .position import Position, SearchDirection
from .row import Row
from .sync import DocumentSnapshot


class DocumentError(RuntimeError):
    """Raised when a document operation cannot run in its current state."""


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` (dropping a trailing ``\\r``), ignoring a final newline."""

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Document:
    """Exclusive owner of a file's rows, its filename and dirty flag.

    Out-of-range positions are tolerated everywhere: edits become no-ops
    and searches return ``None``, since the caller's cursor may lag one
    operation behind.
    """

    def __init__(
        self,
        rows: Optional[Iterable[Row]] = None,
        *,
        filename: Optional[str] = None,
        registry: Optional[LexiconRegistry] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self._rows: List[Row] = list(rows or [])
        self._registry = registry if registry is not None else default_registry()
        self._logger_name = logger_name
        self.filename = filename
        self.lexicon: Lexicon = self._registry.resolve(filename)
        self.is_changed = False

    @classmethod
    def open(
        cls,
        lines: Iterable[str],
        filename: Optional[str] = None,
        *,
        registry: Optional[LexiconRegistry] = None,
    ) -> "Document":
        return cls(
            (Row(line) for line in lines), filename=filename, registry=registry
        )

    @classmethod
    def load(
        cls, path: str | Path, *, registry: Optional[LexiconRegistry] = None
    ) -> "Document":
        """Read ``path`` as UTF-8 and open it as a document."""

        filename = str(path)
        with span(
            "document::load", component="document", metadata={"filename": filename}
        ) as handle:
            text = Path(path).read_text(encoding="utf-8")
            document = cls.open(split_lines(text), filename, registry=registry)
            handle.add_metadata("rows", len(document))
            return document

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    @property
    def file_type(self) -> str:
        return self.lexicon.name

    def set_filename(self, filename: Optional[str]) -> None:
        """Rename the document and re-resolve its lexicon."""

        self.filename = filename
        lexicon = self._registry.resolve(filename)
        if lexicon != self.lexicon:
            self.lexicon = lexicon
            for row in self._rows:
                row.invalidate()

    def lines(self) -> List[str]:
        return [row.text for row in self._rows]

    def to_bytes(self) -> bytes:
        return b"".join(row.as_bytes() + b"\n" for row in self._rows)

    def snapshot(self) -> DocumentSnapshot:
        return DocumentSnapshot(
            filename=self.filename,
            file_type=self.file_type,
            lines=tuple(self.lines()),
            is_changed=self.is_changed,
        )

    def save(self, path: str | Path | None = None) -> int:
        """Write every row followed by a newline; returns bytes written."""

        if path is not None:
            self.set_filename(str(path))
        if not self.filename:
            raise DocumentError("Document has no filename to save to")
        with span(
            "document::save",
            component="document",
            metadata={"filename": self.filename},
        ) as handle:
            payload = self.to_bytes()
            Path(self.filename).write_bytes(payload)
            handle.add_metadata("bytes", len(payload))
        self.is_changed = False
        return len(payload)

    def insert(self, at: Position, ch: str) -> None:
        self.is_changed = True
        if ch == "\n":
            self.insert_newline(at)
        elif at.y == len(self._rows):
            self._rows.append(Row(ch))
        elif at.y < len(self._rows):
            self._rows[at.y].insert(at.x, ch)
        self._invalidate_around(at.y)

    def insert_newline(self, at: Position) -> None:
        self.is_changed = True
        if at.y >= len(self._rows):
            self._rows.append(Row())
            return
        with span(
            "document::insert_newline",
            logger_name=self._logger_name,
            metadata={"x": at.x, "y": at.y},
        ):
            tail = self._rows[at.y].split(at.x)
            self._rows.insert(at.y + 1, tail)

    def delete(self, at: Position) -> None:
        self.is_changed = True
        if at.y >= len(self._rows):
            return
        row = self._rows[at.y]
        if at.x == len(row) and at.y + 1 < len(self._rows):
            with span(
                "document::merge_rows",
                logger_name=self._logger_name,
                metadata={"y": at.y},
            ):
                row.append(self._rows.pop(at.y + 1))
        else:
            row.delete(at.x)
        self._invalidate_around(at.y)

    def find(
        self,
        query: str,
        at: Position,
        direction: SearchDirection = SearchDirection.FORWARD,
    ) -> Optional[Position]:
        """Search row by row from ``at``, wrapping x at each row boundary."""

        forward = direction is SearchDirection.FORWARD
        x = at.x
        rows = range(at.y, len(self._rows)) if forward else range(at.y, -1, -1)
        for y in rows:
            row = self.row(y)
            if row is None:
                return None
            found = row.find(query, x, direction)
            if found is not None:
                return Position(found, y)
            if forward:
                x = 0
            elif y > 0:
                x = len(self._rows[y - 1])
        return None

    def highlight(
        self, search_word: Optional[str] = None, until_row: Optional[int] = None
    ) -> None:
        """Re-tag rows up to ``until_row`` inclusive, top to bottom.

        Each row's "ends inside a block comment" result feeds the next
        row, so the pass is strictly sequential.
        """

        end = len(self._rows)
        if until_row is not None:
            end = min(until_row + 1, end)
        continued = False
        rescanned = 0
        for row in self._rows[:end]:
            if row.needs_scan(continued):
                rescanned += 1
            continued = row.highlight(self.lexicon, search_word, continued)
        if rescanned:
            record_event(
                "document.highlight",
                level="debug",
                data={"rows": end, "rescanned": rescanned, "search": bool(search_word)},
                logger_name=self._logger_name,
            )

    def _invalidate_around(self, y: int) -> None:
        for index in (y - 1, y):
            row = self.row(index)
            if row is not None:
                row.invalidate()
