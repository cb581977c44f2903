"""Paint highlighted document rows with rich styles inside a Textual widget."""

from __future__ import annotations

from functools import lru_cache
from itertools import groupby
from operator import attrgetter
from typing import Any, Iterable, List, Optional

from rich.style import Style
from rich.text import Text

try:  # pragma: no cover - exercised only where textual is installed
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use revise.adapters.textual"
    ) from exc

from revise.buffer import Document, RenderedCell
from revise.highlight.tags import Tag

EMPTY_ROW_MARKER = "~"


@lru_cache(maxsize=None)
def style_for(tag: Tag) -> Style:
    return Style(color=tag.hex)


def render_cells(cells: Iterable[RenderedCell]) -> Text:
    """Join cells into one ``Text``, one span per run of equal tags."""

    text = Text(no_wrap=True, end="")
    for tag, run in groupby(cells, key=attrgetter("tag")):
        text.append("".join(cell.text for cell in run), style=style_for(tag))
    return text


def render_window(
    document: Document,
    *,
    top: int,
    height: int,
    left: int = 0,
    width: int = 80,
    search_word: Optional[str] = None,
) -> List[Text]:
    """Highlight through the last visible row and render ``height`` lines.

    Rows past the end of the document are drawn as ``EMPTY_ROW_MARKER``.
    """

    document.highlight(search_word, until_row=top + height)
    lines: List[Text] = []
    for y in range(top, top + height):
        row = document.row(y)
        if row is None:
            lines.append(Text(EMPTY_ROW_MARKER, style=style_for(Tag.NONE), end=""))
            continue
        lines.append(render_cells(row.render(left, left + width)))
    return lines


class DocumentView(Static):
    """Static widget showing the visible slice of a document."""

    def __init__(
        self,
        document: Document,
        *,
        search_word: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__("", **kwargs)
        self.document = document
        self.search_word = search_word
        self.top = 0
        self.left = 0

    def on_mount(self) -> None:
        self.refresh_window()

    def on_resize(self) -> None:
        self.refresh_window()

    def scroll_to_position(self, top: int, left: int = 0) -> None:
        self.top = max(0, top)
        self.left = max(0, left)
        self.refresh_window()

    def set_search_word(self, word: Optional[str]) -> None:
        self.search_word = word or None
        self.refresh_window()

    def refresh_window(self) -> None:
        height = self.size.height or 24
        width = self.size.width or 80
        lines = render_window(
            self.document,
            top=self.top,
            height=height,
            left=self.left,
            width=width,
            search_word=self.search_word,
        )
        self.update(Text("\n").join(lines))
