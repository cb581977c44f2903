"""Row and document buffers with cluster-aware editing and search."""

from .document import Document, DocumentError, split_lines
from .position import Position, SearchDirection
from .row import Row
from .sync import DocumentSnapshot, RenderedCell

__all__ = [
    "Document",
    "DocumentError",
    "DocumentSnapshot",
    "Position",
    "RenderedCell",
    "Row",
    "SearchDirection",
    "split_lines",
]
