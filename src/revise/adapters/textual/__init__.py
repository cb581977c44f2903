"""Textual/rich rendering of highlighted document windows."""

from .view import DocumentView, render_cells, render_window, style_for

__all__ = ["DocumentView", "render_cells", "render_window", "style_for"]
