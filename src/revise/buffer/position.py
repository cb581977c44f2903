"""Cursor coordinates and search direction used across the buffer layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class Position:
    """Grapheme column ``x`` on row ``y``.

    Validity is contextual: callers own the cursor and may hand in a
    position that is briefly out of range, which every buffer operation
    tolerates.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position cannot be negative: ({self.x}, {self.y})")

