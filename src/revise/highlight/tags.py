"""Lexical categories assigned to each grapheme and their display colours."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

RGB = Tuple[int, int, int]


class Tag(Enum):
    NONE = "none"
    NUMBER = "number"
    MATCH = "match"
    STRING = "string"
    BOOLEAN = "boolean"
    CHAR = "char"
    COMMENT = "comment"
    MULTILINE_COMMENT = "multiline_comment"
    PRIMARY_KEYWORD = "primary_keyword"
    SECONDARY_KEYWORD = "secondary_keyword"

    @property
    def color(self) -> RGB:
        return PALETTE[self]

    @property
    def hex(self) -> str:
        red, green, blue = self.color
        return f"#{red:02x}{green:02x}{blue:02x}"


PALETTE: Mapping[Tag, RGB] = MappingProxyType(
    {
        Tag.NONE: (255, 255, 255),
        Tag.NUMBER: (220, 163, 163),
        Tag.MATCH: (30, 139, 210),
        Tag.STRING: (211, 54, 130),
        Tag.BOOLEAN: (0, 0, 139),
        Tag.CHAR: (108, 113, 196),
        Tag.COMMENT: (133, 153, 0),
        Tag.MULTILINE_COMMENT: (133, 153, 0),
        Tag.PRIMARY_KEYWORD: (181, 137, 0),
        Tag.SECONDARY_KEYWORD: (42, 161, 152),
    }
)
