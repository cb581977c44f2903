"""Per-file-type highlighting configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import FrozenSet, Iterable

CATEGORIES: tuple[str, ...] = (
    "numbers",
    "strings",
    "chars",
    "comments",
    "multiline_comments",
)


def _normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    result: list[str] = []
    for keyword in keywords:
        if not keyword or keyword != keyword.strip():
            raise ValueError(f"Invalid keyword {keyword!r}")
        if keyword not in result:
            result.append(keyword)
    return tuple(result)


def _normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    values = []
    for extension in extensions:
        cleaned = extension.strip()
        if not cleaned or cleaned == ".":
            raise ValueError(f"Invalid extension {extension!r}")
        if not cleaned.startswith("."):
            cleaned = f".{cleaned}"
        values.append(cleaned)
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Which tag categories are active for a file type, plus its keywords.

    Keyword order is preserved; duplicates are dropped. The tokenizer tries
    longer keywords first, so the order only matters for display.
    """

    name: str
    extensions: tuple[str, ...] = ()
    numbers: bool = False
    strings: bool = False
    chars: bool = False
    comments: bool = False
    multiline_comments: bool = False
    primary_keywords: tuple[str, ...] = ()
    secondary_keywords: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Lexicon name cannot be empty")
        object.__setattr__(self, "extensions", _normalize_extensions(self.extensions))
        object.__setattr__(
            self, "primary_keywords", _normalize_keywords(self.primary_keywords)
        )
        object.__setattr__(
            self, "secondary_keywords", _normalize_keywords(self.secondary_keywords)
        )

    @property
    def enabled(self) -> FrozenSet[str]:
        return frozenset(name for name in CATEGORIES if getattr(self, name))

    @classmethod
    def from_filename(cls, filename: str | None) -> "Lexicon":
        """Resolve ``filename`` against the shared built-in registry."""

        from .defaults import default_registry

        return default_registry().resolve(filename)

    def matches(self, filename: str) -> bool:
        return PurePath(filename).suffix in self.extensions


DEFAULT_LEXICON = Lexicon(name="No filetype")
