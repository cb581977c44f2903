"""Lexicon registry that maps filename extensions to file types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, Iterable, Iterator, Optional

from revise.runtime.telemetry import record_event, span

from .lexicon import DEFAULT_LEXICON, Lexicon


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    lexicon_count: int
    extensions: tuple[str, ...]


class LexiconConflictError(RuntimeError):
    """Raised when a lexicon claims an extension another lexicon owns."""

    def __init__(self, lexicon: Lexicon, conflicts: Iterable[Lexicon]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Lexicon '{lexicon.name}' conflicts with "
            f"{[other.name for other in conflicts_tuple]}"
        )
        super().__init__(message)
        self.lexicon = lexicon
        self.conflicts = conflicts_tuple


class LexiconRegistry:
    """Owns the known lexicons and resolves filenames against them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._lexicons: Dict[str, Lexicon] = {}
        self._extension_index: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get(self, name: str) -> Lexicon:
        try:
            return self._lexicons[name]
        except KeyError as exc:
            raise KeyError(f"Lexicon '{name}' is not registered") from exc

    def __contains__(self, name: object) -> bool:
        return name in self._lexicons

    def __iter__(self) -> Iterator[Lexicon]:
        return iter(self._lexicons.values())

    def register(self, lexicon: Lexicon, *, replace: bool = False) -> Lexicon:
        with span(
            "lexicons::register",
            logger_name=self._logger_name,
            component="lexicons",
            metadata={"lexicon": lexicon.name},
        ) as handle:
            conflicts = self.detect_conflicts(lexicon)
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.name for conflict in conflicts)
                )
                raise LexiconConflictError(lexicon, conflicts)

            if replace:
                for conflict in conflicts:
                    self._drop(conflict.name)
                self._drop(lexicon.name)
            elif lexicon.name in self._lexicons:
                raise ValueError(f"Lexicon '{lexicon.name}' already registered")

            self._lexicons[lexicon.name] = lexicon
            for extension in lexicon.extensions:
                self._extension_index[extension] = lexicon.name
            self._revision += 1
            return lexicon

    def unregister(self, name: str) -> Optional[Lexicon]:
        lexicon = self._drop(name)
        if lexicon is not None:
            self._revision += 1
        return lexicon

    def detect_conflicts(self, lexicon: Lexicon) -> tuple[Lexicon, ...]:
        owners = {
            self._extension_index[extension]
            for extension in lexicon.extensions
            if extension in self._extension_index
        }
        owners.discard(lexicon.name)
        return tuple(self._lexicons[owner] for owner in sorted(owners))

    def resolve(self, filename: str | None) -> Lexicon:
        """Return the lexicon for ``filename`` or the default one."""

        if not filename:
            return DEFAULT_LEXICON
        suffix = PurePath(filename).suffix
        owner = self._extension_index.get(suffix)
        if owner is None:
            record_event(
                "lexicons.fallback",
                level="debug",
                data={"filename": filename, "suffix": suffix},
                logger_name=self._logger_name,
            )
            return DEFAULT_LEXICON
        return self._lexicons[owner]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            lexicon_count=len(self._lexicons),
            extensions=tuple(sorted(self._extension_index)),
        )

    def _drop(self, name: str) -> Optional[Lexicon]:
        lexicon = self._lexicons.pop(name, None)
        if lexicon is None:
            return None
        for extension in lexicon.extensions:
            if self._extension_index.get(extension) == name:
                del self._extension_index[extension]
        return lexicon
