"""Tag categories, per-file-type lexicons, and the row tokenizer."""

from .defaults import (
    C,
    DEFAULT_LEXICONS,
    RUST,
    default_registry,
    lexicon_for,
    load_default_lexicons,
)
from .lexicon import CATEGORIES, DEFAULT_LEXICON, Lexicon
from .registry import LexiconConflictError, LexiconRegistry, RegistryStats
from .tags import PALETTE, Tag
from .tokenizer import RULES, Token, is_separator, overlay_matches, tokenize

__all__ = [
    "C",
    "CATEGORIES",
    "DEFAULT_LEXICON",
    "DEFAULT_LEXICONS",
    "Lexicon",
    "LexiconConflictError",
    "LexiconRegistry",
    "PALETTE",
    "RULES",
    "RUST",
    "RegistryStats",
    "Tag",
    "Token",
    "default_registry",
    "is_separator",
    "lexicon_for",
    "load_default_lexicons",
    "overlay_matches",
    "tokenize",
]
