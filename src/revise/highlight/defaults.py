"""Built-in lexicons and the shared registry seeded with them."""

from __future__ import annotations

from typing import Optional

from .lexicon import Lexicon
from .registry import LexiconRegistry

RUST = Lexicon(
    name="Rust",
    extensions=(".rs",),
    numbers=True,
    strings=True,
    chars=True,
    comments=True,
    multiline_comments=True,
    primary_keywords=(
        "as",
        "break",
        "const",
        "continue",
        "crate",
        "else",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "self",
        "Self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
        "dyn",
        "abstract",
        "become",
        "box",
        "do",
        "final",
        "macro",
        "override",
        "priv",
        "typeof",
        "unsized",
        "virtual",
        "yield",
        "async",
        "await",
        "try",
    ),
    secondary_keywords=(
        "bool",
        "char",
        "i8",
        "i16",
        "i32",
        "i64",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "usize",
        "f32",
        "f64",
        "String",
        "&str",
        "Vec",
        "std",
        "core",
        "alloc",
        "Result",
        "Box",
        "Error",
        "Option",
        "Default",
        "Clone",
        "Copy",
        "PartialEq",
        "Debug",
        "Instant",
    ),
)

C = Lexicon(
    name="C",
    extensions=(".c", ".h"),
    numbers=True,
    strings=True,
    chars=True,
    comments=True,
    multiline_comments=True,
    primary_keywords=(
        "break",
        "case",
        "const",
        "continue",
        "default",
        "do",
        "else",
        "enum",
        "extern",
        "for",
        "goto",
        "if",
        "inline",
        "register",
        "return",
        "sizeof",
        "static",
        "struct",
        "switch",
        "typedef",
        "union",
        "volatile",
        "while",
        "NULL",
    ),
    secondary_keywords=(
        "char",
        "double",
        "float",
        "int",
        "long",
        "short",
        "signed",
        "unsigned",
        "void",
        "size_t",
        "bool",
    ),
)

DEFAULT_LEXICONS: tuple[Lexicon, ...] = (RUST, C)

_SHARED_REGISTRY: Optional[LexiconRegistry] = None


def load_default_lexicons(registry: LexiconRegistry) -> LexiconRegistry:
    for lexicon in DEFAULT_LEXICONS:
        registry.register(lexicon, replace=True)
    return registry


def default_registry() -> LexiconRegistry:
    """Return the process-wide registry holding the built-in lexicons."""

    global _SHARED_REGISTRY
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = load_default_lexicons(LexiconRegistry())
    return _SHARED_REGISTRY


def lexicon_for(filename: str | None) -> Lexicon:
    return default_registry().resolve(filename)
