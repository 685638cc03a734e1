"""Prefix patterns with single-byte wildcards.

A ``PrefixPattern`` is compiled once from the raw bytes of the prefix file.
Every byte equal to the wildcard byte (``0x1A`` by default) becomes a
``WildcardByte`` that accepts any single byte at that offset; every other
byte must match exactly.

Usage::

    from ensureprefix.core.pattern import compile_pattern, Matched

    pattern = compile_pattern(b"// Copyright \\x1a\\x1a\\x1a\\x1a")
    result = pattern.matches(b"// Copyright 2023 Example Corp")
    assert result == Matched()

Matching is byte-wise. A wildcard stands for exactly one byte, never for a
multi-byte encoded character, and there is no escape for a literal ``0x1A``.
"""

from ensureprefix.core.pattern.models import (
    WILDCARD,
    LiteralByte,
    Matched,
    MatchResult,
    Mismatch,
    PatternByte,
    TooShort,
    WildcardByte,
)
from ensureprefix.core.pattern.pattern import WILDCARD_BYTE, PrefixPattern, compile_pattern

__all__ = [
    "LiteralByte",
    "MatchResult",
    "Matched",
    "Mismatch",
    "PatternByte",
    "PrefixPattern",
    "TooShort",
    "WILDCARD",
    "WILDCARD_BYTE",
    "WildcardByte",
    "compile_pattern",
]
