"""Data models for prefix patterns: pattern bytes and match results.

Both ``PatternByte`` and ``MatchResult`` are closed sets of variants. They
are plain frozen dataclasses joined by a ``Union`` alias, so callers
dispatch with ``isinstance`` over a fixed list of cases instead of relying
on overridden methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# PatternByte: one position of a compiled prefix
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiteralByte:
    """A pattern position that requires exactly ``value``.

    Attributes:
        value: The required byte, in ``range(256)``.
    """

    value: int

    def accepts(self, byte: int) -> bool:
        return byte == self.value


@dataclass(frozen=True)
class WildcardByte:
    """A pattern position that accepts any single byte."""

    def accepts(self, byte: int) -> bool:
        return True


WILDCARD = WildcardByte()

PatternByte = Union[LiteralByte, WildcardByte]


# ---------------------------------------------------------------------------
# MatchResult: outcome of matching one file against a pattern
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Matched:
    """The file starts with the prefix."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class TooShort:
    """The file is shorter than the prefix and can never contain it.

    Attributes:
        actual: Number of bytes available in the file.
        required: Length of the prefix pattern.
    """

    actual: int
    required: int

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Mismatch:
    """The file diverges from the prefix.

    Attributes:
        offset: Zero-based offset of the first differing byte. Later
            differences are not reported.
    """

    offset: int

    @property
    def ok(self) -> bool:
        return False


MatchResult = Union[Matched, TooShort, Mismatch]
