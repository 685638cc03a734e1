"""Compilation and matching of prefix patterns."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

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

# ASCII SUB ("substitute"). Marks a wildcard position in the prefix file.
WILDCARD_BYTE: int = 0x1A


@dataclass(frozen=True)
class PrefixPattern:
    """An immutable, ordered sequence of pattern bytes.

    Build instances with ``PrefixPattern.compile`` (or ``compile_pattern``)
    rather than directly. The pattern keeps the wildcard byte it was compiled
    with so that ``to_bytes`` can reproduce the original prefix file.

    Attributes:
        elements: One ``LiteralByte`` or ``WildcardByte`` per prefix byte.
        wildcard_byte: The byte value that was read as a wildcard.
    """

    elements: tuple[PatternByte, ...]
    wildcard_byte: int = WILDCARD_BYTE

    @classmethod
    def compile(
        cls, prefix_bytes: bytes, wildcard_byte: int = WILDCARD_BYTE
    ) -> PrefixPattern:
        """Compile raw prefix bytes into a pattern.

        Args:
            prefix_bytes: The complete contents of the prefix file.
            wildcard_byte: Byte value that designates a wildcard position.

        Returns:
            A pattern with exactly ``len(prefix_bytes)`` positions. An empty
            input gives an empty pattern, which every file matches.

        Raises:
            ValueError: If ``wildcard_byte`` is not in ``range(256)``.
        """
        if not 0 <= wildcard_byte <= 0xFF:
            raise ValueError(f"wildcard byte out of range: {wildcard_byte!r}")
        elements = tuple(
            WILDCARD if byte == wildcard_byte else LiteralByte(byte)
            for byte in bytes(prefix_bytes)
        )
        return cls(elements=elements, wildcard_byte=wildcard_byte)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[PatternByte]:
        return iter(self.elements)

    @property
    def wildcard_offsets(self) -> tuple[int, ...]:
        """Offsets of every wildcard position, in ascending order."""
        return tuple(
            i for i, element in enumerate(self.elements)
            if isinstance(element, WildcardByte)
        )

    @property
    def wildcard_count(self) -> int:
        return len(self.wildcard_offsets)

    def to_bytes(self) -> bytes:
        """Reconstruct the prefix bytes this pattern was compiled from."""
        return bytes(
            self.wildcard_byte if isinstance(element, WildcardByte) else element.value
            for element in self.elements
        )

    def matches(self, candidate_bytes: bytes) -> MatchResult:
        """Match the leading bytes of a file against this pattern.

        A candidate shorter than the pattern is ``TooShort`` without looking
        at its content. Otherwise positions are compared in order and the
        first one that fails yields ``Mismatch`` with that offset.

        Args:
            candidate_bytes: The file's leading bytes. Bytes past the pattern
                length are ignored.

        Returns:
            ``Matched``, ``TooShort(actual, required)`` or ``Mismatch(offset)``.
        """
        required = len(self.elements)
        if len(candidate_bytes) < required:
            return TooShort(actual=len(candidate_bytes), required=required)

        for offset, element in enumerate(self.elements):
            if not element.accepts(candidate_bytes[offset]):
                return Mismatch(offset=offset)
        return Matched()


def compile_pattern(prefix_bytes: bytes, wildcard_byte: int = WILDCARD_BYTE) -> PrefixPattern:
    """Compile raw prefix bytes into a ``PrefixPattern``.

    Shorthand for ``PrefixPattern.compile``.
    """
    return PrefixPattern.compile(prefix_bytes, wildcard_byte)
