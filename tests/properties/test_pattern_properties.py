"""Property-based tests for prefix matching.

Verifies for arbitrary prefixes and files:
- A file built from the prefix (wildcards filled with any byte) matches.
- A file shorter than the prefix is TooShort with the exact lengths.
- A literal divergence is reported at the smallest divergent offset.
- All-wildcard prefixes match any long-enough file.
- Compilation round-trips to the original bytes.
"""
from __future__ import annotations

from hypothesis import assume, given
from hypothesis import strategies as st

from ensureprefix.core.pattern import (
    WILDCARD_BYTE,
    Matched,
    Mismatch,
    TooShort,
    WildcardByte,
    compile_pattern,
)

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

# Bias towards the wildcard byte so that patterns actually contain some.
prefix_bytes = st.lists(
    st.one_of(st.just(WILDCARD_BYTE), st.integers(min_value=0, max_value=255)),
    max_size=64,
).map(bytes)

any_bytes = st.binary(max_size=64)


@st.composite
def matching_file(draw: st.DrawFn) -> tuple[bytes, bytes]:
    """Draw a prefix and a file that starts with it."""
    prefix = draw(prefix_bytes)
    filled = bytes(
        draw(st.integers(min_value=0, max_value=255)) if b == WILDCARD_BYTE else b
        for b in prefix
    )
    return prefix, filled + draw(any_bytes)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@given(matching_file())
def test_prefix_with_filled_wildcards_matches(case: tuple[bytes, bytes]) -> None:
    prefix, data = case
    assert compile_pattern(prefix).matches(data) == Matched()


@given(prefix_bytes, any_bytes)
def test_short_file_is_too_short(prefix: bytes, data: bytes) -> None:
    assume(len(data) < len(prefix))
    assert compile_pattern(prefix).matches(data) == TooShort(len(data), len(prefix))


@given(prefix_bytes, any_bytes)
def test_mismatch_reports_smallest_divergent_offset(prefix: bytes, data: bytes) -> None:
    assume(len(data) >= len(prefix))
    divergent = [
        i for i, b in enumerate(prefix)
        if b != WILDCARD_BYTE and data[i] != b
    ]
    result = compile_pattern(prefix).matches(data)
    if divergent:
        assert result == Mismatch(min(divergent))
    else:
        assert result == Matched()


@given(st.integers(min_value=0, max_value=32), any_bytes)
def test_all_wildcard_prefix(length: int, data: bytes) -> None:
    pattern = compile_pattern(bytes([WILDCARD_BYTE]) * length)
    if len(data) >= length:
        assert pattern.matches(data) == Matched()
    else:
        assert pattern.matches(data) == TooShort(len(data), length)


@given(any_bytes)
def test_empty_prefix_matches_everything(data: bytes) -> None:
    assert compile_pattern(b"").matches(data) == Matched()


@given(prefix_bytes)
def test_compile_round_trip(prefix: bytes) -> None:
    pattern = compile_pattern(prefix)
    assert len(pattern) == len(prefix)
    assert pattern.to_bytes() == prefix
    assert all(
        isinstance(element, WildcardByte) == (byte == WILDCARD_BYTE)
        for element, byte in zip(pattern, prefix)
    )
