"""File reading at the edge of the core.

Loads the prefix file into a ``PrefixPattern`` and reads just enough of
each target source file to build its ``CandidateFile``. Files are always
opened in binary mode; nothing here decodes text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ensureprefix.core.pattern import WILDCARD_BYTE, PrefixPattern
from ensureprefix.core.verifier import CandidateFile
from ensureprefix.exceptions import PrefixSourceError

logger = logging.getLogger(__name__)


def load_prefix(path: str | Path, wildcard_byte: int = WILDCARD_BYTE) -> PrefixPattern:
    """Read the prefix file and compile it.

    Raises:
        PrefixSourceError: If the file cannot be read.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        logger.debug("Cannot read prefix file %s: %s", path, exc)
        raise PrefixSourceError(str(path)) from exc
    pattern = PrefixPattern.compile(data, wildcard_byte)
    logger.debug(
        "Loaded %d-byte prefix from %s (%d wildcard position(s))",
        len(pattern), path, pattern.wildcard_count,
    )
    return pattern


def read_leading_bytes(path: Path, length: int) -> bytes:
    """Read at most ``length`` bytes from the start of a file.

    Short reads are retried until ``length`` bytes arrive or the file ends.
    """
    chunks: list[bytes] = []
    remaining = length
    with path.open("rb") as fh:
        while remaining > 0:
            chunk = fh.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    return b"".join(chunks)


def read_candidates(pairs: Iterable[tuple[str, Path]], length: int) -> list[CandidateFile]:
    """Build one ``CandidateFile`` per ``(package, path)`` pair, in order.

    A file that cannot be opened is logged and treated as empty, so it still
    shows up in the report instead of disappearing from it.
    """
    candidates: list[CandidateFile] = []
    for package, path in pairs:
        try:
            data = read_leading_bytes(path, length)
        except OSError as exc:
            logger.warning("Error reading %s: %s", path, exc)
            data = b""
        candidates.append(CandidateFile(package=package, path=str(path), leading_bytes=data))
    return candidates
