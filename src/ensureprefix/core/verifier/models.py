"""Data models for the verification engine: candidates, results, report.

These are pure data holders. The CLI formatters and the JSON serializer
import them without pulling in the engine itself.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from ensureprefix.core.pattern import MatchResult


# ---------------------------------------------------------------------------
# CandidateFile: one file to check, with its leading bytes already read
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CandidateFile:
    """A target source file to be checked against the prefix.

    Attributes:
        package: Name of the package the file belongs to.
        path: Path of the file, as it should appear in the report.
        leading_bytes: The first bytes of the file. At least as long as the
            pattern unless the file itself is shorter.
    """

    package: str
    path: str
    leading_bytes: bytes


# ---------------------------------------------------------------------------
# FileResult / Verdict / Report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileResult:
    """The match result for one candidate, keyed by its identity."""

    package: str
    path: str
    result: MatchResult

    @property
    def matched(self) -> bool:
        return self.result.ok


class Verdict(Enum):
    """Aggregate outcome of a verification run."""

    ALL_MATCHED = "all_matched"
    SOME_FAILED = "some_failed"


@dataclass(frozen=True)
class Report:
    """Complete outcome of one verification run.

    Attributes:
        entries: One ``FileResult`` per candidate, in input order.
    """

    entries: tuple[FileResult, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FileResult]:
        return iter(self.entries)

    @property
    def verdict(self) -> Verdict:
        """``ALL_MATCHED`` iff every entry matched (vacuously true when empty)."""
        if all(entry.matched for entry in self.entries):
            return Verdict.ALL_MATCHED
        return Verdict.SOME_FAILED

    @property
    def is_success(self) -> bool:
        return self.verdict is Verdict.ALL_MATCHED

    @property
    def failures(self) -> list[FileResult]:
        """Entries that did not match, in input order."""
        return [entry for entry in self.entries if not entry.matched]

    @property
    def matched_count(self) -> int:
        return sum(1 for entry in self.entries if entry.matched)

    @property
    def failed_count(self) -> int:
        return len(self.entries) - self.matched_count
