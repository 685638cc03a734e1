"""The verification pass over a sequence of candidate files.

``verify`` is stateless: it matches every candidate, never stops at the
first failure, and never raises for a failing file. Each match depends only
on the pattern and one candidate, so the optional worker pool needs no
locking; ``Executor.map`` yields results in submission order, which keeps
the report in input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from ensureprefix.core.pattern import PrefixPattern
from ensureprefix.core.verifier.models import CandidateFile, FileResult, Report

logger = logging.getLogger(__name__)


def _check(pattern: PrefixPattern, candidate: CandidateFile) -> FileResult:
    return FileResult(
        package=candidate.package,
        path=candidate.path,
        result=pattern.matches(candidate.leading_bytes),
    )


def verify(
    pattern: PrefixPattern,
    files: Iterable[CandidateFile],
    *,
    jobs: int | None = None,
) -> Report:
    """Check every candidate file against the pattern.

    Args:
        pattern: The compiled prefix pattern.
        files: Candidates in the order they should be reported.
        jobs: Number of worker threads. ``None``, 0 or 1 runs sequentially.

    Returns:
        A ``Report`` with exactly one entry per candidate, in input order.

    Raises:
        ValueError: If ``jobs`` is negative.
    """
    if jobs is not None and jobs < 0:
        raise ValueError(f"jobs must not be negative: {jobs}")

    candidates = list(files)
    if jobs and jobs > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            entries = tuple(executor.map(lambda c: _check(pattern, c), candidates))
    else:
        entries = tuple(_check(pattern, candidate) for candidate in candidates)

    report = Report(entries=entries)
    logger.debug(
        "Checked %d file(s): %d matched, %d failed",
        len(report), report.matched_count, report.failed_count,
    )
    return report
