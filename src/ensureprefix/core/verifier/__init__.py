"""Verification engine: match many candidate files against one prefix.

The engine consumes an already-filtered, already-read enumeration of
``CandidateFile`` records and returns a ``Report`` with one entry per
candidate, in input order, plus an aggregate ``Verdict``. It knows nothing
about packages beyond carrying their names through to the report.

Submodules
----------
- ``models``: CandidateFile, FileResult, Report, Verdict.
- ``engine``: the ``verify`` function.

::

    from ensureprefix.core.verifier import CandidateFile, verify

    report = verify(pattern, [CandidateFile("app", "src/main.rs", data)])
    if not report.is_success:
        for entry in report.failures:
            print(entry.path, entry.result)
"""

from ensureprefix.core.verifier.engine import verify
from ensureprefix.core.verifier.models import CandidateFile, FileResult, Report, Verdict

__all__ = [
    "CandidateFile",
    "FileResult",
    "Report",
    "Verdict",
    "verify",
]
