"""Rich output formatting helpers for the cargo-ensure-prefix CLI.

Status Color Mapping:
    MATCHED = green, TOO SHORT = yellow, MISMATCH = bold red
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ensureprefix.core.pattern import Matched, MatchResult, Mismatch, TooShort
from ensureprefix.core.verifier import Report
from ensureprefix.workspace import Package

console = Console()

_STATUS_STYLES: dict[str, str] = {
    "matched": "green",
    "too_short": "yellow",
    "mismatch": "bold red",
}


def status_name(result: MatchResult) -> str:
    """Stable machine-readable name of a match result."""
    if isinstance(result, Matched):
        return "matched"
    if isinstance(result, TooShort):
        return "too_short"
    if isinstance(result, Mismatch):
        return "mismatch"
    raise TypeError(f"unknown match result: {result!r}")


def describe(result: MatchResult) -> str:
    """One-line human explanation of a match result."""
    if isinstance(result, TooShort):
        return f"file has {result.actual} of {result.required} prefix bytes"
    if isinstance(result, Mismatch):
        return f"first difference at byte offset {result.offset}"
    return ""


def print_report(report: Report) -> None:
    """Print a per-file table and a one-line summary.

    Args:
        report: The verification report to display.
    """
    table = Table(title="Prefix Check Results", show_header=True, header_style="bold")
    table.add_column("File", style="bold", overflow="fold")
    table.add_column("Package", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Detail")

    for entry in report:
        status = status_name(entry.result)
        label = Text(status.replace("_", " ").upper(), style=_STATUS_STYLES[status])
        table.add_row(entry.path, entry.package, label, describe(entry.result))

    console.print(table)
    _print_summary(report)


def _print_summary(report: Report) -> None:
    parts = [f"[bold]{len(report)}[/bold] files checked"]
    if report.matched_count:
        parts.append(f"[green]{report.matched_count} matched[/green]")
    if report.failed_count:
        parts.append(f"[red]{report.failed_count} failed[/red]")
    console.print(" | ".join(parts))


def print_targets(packages: list[Package]) -> None:
    """Print the resolved targets of the selected packages."""
    table = Table(title="Workspace Targets", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Kind")
    table.add_column("Name", style="dim")
    table.add_column("Source", overflow="fold")
    for package in packages:
        for target in package.targets:
            table.add_row(package.name, target.kind.value, target.name, str(target.src_path))
    console.print(table)
