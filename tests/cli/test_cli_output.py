"""Tests for CLI output formatting helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ensureprefix.cli.output import describe, print_report, print_targets, status_name
from ensureprefix.core.pattern import Matched, Mismatch, TooShort
from ensureprefix.core.verifier import FileResult, Report
from ensureprefix.workspace import Package, Target, TargetKind


class TestStatusName:
    @pytest.mark.parametrize(
        "result, name",
        [(Matched(), "matched"), (TooShort(1, 2), "too_short"), (Mismatch(0), "mismatch")],
    )
    def test_names(self, result, name: str) -> None:
        assert status_name(result) == name

    def test_unknown_result(self) -> None:
        with pytest.raises(TypeError):
            status_name("nope")  # type: ignore[arg-type]


class TestDescribe:
    def test_too_short(self) -> None:
        assert describe(TooShort(actual=3, required=10)) == "file has 3 of 10 prefix bytes"

    def test_mismatch(self) -> None:
        assert describe(Mismatch(offset=7)) == "first difference at byte offset 7"

    def test_matched_is_empty(self) -> None:
        assert describe(Matched()) == ""


class TestPrintReport:
    def test_table_and_summary(self, capsys) -> None:
        report = Report((
            FileResult("core", "a.rs", Matched()),
            FileResult("core", "b.rs", Mismatch(4)),
        ))
        print_report(report)
        out = capsys.readouterr().out
        assert "Prefix Check Results" in out
        assert "b.rs" in out
        assert "2 files checked | 1 matched | 1 failed" in out

    def test_all_matched_summary(self, capsys) -> None:
        print_report(Report((FileResult("core", "a.rs", Matched()),)))
        out = capsys.readouterr().out
        assert "1 files checked | 1 matched" in out
        assert "failed" not in out


class TestPrintTargets:
    def test_lists_targets(self, capsys) -> None:
        package = Package(
            name="core",
            manifest_path=Path("/ws/core/Cargo.toml"),
            targets=[Target(TargetKind.LIB, "core", Path("/ws/core/src/lib.rs"))],
        )
        print_targets([package])
        out = capsys.readouterr().out
        assert "Workspace Targets" in out
        assert "lib" in out
