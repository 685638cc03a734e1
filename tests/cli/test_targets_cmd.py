"""Tests for the ``cargo-ensure-prefix targets`` command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ensureprefix.cli.main import cli


class TestTargetsCommand:
    def test_json_lists_all_members(self, runner: CliRunner, workspace_root: Path) -> None:
        result = runner.invoke(cli, [
            "targets", "--manifest-path", str(workspace_root / "Cargo.toml"),
            "--all", "--format", "json",
        ])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "package": "workspace_root",
                "kind": "lib",
                "name": "workspace_root",
                "path": str(workspace_root / "src" / "lib.rs"),
            },
            {
                "package": "wbin",
                "kind": "bin",
                "name": "wbin",
                "path": str(workspace_root / "wbin" / "src" / "main.rs"),
            },
            {
                "package": "wlib",
                "kind": "lib",
                "name": "wlib",
                "path": str(workspace_root / "wlib" / "src" / "lib.rs"),
            },
        ]

    def test_default_members(self, runner: CliRunner, workspace_root: Path) -> None:
        result = runner.invoke(cli, [
            "targets", "--manifest-path", str(workspace_root / "Cargo.toml"), "--format", "json",
        ])
        assert [t["package"] for t in json.loads(result.output)] == ["workspace_root", "wlib"]

    def test_text_table(self, runner: CliRunner, workspace_root: Path) -> None:
        result = runner.invoke(cli, [
            "targets", "--manifest-path", str(workspace_root / "Cargo.toml"), "-p", "wbin",
        ])
        assert result.exit_code == 0
        assert "Workspace Targets" in result.output
        assert "wbin" in result.output

    def test_unknown_package(self, runner: CliRunner, workspace_root: Path) -> None:
        result = runner.invoke(cli, [
            "targets", "--manifest-path", str(workspace_root / "Cargo.toml"), "-p", "nope",
        ])
        assert result.exit_code == 2
        assert "Didn't find matching package(s)" in result.output

    def test_all_and_package(self, runner: CliRunner, workspace_root: Path) -> None:
        result = runner.invoke(cli, [
            "targets", "--manifest-path", str(workspace_root / "Cargo.toml"), "--all", "-p", "wbin",
        ])
        assert result.exit_code == 2
        assert "Cannot specify --all and --package" in result.output
