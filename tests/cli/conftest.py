"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from ensureprefix.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def run_check(
    runner: CliRunner, workspace_root: Path, prefix_file: Callable[[str], Path]
) -> Callable[..., object]:
    """Run ``ensure-prefix`` against the shared workspace with a named prefix."""

    def _run(prefix: str, *args: str):
        return runner.invoke(
            cli,
            [
                "ensure-prefix",
                f"--prefix-path={prefix_file(prefix)}",
                f"--manifest-path={workspace_root / 'Cargo.toml'}",
                *args,
            ],
        )

    return _run
