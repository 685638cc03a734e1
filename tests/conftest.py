"""Shared fixtures for cargo-ensure-prefix tests.

The ``workspace_root`` fixture builds a three-package Cargo workspace:

    workspace_root/          [package] workspace_root, [workspace]
        src/lib.rs
        wbin/src/main.rs     member listed in workspace.members
        wlib/src/lib.rs      member through a path dependency

``default-members`` is ``[".", "wlib"]``, so the default selection skips
``wbin``. ``wbin/src/main.rs`` has a different second line from the two
libraries, which is what the prefix fixtures below rely on.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ROOT_LIB = b"// Copyright 2021 Example Corp.\n// Licensed under MIT.\n\npub fn root() {}\n"
WLIB_LIB = b"// Copyright 2022 Example Corp.\n// Licensed under MIT.\n\npub fn lib() {}\n"
WBIN_MAIN = (
    b"// Copyright 2023 Example Corp.\n\n"
    b"fn main() {\n    println!(\"hello\");\n}\n"
)

PREFIXES: dict[str, bytes] = {
    # Every file starts with this.
    "short": b"// Copyright ",
    # wbin lacks the license line.
    "long": b"// Copyright \x1a\x1a\x1a\x1a Example Corp.\n// Licensed under MIT.\n",
    # No file starts with this.
    "other": b"/* Proprietary */\n",
    # Year is a wildcard; every file matches.
    "wildcard": b"// Copyright \x1a\x1a\x1a\x1a Example Corp.\n",
    # Longer than wbin/src/main.rs.
    "really_long": b"// Copyright " + b"\x1a" * 200,
}


def write(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content)
    return path


@pytest.fixture
def make_crate() -> Callable[..., Path]:
    """Factory that writes a package manifest plus source files.

    Returns the path of the written ``Cargo.toml``.
    """

    def _make(
        root: Path,
        name: str,
        files: dict[str, str | bytes] | None = None,
        extra: str = "",
    ) -> Path:
        manifest = write(
            root / "Cargo.toml",
            f'[package]\nname = "{name}"\nversion = "0.1.0"\nedition = "2021"\n{extra}',
        )
        for rel, content in (files or {}).items():
            write(root / rel, content)
        return manifest

    return _make


@pytest.fixture
def workspace_root(tmp_path: Path, make_crate: Callable[..., Path]) -> Path:
    """Create the three-package workspace and return its root directory."""
    root = tmp_path / "workspace_root"
    make_crate(
        root,
        "workspace_root",
        {"src/lib.rs": ROOT_LIB},
        extra=(
            "\n[dependencies]\n"
            'wlib = { path = "wlib" }\n'
            "\n[workspace]\n"
            'members = ["wbin"]\n'
            'default-members = [".", "wlib"]\n'
        ),
    )
    make_crate(root / "wbin", "wbin", {"src/main.rs": WBIN_MAIN})
    make_crate(root / "wlib", "wlib", {"src/lib.rs": WLIB_LIB})
    return root


@pytest.fixture
def prefix_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing one of the named ``PREFIXES`` to a file."""

    def _make(name: str) -> Path:
        return write(tmp_path / "prefixes" / f"{name}.txt", PREFIXES[name])

    return _make
