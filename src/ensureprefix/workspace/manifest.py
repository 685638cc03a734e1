"""Reading ``Cargo.toml`` files.

Manifests are parsed with the standard library ``tomllib``. Only the tables
that decide membership and target layout are interpreted; everything else
is carried along untouched.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from ensureprefix.exceptions import ManifestError

MANIFEST_NAME = "Cargo.toml"

_DEPENDENCY_TABLES = ("dependencies", "dev-dependencies", "build-dependencies")


def read_manifest(path: Path) -> dict[str, Any]:
    """Parse a Cargo manifest.

    Args:
        path: Path to a ``Cargo.toml``.

    Returns:
        The parsed TOML document.

    Raises:
        ManifestError: If the file cannot be read, is not valid TOML, has
            neither a ``[package]`` nor a ``[workspace]`` table, or has a
            ``[package]`` without a name.
    """
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(str(path), str(exc)) from exc

    if "package" not in data and "workspace" not in data:
        raise ManifestError(
            str(path), "manifest is missing either a [package] or a [workspace]"
        )
    package = data.get("package")
    if package is not None and not (
        isinstance(package, dict) and isinstance(package.get("name"), str)
    ):
        raise ManifestError(str(path), "[package] has no name")
    return data


def package_name(manifest: dict[str, Any]) -> str | None:
    """Return ``package.name``, or None for a virtual manifest."""
    package = manifest.get("package")
    if isinstance(package, dict):
        return package["name"]
    return None


def workspace_table(manifest: dict[str, Any]) -> dict[str, Any] | None:
    table = manifest.get("workspace")
    return table if isinstance(table, dict) else None


def path_dependencies(manifest: dict[str, Any]) -> list[str]:
    """Collect the ``path`` of every path dependency, in manifest order.

    Looks at ``[dependencies]``, ``[dev-dependencies]``,
    ``[build-dependencies]`` and their ``[target.<cfg>.*]`` variants.
    """
    tables: list[Any] = [manifest.get(name) for name in _DEPENDENCY_TABLES]
    targets = manifest.get("target")
    if isinstance(targets, dict):
        for cfg in targets.values():
            if isinstance(cfg, dict):
                tables.extend(cfg.get(name) for name in _DEPENDENCY_TABLES)

    paths: list[str] = []
    for table in tables:
        if not isinstance(table, dict):
            continue
        for spec in table.values():
            if isinstance(spec, dict) and isinstance(spec.get("path"), str):
                paths.append(spec["path"])
    return paths
