"""Target discovery for a single package.

Mirrors Cargo's layout conventions: explicit ``[lib]``, ``[[bin]]``,
``[[example]]``, ``[[test]]`` and ``[[bench]]`` tables, plus the targets
Cargo infers from the standard directories unless ``autobins``,
``autoexamples``, ``autotests`` or ``autobenches`` is set to false.

Inference layout::

    src/lib.rs              lib
    src/main.rs             bin named after the package
    src/bin/<name>.rs       bin
    src/bin/<name>/main.rs  bin
    examples/, tests/, benches/   same two forms as src/bin/
    build.rs                custom build script
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ensureprefix.exceptions import ManifestError
from ensureprefix.workspace.models import Target, TargetKind

# (kind, manifest section, inference directory, auto-discovery key)
_COLLECTIONS: tuple[tuple[TargetKind, str, str, str], ...] = (
    (TargetKind.BIN, "bin", "src/bin", "autobins"),
    (TargetKind.EXAMPLE, "example", "examples", "autoexamples"),
    (TargetKind.TEST, "test", "tests", "autotests"),
    (TargetKind.BENCH, "bench", "benches", "autobenches"),
)


def _infer_in_dir(directory: Path) -> list[tuple[str, Path]]:
    """Find ``<name>.rs`` files and ``<name>/main.rs`` crates in a directory."""
    if not directory.is_dir():
        return []
    found: list[tuple[str, Path]] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_file() and entry.suffix == ".rs":
            found.append((entry.stem, entry))
        elif entry.is_dir() and (entry / "main.rs").is_file():
            found.append((entry.name, entry / "main.rs"))
    return found


def _default_path(root: Path, directory: str, name: str, package: str, kind: TargetKind) -> Path:
    """Where Cargo looks for an explicit target that has no ``path`` key."""
    candidates: list[Path] = []
    if kind is TargetKind.BIN and name == package:
        candidates.append(root / "src" / "main.rs")
    candidates.append(root / directory / f"{name}.rs")
    candidates.append(root / directory / name / "main.rs")
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    # Left for the reader to report as unreadable.
    return root / directory / f"{name}.rs"


def _lib_target(manifest_path: Path, manifest: dict[str, Any], package: str) -> Target | None:
    root = manifest_path.parent
    lib = manifest.get("lib")
    default_name = package.replace("-", "_")
    if isinstance(lib, dict):
        name = lib.get("name", default_name)
        if not isinstance(name, str):
            raise ManifestError(str(manifest_path), "[lib] name must be a string")
        path = root / lib["path"] if isinstance(lib.get("path"), str) else root / "src" / "lib.rs"
        return Target(TargetKind.LIB, name, path)
    inferred = root / "src" / "lib.rs"
    if inferred.is_file():
        return Target(TargetKind.LIB, default_name, inferred)
    return None


def _collection_targets(
    manifest_path: Path,
    manifest: dict[str, Any],
    package: str,
    kind: TargetKind,
    section: str,
    directory: str,
    auto_key: str,
) -> list[Target]:
    root = manifest_path.parent
    explicit: list[Target] = []
    entries = manifest.get(section, [])
    if not isinstance(entries, list):
        raise ManifestError(str(manifest_path), f"[[{section}]] must be an array of tables")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ManifestError(str(manifest_path), f"[[{section}]] must be an array of tables")
        path = entry.get("path")
        name = entry.get("name")
        if name is None and isinstance(path, str):
            name = Path(path).stem
        if not isinstance(name, str):
            raise ManifestError(str(manifest_path), f"[[{section}]] target has no name")
        if isinstance(path, str):
            src = root / path
        else:
            src = _default_path(root, directory, name, package, kind)
        explicit.append(Target(kind, name, src))

    if manifest["package"].get(auto_key, True) is False:
        return explicit

    inferred: list[tuple[str, Path]] = []
    if kind is TargetKind.BIN and (root / "src" / "main.rs").is_file():
        inferred.append((package, root / "src" / "main.rs"))
    inferred.extend(_infer_in_dir(root / directory))

    declared = {t.name for t in explicit}
    claimed = {t.src_path for t in explicit}
    return explicit + [
        Target(kind, name, src)
        for name, src in inferred
        if name not in declared and src not in claimed
    ]


def _build_target(root: Path, manifest: dict[str, Any]) -> Target | None:
    build = manifest["package"].get("build")
    if build is False:
        return None
    if isinstance(build, str):
        return Target(TargetKind.CUSTOM_BUILD, "build-script-build", root / build)
    script = root / "build.rs"
    if build is True or script.is_file():
        return Target(TargetKind.CUSTOM_BUILD, "build-script-build", script)
    return None


def discover_targets(manifest_path: Path, manifest: dict[str, Any]) -> list[Target]:
    """List every target of the package defined by ``manifest``.

    Args:
        manifest_path: Absolute path of the package's ``Cargo.toml``.
        manifest: Parsed manifest; must contain a ``[package]`` table.

    Returns:
        Targets ordered lib, bins, examples, tests, benches, build script.
        A source file shared by several targets appears once.

    Raises:
        ManifestError: If a target table is malformed.
    """
    root = manifest_path.parent
    package = manifest["package"]["name"]

    targets: list[Target] = []
    lib = _lib_target(manifest_path, manifest, package)
    if lib is not None:
        targets.append(lib)
    for kind, section, directory, auto_key in _COLLECTIONS:
        targets.extend(
            _collection_targets(
                manifest_path, manifest, package, kind, section, directory, auto_key
            )
        )
    build = _build_target(root, manifest)
    if build is not None:
        targets.append(build)

    seen: set[Path] = set()
    unique: list[Target] = []
    for target in targets:
        if target.src_path in seen:
            continue
        seen.add(target.src_path)
        unique.append(target)
    return unique
