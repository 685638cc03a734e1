"""Workspace discovery: from one ``Cargo.toml`` to the full member list.

Resolution follows Cargo's rules closely enough to pick the same source
files:

1. The workspace root is the manifest itself when it has ``[workspace]``,
   the manifest named by ``package.workspace``, or the nearest ancestor
   ``Cargo.toml`` with ``[workspace]`` that lists this package as a member.
   Without any of these the package is a workspace of its own.
2. Members are the root package (if any), the ``workspace.members`` entries
   (glob patterns allowed) and, recursively, every path dependency inside
   the workspace directory. ``workspace.exclude`` removes glob matches and
   path dependencies, never explicitly listed members.
3. Default members are ``workspace.default-members`` when present, every
   member when invoked on a virtual root manifest, and otherwise the
   invoked package.
"""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import Any

from ensureprefix.exceptions import ManifestError, ManifestNotFoundError
from ensureprefix.workspace.manifest import (
    MANIFEST_NAME,
    package_name,
    path_dependencies,
    read_manifest,
    workspace_table,
)
from ensureprefix.workspace.models import Package, Workspace
from ensureprefix.workspace.targets import discover_targets

logger = logging.getLogger(__name__)


def _normalize(path: Path) -> Path:
    # Lexical only: symlinks stay as the user spelled them.
    return Path(os.path.normpath(path))


def _is_within(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents


def _has_magic(entry: str) -> bool:
    return any(ch in entry for ch in "*?[")


class _WorkspaceLoader:
    """Resolves one workspace. Manifests are parsed at most once."""

    def __init__(self, current: Path) -> None:
        self.current = _normalize(current)
        self._manifests: dict[Path, dict[str, Any]] = {}

    def _read(self, path: Path) -> dict[str, Any]:
        path = _normalize(path)
        if path not in self._manifests:
            self._manifests[path] = read_manifest(path)
        return self._manifests[path]

    # -- Root discovery --

    def find_root(self) -> Path | None:
        """Return the workspace root manifest, or None for a lone package."""
        manifest = self._read(self.current)
        if workspace_table(manifest) is not None:
            return self.current

        explicit = manifest["package"].get("workspace")
        if isinstance(explicit, str):
            root = _normalize(self.current.parent / explicit / MANIFEST_NAME)
            if workspace_table(self._read(root)) is None:
                raise ManifestError(str(root), "package.workspace does not point at a workspace")
            return root

        for ancestor in self.current.parent.parents:
            candidate = ancestor / MANIFEST_NAME
            if not candidate.is_file():
                continue
            if workspace_table(self._read(candidate)) is None:
                continue
            if self.current in self.collect_members(candidate):
                return candidate
            logger.debug("%s is not a member of %s", self.current, candidate)
            break
        return None

    # -- Members --

    def _expand(self, root: Path, key: str) -> list[tuple[Path, bool]]:
        """Expand a workspace path list into ``(manifest, from_glob)`` pairs."""
        table = workspace_table(self._read(root)) or {}
        entries = table.get(key, [])
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise ManifestError(str(root), f"workspace.{key} must be a list of strings")

        base = root.parent
        expanded: list[tuple[Path, bool]] = []
        for entry in entries:
            if _has_magic(entry):
                for match in sorted(glob.glob(os.path.join(glob.escape(str(base)), entry))):
                    manifest = Path(match) / MANIFEST_NAME
                    if manifest.is_file():
                        expanded.append((_normalize(manifest), True))
            else:
                manifest = _normalize(base / entry / MANIFEST_NAME)
                if not manifest.is_file():
                    raise ManifestError(str(root), f"failed to load workspace member {entry}")
                expanded.append((manifest, False))
        return expanded

    def _excluded(self, root: Path) -> list[Path]:
        table = workspace_table(self._read(root)) or {}
        entries = table.get("exclude", [])
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise ManifestError(str(root), "workspace.exclude must be a list of strings")
        return [_normalize(root.parent / entry) for entry in entries]

    def collect_members(self, root: Path) -> list[Path]:
        """Return member manifest paths of the workspace rooted at ``root``."""
        excluded = self._excluded(root)
        members: list[Path] = []

        def add(manifest: Path, excludable: bool) -> bool:
            if manifest in members:
                return False
            if excludable and any(_is_within(manifest.parent, e) for e in excluded):
                logger.debug("Excluded from workspace: %s", manifest)
                return False
            members.append(manifest)
            return True

        if package_name(self._read(root)) is not None:
            add(root, excludable=False)
        for manifest, from_glob in self._expand(root, "members"):
            add(manifest, excludable=from_glob)

        pending = list(members)
        while pending:
            member = pending.pop(0)
            for dep in path_dependencies(self._read(member)):
                dep_manifest = _normalize(member.parent / dep / MANIFEST_NAME)
                if not _is_within(dep_manifest, root.parent):
                    continue
                self._read(dep_manifest)
                if add(dep_manifest, excludable=True):
                    pending.append(dep_manifest)
        return members

    def _default_members(self, root: Path, members: list[Path]) -> list[Path]:
        table = workspace_table(self._read(root)) or {}
        if "default-members" in table:
            defaults = [m for m, _ in self._expand(root, "default-members")]
            for manifest in defaults:
                if manifest not in members:
                    raise ManifestError(
                        str(root), f"default member {manifest.parent} is not a workspace member"
                    )
            return defaults
        if package_name(self._read(self.current)) is None:
            return list(members)
        return [self.current]

    # -- Packages --

    def _package(self, manifest_path: Path) -> Package:
        manifest = self._read(manifest_path)
        if package_name(manifest) is None:
            raise ManifestError(str(manifest_path), "workspace member has no [package]")
        return Package(
            name=manifest["package"]["name"],
            manifest_path=manifest_path,
            targets=discover_targets(manifest_path, manifest),
        )

    def load(self) -> Workspace:
        root = self.find_root()
        if root is None:
            package = self._package(self.current)
            return Workspace(root_manifest=self.current, members=[package], default_members=[package])

        member_paths = self.collect_members(root)
        default_paths = self._default_members(root, member_paths)
        packages = {path: self._package(path) for path in member_paths}
        logger.debug(
            "Workspace %s: %d member(s), %d default", root, len(member_paths), len(default_paths)
        )
        return Workspace(
            root_manifest=root,
            members=[packages[p] for p in member_paths],
            default_members=[packages[p] for p in default_paths],
        )


def load_workspace(manifest_path: str | Path) -> Workspace:
    """Resolve the Cargo workspace that ``manifest_path`` belongs to.

    Args:
        manifest_path: Path to a ``Cargo.toml``, absolute or relative to the
            current directory.

    Returns:
        The resolved ``Workspace``.

    Raises:
        ManifestNotFoundError: If ``manifest_path`` does not exist.
        ManifestError: If any manifest involved cannot be parsed or the
            workspace layout is inconsistent. The error always names the
            absolute path of ``manifest_path``.
    """
    given = Path(manifest_path)
    if not given.exists():
        raise ManifestNotFoundError(str(manifest_path))
    absolute = given if given.is_absolute() else Path.cwd() / given

    try:
        return _WorkspaceLoader(absolute).load()
    except ManifestError as exc:
        logger.debug("Failed to resolve workspace: %s: %s", exc.path, exc.reason)
        raise ManifestError(str(absolute), exc.reason) from exc
