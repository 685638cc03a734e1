"""Data models for Cargo workspaces: targets, packages, the workspace."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TargetKind(Enum):
    """Cargo target kinds that own a source file."""

    LIB = "lib"
    BIN = "bin"
    EXAMPLE = "example"
    TEST = "test"
    BENCH = "bench"
    CUSTOM_BUILD = "custom-build"


@dataclass(frozen=True)
class Target:
    """A single compilation target and its root source file.

    Attributes:
        kind: What Cargo builds from this file.
        name: Target name (the package name for ``src/main.rs``).
        src_path: Absolute path to the target's root source file.
    """

    kind: TargetKind
    name: str
    src_path: Path


@dataclass
class Package:
    """A workspace member package.

    Attributes:
        name: ``package.name`` from the manifest.
        manifest_path: Absolute path to the package's ``Cargo.toml``.
        targets: Targets in discovery order (lib, bins, examples, tests,
            benches, build script).
    """

    name: str
    manifest_path: Path
    targets: list[Target] = field(default_factory=list)

    @property
    def root(self) -> Path:
        return self.manifest_path.parent


@dataclass
class Workspace:
    """A resolved Cargo workspace.

    A standalone package is a workspace of one member.

    Attributes:
        root_manifest: Absolute path to the workspace root ``Cargo.toml``.
        members: Every member package, in workspace order.
        default_members: Packages selected when no ``--package`` or
            ``--all`` option is given.
    """

    root_manifest: Path
    members: list[Package] = field(default_factory=list)
    default_members: list[Package] = field(default_factory=list)

    @property
    def root(self) -> Path:
        return self.root_manifest.parent

    @property
    def is_virtual(self) -> bool:
        """True when the root manifest declares no package of its own."""
        return all(p.manifest_path != self.root_manifest for p in self.members)

    def member(self, name: str) -> Package | None:
        """Return the member package called ``name``, if any."""
        for package in self.members:
            if package.name == name:
                return package
        return None
