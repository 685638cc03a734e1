"""Cargo workspace resolution.

Turns a ``--manifest-path`` plus a package selection into the ordered list
of ``(package, source file)`` pairs to check. This is the only part of the
tool that knows about Cargo; the matching core sees nothing but names,
paths and bytes.

Public API::

    from ensureprefix.workspace import PackageFilter, load_workspace

    workspace = load_workspace("Cargo.toml")
    members = PackageFilter.from_options(all_packages=True, packages=()).select(workspace)
    sources = [(p.name, t.src_path) for p in members for t in p.targets]
"""

from ensureprefix.workspace.filters import FilterMode, PackageFilter
from ensureprefix.workspace.loader import load_workspace
from ensureprefix.workspace.manifest import MANIFEST_NAME, read_manifest
from ensureprefix.workspace.models import Package, Target, TargetKind, Workspace
from ensureprefix.workspace.targets import discover_targets

__all__ = [
    "FilterMode",
    "MANIFEST_NAME",
    "Package",
    "PackageFilter",
    "Target",
    "TargetKind",
    "Workspace",
    "discover_targets",
    "load_workspace",
    "read_manifest",
]
