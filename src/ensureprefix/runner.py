"""End-to-end run: settings in, report out.

Glues the pieces together in the order the command line needs them:
prefix file first, then package selection, then the workspace, so that
errors surface in a predictable order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ensureprefix.config import Settings
from ensureprefix.core.verifier import Report, verify
from ensureprefix.exceptions import NoTargetsError
from ensureprefix.reader import load_prefix, read_candidates
from ensureprefix.workspace import Package, PackageFilter, load_workspace

logger = logging.getLogger(__name__)


def select_packages(manifest_path: str, package_filter: PackageFilter) -> list[Package]:
    """Load the workspace and apply the package filter.

    Raises:
        NoTargetsError: If no selected package has any target.
    """
    workspace = load_workspace(manifest_path)
    packages = package_filter.select(workspace)
    if not any(package.targets for package in packages):
        raise NoTargetsError()
    return packages


def target_paths(manifest_path: str, package_filter: PackageFilter) -> list[tuple[str, Path]]:
    """Ordered ``(package, source path)`` pairs for the selected packages."""
    return [
        (package.name, target.src_path)
        for package in select_packages(manifest_path, package_filter)
        for target in package.targets
    ]


def check_workspace(settings: Settings) -> Report:
    """Check every selected target file against the prefix file.

    Args:
        settings: Effective options; ``manifest_path`` and ``prefix_path``
            must be set.

    Returns:
        The verification report, one entry per target file.

    Raises:
        EnsurePrefixError: For any setup failure (unreadable prefix file,
            conflicting package options, bad manifest, nothing to check).
        ValueError: If ``manifest_path`` or ``prefix_path`` is unset.
    """
    if settings.manifest_path is None:
        raise ValueError("manifest_path is required")
    if settings.prefix_path is None:
        raise ValueError("prefix_path is required")

    pattern = load_prefix(settings.prefix_path)
    package_filter = PackageFilter.from_options(settings.all_packages, settings.packages)
    pairs = target_paths(settings.manifest_path, package_filter)
    logger.debug("Checking %d target file(s)", len(pairs))

    candidates = read_candidates(pairs, len(pattern))
    return verify(pattern, candidates, jobs=settings.jobs)
