"""Package selection: ``--all``, ``--package NAME`` or the default members."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ensureprefix.exceptions import PackageFilterError
from ensureprefix.workspace.models import Package, Workspace

logger = logging.getLogger(__name__)


class FilterMode(Enum):
    ALL = "all"
    DEFAULT = "default"
    PACKAGES = "packages"


@dataclass(frozen=True)
class PackageFilter:
    """Which workspace members to check.

    Attributes:
        mode: ``ALL`` members, the ``DEFAULT`` members, or named ``PACKAGES``.
        names: Requested package names (only used in ``PACKAGES`` mode).
    """

    mode: FilterMode = FilterMode.DEFAULT
    names: frozenset[str] = frozenset()

    @classmethod
    def all(cls) -> PackageFilter:
        return cls(FilterMode.ALL)

    @classmethod
    def default(cls) -> PackageFilter:
        return cls(FilterMode.DEFAULT)

    @classmethod
    def packages(cls, names: Iterable[str]) -> PackageFilter:
        return cls(FilterMode.PACKAGES, frozenset(names))

    @classmethod
    def from_options(cls, all_packages: bool, packages: Iterable[str]) -> PackageFilter:
        """Build a filter from the ``--all`` and ``--package`` options.

        Raises:
            PackageFilterError: If both options are given.
        """
        names = list(packages)
        if all_packages and names:
            raise PackageFilterError("Cannot specify --all and --package")
        if all_packages:
            return cls.all()
        if names:
            return cls.packages(names)
        return cls.default()

    def members(self, workspace: Workspace) -> list[Package]:
        """Packages the filter chooses from, before name filtering."""
        if self.mode is FilterMode.DEFAULT:
            return workspace.default_members
        return workspace.members

    def includes(self, package: Package) -> bool:
        if self.mode is FilterMode.PACKAGES:
            return package.name in self.names
        return True

    def select(self, workspace: Workspace) -> list[Package]:
        """Return the selected packages in workspace order."""
        selected = [p for p in self.members(workspace) if self.includes(p)]
        if self.mode is FilterMode.PACKAGES:
            missing = self.names - {p.name for p in selected}
            for name in sorted(missing):
                logger.warning("Package not found in workspace: %s", name)
        return selected

