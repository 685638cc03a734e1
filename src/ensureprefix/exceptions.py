"""cargo-ensure-prefix exception hierarchy.

All public exceptions inherit from EnsurePrefixError, giving callers a single
base class to catch when they want to handle any setup failure without
swallowing unrelated errors. Per-file prefix violations are never raised;
they are reported as data in a ``Report``.
"""


class EnsurePrefixError(Exception):
    """Base exception for all cargo-ensure-prefix errors."""


class ManifestNotFoundError(EnsurePrefixError):
    """Raised when the manifest passed via ``--manifest-path`` does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not find {path}")
        self.path = path


class ManifestError(EnsurePrefixError):
    """Raised when a Cargo manifest or workspace cannot be resolved.

    Covers TOML syntax errors, manifests with neither ``[package]`` nor
    ``[workspace]``, and workspace members that point at missing manifests.
    The message always names the manifest the user asked for; the underlying
    cause is kept in ``reason``.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Error parsing {path}")
        self.path = path
        self.reason = reason


class PrefixSourceError(EnsurePrefixError):
    """Raised when the prefix file cannot be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error reading prefix-path file {path}")
        self.path = path


class PackageFilterError(EnsurePrefixError):
    """Raised for contradictory package selection options."""


class NoTargetsError(EnsurePrefixError):
    """Raised when the package selection yields no source files to check."""

    def __init__(self) -> None:
        super().__init__("Didn't find matching package(s)")


class ConfigError(EnsurePrefixError):
    """Raised when the YAML config file cannot be read or is invalid."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error reading config file {path}: {reason}")
        self.path = path
        self.reason = reason
