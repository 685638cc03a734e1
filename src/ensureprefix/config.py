"""Optional YAML configuration file.

A config file saves repeating the same options in every CI job::

    # ensure-prefix.yaml
    manifest-path: Cargo.toml
    prefix-path: tools/license-header.txt
    all: true
    format: text
    jobs: 4

Relative paths are resolved against the directory holding the config file.
Options given on the command line always win over the file.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from ensureprefix.exceptions import ConfigError

OUTPUT_FORMATS = ("paths", "text", "json")

_KNOWN_KEYS = {"manifest-path", "prefix-path", "packages", "all", "format", "jobs"}


@dataclass(frozen=True)
class Settings:
    """Effective options for one run.

    Attributes:
        manifest_path: Path to the ``Cargo.toml`` to start from.
        prefix_path: Path to the prefix file.
        packages: Explicitly selected package names.
        all_packages: Check every workspace member.
        output_format: One of ``OUTPUT_FORMATS``.
        jobs: Worker threads for matching; None means sequential.
    """

    manifest_path: str | None = None
    prefix_path: str | None = None
    packages: tuple[str, ...] = ()
    all_packages: bool = False
    output_format: str = "paths"
    jobs: int | None = None

    def merge(
        self,
        *,
        manifest_path: str | None = None,
        prefix_path: str | None = None,
        packages: tuple[str, ...] = (),
        all_packages: bool = False,
        output_format: str | None = None,
        jobs: int | None = None,
    ) -> Settings:
        """Overlay command-line values on top of these settings.

        Package selection is taken as a unit: passing ``--all`` or any
        ``--package`` on the command line replaces both config values.
        """
        merged = self
        if manifest_path is not None:
            merged = replace(merged, manifest_path=manifest_path)
        if prefix_path is not None:
            merged = replace(merged, prefix_path=prefix_path)
        if all_packages or packages:
            merged = replace(merged, packages=tuple(packages), all_packages=all_packages)
        if output_format is not None:
            merged = replace(merged, output_format=output_format)
        if jobs is not None:
            merged = replace(merged, jobs=jobs)
        return merged


def _resolve(base: Path, value: Any, key: str, path: Path) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(str(path), f"'{key}' must be a non-empty string")
    candidate = Path(value)
    return str(candidate if candidate.is_absolute() else base / candidate)


def load_config(path: str | Path) -> Settings:
    """Load settings from a YAML config file.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, is not a
            mapping, or contains unknown keys or values of the wrong type.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(str(path), exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(str(path), f"invalid YAML: {exc}") from exc

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    unknown = sorted(set(map(str, raw)) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(str(path), f"unknown key(s): {', '.join(unknown)}")

    base = path.parent
    settings = Settings()

    if "manifest-path" in raw:
        settings = replace(settings, manifest_path=_resolve(base, raw["manifest-path"], "manifest-path", path))
    if "prefix-path" in raw:
        settings = replace(settings, prefix_path=_resolve(base, raw["prefix-path"], "prefix-path", path))

    packages = raw.get("packages", [])
    if isinstance(packages, str):
        packages = [packages]
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise ConfigError(str(path), "'packages' must be a string or a list of strings")

    all_packages = raw.get("all", False)
    if not isinstance(all_packages, bool):
        raise ConfigError(str(path), "'all' must be true or false")
    settings = replace(settings, packages=tuple(packages), all_packages=all_packages)

    if "format" in raw:
        if raw["format"] not in OUTPUT_FORMATS:
            raise ConfigError(
                str(path), f"'format' must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        settings = replace(settings, output_format=raw["format"])

    if "jobs" in raw:
        jobs = raw["jobs"]
        if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
            raise ConfigError(str(path), "'jobs' must be a positive integer")
        settings = replace(settings, jobs=jobs)

    return settings
