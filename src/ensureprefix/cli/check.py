"""``cargo ensure-prefix`` — Check that target source files start with a prefix.

Cargo runs external subcommands as ``cargo-ensure-prefix ensure-prefix
<args>``, so this command is registered under the name ``ensure-prefix``.

Reads the prefix file (``0x1A`` bytes are wildcards), resolves the Cargo
workspace from ``--manifest-path``, and checks the root source file of
every target of the selected packages.

Exit Codes:
    0 — Every checked file starts with the prefix.
    1 — At least one file is too short or differs from the prefix.
    2 — Bad options, unreadable prefix file, bad manifest, or no packages.
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from ensureprefix.cli.output import status_name
from ensureprefix.config import OUTPUT_FORMATS, Settings, load_config
from ensureprefix.core.pattern import Mismatch, TooShort
from ensureprefix.core.verifier import FileResult, Report
from ensureprefix.exceptions import EnsurePrefixError
from ensureprefix.runner import check_workspace


def die(message: str) -> NoReturn:
    """Print ``message`` to stderr and exit with status 2."""
    click.echo(message, err=True)
    sys.exit(2)


def _entry_to_json(entry: FileResult) -> dict:
    """Convert one report entry to a JSON-serializable dict."""
    data: dict = {
        "package": entry.package,
        "path": entry.path,
        "status": status_name(entry.result),
    }
    if isinstance(entry.result, TooShort):
        data["actual_length"] = entry.result.actual
        data["required_length"] = entry.result.required
    elif isinstance(entry.result, Mismatch):
        data["offset"] = entry.result.offset
    return data


def report_to_json(report: Report) -> dict:
    """Convert a report to the ``--format json`` document."""
    return {
        "verdict": report.verdict.value,
        "files_checked": len(report),
        "failures": report.failed_count,
        "results": [_entry_to_json(entry) for entry in report],
    }


def _output_report(report: Report, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps(report_to_json(report), indent=2))
    elif output_format == "text":
        from ensureprefix.cli.output import print_report
        print_report(report)
    else:
        for path in sorted(entry.path for entry in report.failures):
            click.echo(path)


def resolve_settings(config_path: str | None, **overrides) -> Settings:
    """Combine the config file (if any) with command-line overrides.

    Raises:
        ConfigError: If the config file is unusable.
        click.UsageError: If the manifest or prefix path is still unknown.
    """
    base = load_config(config_path) if config_path else Settings()
    settings = base.merge(**overrides)
    if settings.manifest_path is None:
        raise click.UsageError("Missing option '--manifest-path'.")
    if settings.prefix_path is None:
        raise click.UsageError("Missing option '--prefix-path'.")
    return settings


@click.command("ensure-prefix")
@click.option(
    "--manifest-path",
    default=None,
    help="Path to the Cargo.toml to start from.",
)
@click.option(
    "--prefix-path",
    default=None,
    help="File holding the required prefix; 0x1A bytes match any byte.",
)
@click.option(
    "-p", "--package", "packages",
    multiple=True,
    help="Package to check (repeatable).",
)
@click.option(
    "--all", "all_packages",
    is_flag=True,
    default=False,
    help="Check every workspace member.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format: paths (default), text, or json.",
)
@click.option(
    "-j", "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Match files on this many worker threads.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with default values for these options.",
)
def check_command(
    manifest_path: str | None,
    prefix_path: str | None,
    packages: tuple[str, ...],
    all_packages: bool,
    output_format: str | None,
    jobs: int | None,
    config_path: str | None,
) -> None:
    """Check that every target source file starts with a required prefix.

    The prefix is the raw content of the file at --prefix-path. A 0x1A
    byte in it matches any single byte in the checked file, which is handy
    for fields such as a copyright year.

    With the default `paths` format, the path of every failing file is
    printed on its own line. Exit code 0 if all files match, 1 otherwise.
    """
    try:
        settings = resolve_settings(
            config_path,
            manifest_path=manifest_path,
            prefix_path=prefix_path,
            packages=packages,
            all_packages=all_packages,
            output_format=output_format,
            jobs=jobs,
        )
        report = check_workspace(settings)
    except EnsurePrefixError as exc:
        die(str(exc))

    _output_report(report, settings.output_format)
    sys.exit(0 if report.is_success else 1)
