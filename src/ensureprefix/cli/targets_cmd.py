"""``cargo-ensure-prefix targets`` — List the files a check would cover.

Resolves the workspace and package selection exactly like
``ensure-prefix`` but prints the targets instead of checking them. Useful
for finding out why a file is, or is not, being checked.

Exit Codes:
    0 — Targets listed.
    2 — Bad options, bad manifest, or no packages.
"""

from __future__ import annotations

import json

import click

from ensureprefix.cli.check import die
from ensureprefix.exceptions import EnsurePrefixError
from ensureprefix.runner import select_packages
from ensureprefix.workspace import PackageFilter


@click.command("targets")
@click.option(
    "--manifest-path",
    required=True,
    help="Path to the Cargo.toml to start from.",
)
@click.option("-p", "--package", "packages", multiple=True, help="Package to list (repeatable).")
@click.option("--all", "all_packages", is_flag=True, default=False, help="List every workspace member.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def targets_command(
    manifest_path: str,
    packages: tuple[str, ...],
    all_packages: bool,
    output_format: str,
) -> None:
    """List the target source files of the selected packages."""
    try:
        package_filter = PackageFilter.from_options(all_packages, packages)
        selected = select_packages(manifest_path, package_filter)
    except EnsurePrefixError as exc:
        die(str(exc))

    if output_format == "json":
        click.echo(json.dumps([
            {
                "package": package.name,
                "kind": target.kind.value,
                "name": target.name,
                "path": str(target.src_path),
            }
            for package in selected
            for target in package.targets
        ], indent=2))
    else:
        from ensureprefix.cli.output import print_targets
        print_targets(selected)
