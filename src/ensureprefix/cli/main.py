"""cargo-ensure-prefix CLI — Require a byte prefix on crate source files.

Entry point for the ``cargo-ensure-prefix`` executable. Installed on
``PATH``, it is also reachable as ``cargo ensure-prefix``.

Commands:
    ensure-prefix — Check target source files against the prefix file.
    targets       — List the target source files that would be checked.

Usage::

    cargo ensure-prefix --manifest-path Cargo.toml --prefix-path HEADER --all
    cargo ensure-prefix --manifest-path Cargo.toml --prefix-path HEADER -p core
    cargo-ensure-prefix targets --manifest-path Cargo.toml --all
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ensureprefix import __version__
from ensureprefix.cli.check import check_command
from ensureprefix.cli.targets_cmd import targets_command


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )
    logging.getLogger("ensureprefix").setLevel(level)


@click.group(name="cargo-ensure-prefix")
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cargo-ensure-prefix: require a byte prefix, such as a license
    header, at the top of every target source file in a Cargo workspace.
    """
    _configure_logging(verbose)


cli.add_command(check_command)
cli.add_command(targets_command)
