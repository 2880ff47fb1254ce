"""AttestGuard CLI: provenance and reproducibility auditing for build workspaces.

Entry point for the ``attestguard`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan   -- Walk a workspace and report provenance findings.
    rules  -- List the rule catalog and reproducibility checks.

Usage::

    attestguard scan                        # Scan the current directory
    attestguard scan ./my-project --format json
    attestguard scan . --severity-threshold high
    attestguard scan . --config attestguard.yml
    attestguard rules
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from attestguard import __version__, _PRODUCT_ID
from attestguard.cli.rules_cmd import rules_command
from attestguard.cli.scan import scan_command


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=f"{__version__} ({_PRODUCT_ID})")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """AttestGuard: SLSA provenance auditing for build workspaces.

    Find missing or incomplete in-toto attestations and flag build steps
    that make artifacts non-reproducible. Read-only; never modifies files.
    """
    _configure_logging(verbose)


cli.add_command(scan_command)
cli.add_command(rules_command)
