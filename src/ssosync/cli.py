# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
SSOSYNC Command Line Interface.

This module provides the CLI entry point for SSOSYNC, a tool that keeps the
AWS config file in sync with the accounts reachable through AWS SSO.

Usage:
    ssosync -s mycompany -r AdministratorAccess [--profile-prefix acme] [--dry-run]
    ssosync -s mycompany -r AdministratorAccess --remove
"""

import sys
from typing import Optional, Sequence

import click
import typer

from ssosync.commands import sync


app = typer.Typer(add_completion=False)

# A single registered command runs without a subcommand name
app.command()(sync)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return its exit code; any usage error exits with 1."""
    try:
        rv = app(args=list(argv) if argv is not None else None, prog_name="ssosync", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
