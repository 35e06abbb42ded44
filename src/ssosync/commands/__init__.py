"""
SSOSYNC Commands Package.

CLI commands live here as separate modules and are registered on the Typer
app in ssosync.cli.
"""

from .sync import sync

__all__ = ["sync"]
