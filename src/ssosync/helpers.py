"""
SSOSYNC Shared Utility Functions.

Profile name derivation and logging setup used across the CLI and the
reconciliation code.
"""

import logging
import re

from rich.logging import RichHandler

from ssosync.ui import console

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]")


def normalize_account_name(account_name: str) -> str:
    """Turn an account display name into a safe profile name fragment.

    Lowercases and trims the name, replaces spaces with hyphens and drops
    anything outside ``[a-z0-9-]``. Normalizing an already normalized name
    returns it unchanged.

    Args:
        account_name: Account display name as returned by AWS SSO

    Returns:
        str: Name containing only lowercase letters, digits and hyphens
    """
    name = account_name.strip().lower().replace(" ", "-")
    return _INVALID_NAME_CHARS.sub("", name)


def profile_name(account_name: str, prefix: str = "") -> str:
    """Build the config section name for an account, e.g. ``mock-mockaccount``."""
    name = normalize_account_name(account_name)
    if prefix:
        return f"{prefix}-{name}"
    return name


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through Rich; debug output only when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # botocore is very chatty at debug level
    logging.getLogger("botocore").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
