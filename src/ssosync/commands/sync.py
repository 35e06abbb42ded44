"""
SSOSYNC Sync Command.

This module provides the command that generates (or removes) AWS config
profiles for every account reachable with the cached SSO token.
"""

from pathlib import Path
from typing import Iterable

import typer

from ssosync.aws_utils import create_sso_client, list_sso_accounts
from ssosync.config import SyncOptions, default_cache_dir, default_config_file
from ssosync.errors import SSOSyncError
from ssosync.helpers import setup_logging
from ssosync.models import ProfileSettings, SkippedAccount, SyncResult
from ssosync.profiles import reconcile_profiles
from ssosync.sso_cache import find_sso_token
from ssosync.ui import render_profile, render_status


def _fail(title: str, error: SSOSyncError) -> typer.Exit:
    render_status(f"{title}: {error}", level="error")
    return typer.Exit(1)


def show_skipped(skipped_accounts: Iterable[SkippedAccount]) -> None:
    """Report accounts that were left out, with the reason."""
    for skipped in skipped_accounts:
        account = skipped.account
        if skipped.error is not None:
            render_status(f"{skipped.reason}: {skipped.error}", level="error")
        else:
            render_status(f"Skipping account {account.name} ({account.id}): {skipped.reason}", level="warning")


def show_result(result: SyncResult) -> None:
    """Print what reconciliation did, or would do in a dry run."""
    show_skipped(result.skipped)

    if result.dry_run and result.written:
        render_status("Running without dry run would add or update the following profiles", level="info")

    for change in result.changes:
        if change.action == "remove":
            render_status(f"Removing: {change.profile_name}", level="info")
        elif result.dry_run:
            render_profile(change.profile_name, change.values, change.action)

    if result.dry_run:
        render_status("Dry run enabled, no changes were made", level="info")
    elif not result.changes:
        render_status("No profile changes, AWS config left untouched", level="info")
    elif result.remove:
        render_status(f"Removed {len(result.removed)} AWS SSO profile(s) from {result.config_path}", level="success")
    else:
        render_status(f"AWS SSO profiles updated successfully in {result.config_path}", level="success")


def sync(
    role_name: str = typer.Option(..., "--role-name", "-r", help="AWS role to generate configuration for"),
    start_domain: str = typer.Option(..., "--start-domain", "-s", help="SSO start domain to generate configuration for"),
    profile_prefix: str = typer.Option("", "--profile-prefix", help="The prefix to use on an AWS profile name"),
    region: str = typer.Option(None, "--region", help="The region to use. Overrides the SSO token's region"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print changes instead of modifying the AWS config file"),
    remove: bool = typer.Option(False, "--remove", help="Remove profiles that match the provided criteria"),
    config_file: Path = typer.Option(None, "--config-file", help="AWS config file to update (default: $AWS_CONFIG_FILE or ~/.aws/config)"),
    cache_dir: Path = typer.Option(None, "--cache-dir", help="SSO token cache directory (default: ~/.aws/sso/cache)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Generate AWS config profiles for every SSO account with the given role.

    Picks the newest cached SSO token for the start domain, lists the
    accounts it can reach, and writes one profile per account where the role
    is assignable. With --remove, the matching profiles are deleted instead.
    """
    setup_logging(verbose)

    options = SyncOptions(
        role_name=role_name,
        start_domain=start_domain,
        profile_prefix=profile_prefix or "",
        region=region,
        dry_run=dry_run,
        remove=remove,
        config_file=config_file or default_config_file(),
        cache_dir=cache_dir or default_cache_dir(),
    )

    try:
        token = find_sso_token(options.cache_dir, options.start_domain)
    except SSOSyncError as e:
        raise _fail("Error reading the SSO token", e) from e

    resolved_region = options.resolve_region(token)

    try:
        client = create_sso_client(resolved_region)
    except SSOSyncError as e:
        raise _fail("Error loading AWS config", e) from e

    try:
        listing = list_sso_accounts(client, token.access_token, options.role_name)
    except SSOSyncError as e:
        raise _fail("Error listing accounts", e) from e

    show_skipped(listing.skipped)
    if not listing.accounts:
        render_status("No matching accounts found for this SSO token", level="warning")

    settings = ProfileSettings(
        start_url=token.start_url,
        region=resolved_region,
        role_name=options.role_name,
    )

    try:
        result = reconcile_profiles(
            options.config_file,
            listing.accounts,
            settings,
            prefix=options.profile_prefix,
            remove=options.remove,
            dry_run=options.dry_run,
        )
    except SSOSyncError as e:
        raise _fail("Error updating AWS config", e) from e

    show_result(result)
