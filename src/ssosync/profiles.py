"""
SSOSYNC Profile Reconciliation.

Adds, updates and removes the profile sections ssosync manages in the AWS
config file. Sections it did not write are left alone.
"""

import configparser
import logging
from pathlib import Path
from typing import Iterable, Union

from ssosync.errors import ConfigFileError
from ssosync.helpers import profile_name
from ssosync.models import (
    IDENTIFYING_KEYS,
    Account,
    ProfileChange,
    ProfileSettings,
    SkippedAccount,
    SyncResult,
)

logger = logging.getLogger(__name__)


def _new_parser() -> configparser.RawConfigParser:
    parser = configparser.RawConfigParser()
    # keep key case of sections ssosync does not manage
    parser.optionxform = str
    return parser


def load_config(path: Union[str, Path]) -> configparser.RawConfigParser:
    """Load the AWS config file. A missing, undecodable or unparsable file is an error."""
    parser = _new_parser()
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(f)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise ConfigFileError(f"Failed to load AWS config file {path}: {e}") from e
    return parser


def save_config(parser: configparser.RawConfigParser, path: Union[str, Path]) -> None:
    """Write the AWS config file in place.

    configparser does not round-trip comments, so comments in the file are
    dropped whenever it is rewritten.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            parser.write(f)
    except OSError as e:
        raise ConfigFileError(f"Failed to save AWS config file {path}: {e}") from e


def find_managed_sections(parser: configparser.RawConfigParser, settings: ProfileSettings, account_id: str) -> list[str]:
    """
    Return the sections that were written for this account and settings.

    A section matches only if sso_start_url, sso_account_id, sso_role_name
    and region are all present and equal to the expected values.
    """
    expected = settings.values_for(account_id)
    matches = []
    for section in parser.sections():
        if all(
            parser.has_option(section, key) and parser.get(section, key) == expected[key]
            for key in IDENTIFYING_KEYS
        ):
            matches.append(section)
    return matches


def reconcile_profiles(
    config_path: Union[str, Path],
    accounts: Iterable[Account],
    settings: ProfileSettings,
    prefix: str = "",
    remove: bool = False,
    dry_run: bool = False,
) -> SyncResult:
    """
    Bring the AWS config file in line with the given accounts.

    In apply mode every account gets a section named after it whose five sso
    keys are overwritten with the current values. Two accounts whose names
    normalize to the same profile name end up in one section, the later
    account winning. Accounts whose names normalize to nothing are skipped.
    In remove mode every managed section for the accounts
    is deleted. The file is only rewritten when something changed.

    Args:
        config_path: AWS config file to update
        accounts: Accounts to generate or remove profiles for
        settings: Start URL, region and role for this run
        prefix: Optional profile name prefix
        remove: Remove matching profiles instead of writing them
        dry_run: Only report the changes, never write the file

    Returns:
        SyncResult listing the changes made (or that would be made)

    Raises:
        ConfigFileError: If the config file cannot be loaded or saved
    """
    config_path = Path(config_path)
    parser = load_config(config_path)
    result = SyncResult(config_path=config_path, dry_run=dry_run, remove=remove)

    for account in accounts:
        if remove:
            for section in find_managed_sections(parser, settings, account.id):
                result.changes.append(ProfileChange(
                    action="remove",
                    profile_name=section,
                    values=dict(parser.items(section)),
                ))
                if not dry_run:
                    parser.remove_section(section)
            continue

        name = profile_name(account.name, prefix)
        if not name:
            result.skipped.append(SkippedAccount(
                account=account,
                reason="Account name has no characters usable in a profile name",
            ))
            continue

        values = settings.values_for(account.id)
        action = "update" if parser.has_section(name) else "add"
        result.changes.append(ProfileChange(action=action, profile_name=name, values=values))

        if dry_run:
            continue

        if not parser.has_section(name):
            parser.add_section(name)
        for key, value in values.items():
            parser.set(name, key, value)

    if dry_run:
        logger.debug("Dry run, not writing %s", config_path)
        return result

    if not result.changes:
        logger.debug("No profile changes, leaving %s untouched", config_path)
        return result

    save_config(parser, config_path)
    return result
