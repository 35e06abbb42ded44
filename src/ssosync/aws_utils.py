# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
AWS utilities for SSOSYNC.

This module talks to the AWS SSO portal API. It lists the accounts an SSO
access token is entitled to and checks which permission sets (roles) can be
assumed in each of them.

Functions:
    create_sso_client: Build an SSO portal client for a region
    list_sso_accounts: List all accounts, optionally filtered by role
    role_is_assignable: Check whether a role is available in an account
"""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ssosync.errors import SSOClientError, TransportError
from ssosync.models import Account, AccountListing, SkippedAccount

logger = logging.getLogger(__name__)


def create_sso_client(region: str):
    """Create an SSO portal client; portal calls authenticate with the access token only."""
    try:
        session = boto3.Session(region_name=region)
        return session.client("sso")
    except BotoCoreError as e:
        raise SSOClientError(f"Unable to create SSO client for region {region!r}: {e}", e) from e


def _list_account_pages(client, access_token: str):
    next_token = None
    while True:
        kwargs = {"accessToken": access_token}
        if next_token:
            kwargs["nextToken"] = next_token
        try:
            resp = client.list_accounts(**kwargs)
        except (BotoCoreError, ClientError) as e:
            raise TransportError(f"Error listing accounts: {e}", e) from e

        yield resp.get("accountList", [])

        next_token = resp.get("nextToken")
        if not next_token:
            break


def role_is_assignable(client, access_token: str, account_id: str, role_name: str) -> bool:
    """
    Check whether role_name can be assumed in the given account.

    Role names are compared exactly, including case. Pages are fetched until
    a match is found or the listing is exhausted.

    Raises:
        TransportError: If listing the account's roles fails
    """
    next_token = None
    while True:
        kwargs = {"accessToken": access_token, "accountId": account_id}
        if next_token:
            kwargs["nextToken"] = next_token
        try:
            resp = client.list_account_roles(**kwargs)
        except (BotoCoreError, ClientError) as e:
            raise TransportError(f"Error listing roles for account {account_id}: {e}", e) from e

        for role in resp.get("roleList", []):
            if role.get("roleName") == role_name:
                return True

        next_token = resp.get("nextToken")
        if not next_token:
            return False


def list_sso_accounts(client, access_token: str, role_name: Optional[str] = None) -> AccountListing:
    """
    List every account the SSO access token is entitled to.

    Args:
        client: boto3 SSO portal client
        access_token: SSO access token from the cache
        role_name: If set, only keep accounts where this role is assignable

    Returns:
        AccountListing with the kept accounts and the skipped ones. An account
        whose role lookup fails is skipped rather than aborting the listing.

    Raises:
        TransportError: If listing accounts fails
    """
    listing = AccountListing()

    for page in _list_account_pages(client, access_token):
        logger.debug("Fetched page of %d accounts", len(page))
        for item in page:
            account = Account(id=item["accountId"], name=item.get("accountName", ""))

            if role_name:
                try:
                    valid = role_is_assignable(client, access_token, account.id, role_name)
                except TransportError as e:
                    logger.debug("Role validation failed for %s: %s", account.id, e)
                    listing.skipped.append(SkippedAccount(
                        account=account,
                        reason=f"Error validating role for account {account.id}",
                        error=e,
                    ))
                    continue

                if not valid:
                    listing.skipped.append(SkippedAccount(
                        account=account,
                        reason=f"Role {role_name} is not valid for the account",
                    ))
                    continue

            listing.accounts.append(account)

    return listing
