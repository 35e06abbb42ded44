"""Unit tests for helpers.py."""

import pytest

from ssosync.helpers import normalize_account_name, profile_name


@pytest.mark.parametrize("account_name, expected", [
    ("MockAccount", "mockaccount"),
    ("  Development Tools ", "development-tools"),
    ("Prod (EU) #1", "prod-eu-1"),
    ("Säge_Werk", "sgewerk"),
    ("already-normal-123", "already-normal-123"),
])
def test_normalize_account_name(account_name, expected):
    """Test account names are reduced to lowercase letters, digits and hyphens."""
    assert normalize_account_name(account_name) == expected


@pytest.mark.parametrize("account_name", ["MockAccount", "Prod (EU) #1", " a  b ", "X_Y.Z"])
def test_normalize_account_name_is_idempotent(account_name):
    """Test normalizing a normalized name does not change it."""
    once = normalize_account_name(account_name)
    assert normalize_account_name(once) == once


def test_profile_name_with_prefix():
    """Test a prefix is joined to the normalized name with a hyphen."""
    assert profile_name("MockAccount", "mock") == "mock-mockaccount"


def test_profile_name_without_prefix():
    """Test no separator is added when the prefix is empty."""
    assert profile_name("Mock Account") == "mock-account"
