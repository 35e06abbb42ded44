"""Unit tests for config.py."""

import dataclasses
from pathlib import Path

import pytest

from ssosync.config import SyncOptions, default_cache_dir, default_config_file
from ssosync.models import SSOToken


def test_default_paths(monkeypatch, tmp_path):
    """Test defaults live under ~/.aws when no overrides are set."""
    monkeypatch.delenv("AWS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("SSOSYNC_CACHE_DIR", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert default_config_file() == tmp_path / ".aws" / "config"
    assert default_cache_dir() == tmp_path / ".aws" / "sso" / "cache"


def test_default_paths_from_environment(monkeypatch, tmp_path):
    """Test AWS_CONFIG_FILE and SSOSYNC_CACHE_DIR override the defaults."""
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "cfg"))
    monkeypatch.setenv("SSOSYNC_CACHE_DIR", str(tmp_path / "cache"))

    options = SyncOptions(role_name="AdministratorAccess", start_domain="mock")

    assert options.config_file == tmp_path / "cfg"
    assert options.cache_dir == tmp_path / "cache"


def test_sync_options_are_immutable():
    """Test options cannot be changed once built."""
    options = SyncOptions(role_name="AdministratorAccess", start_domain="mock")

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.dry_run = True


def test_resolve_region():
    """Test the region override wins over the token's region."""
    token = SSOToken(access_token="t", region="us-east-1", start_url="https://mock")

    assert SyncOptions(role_name="r", start_domain="s").resolve_region(token) == "us-east-1"
    assert SyncOptions(role_name="r", start_domain="s", region="eu-west-1").resolve_region(token) == "eu-west-1"
