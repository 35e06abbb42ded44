"""Shared fixtures for ssosync tests."""

import json
import os

import pytest

START_URL = "https://mock-sso.awsapps.com/start"


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "sso" / "cache"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_token(cache_dir):
    """Write a token cache file with a fixed modification time."""
    def _write(name, mtime, start_url=START_URL, region="us-east-1", access_token="token", raw=None):
        path = cache_dir / name
        if raw is None:
            raw = json.dumps({
                "accessToken": access_token,
                "region": region,
                "startUrl": start_url,
                "expiresAt": "2030-01-01T00:00:00Z",
            })
        path.write_text(raw)
        os.utime(path, (mtime, mtime))
        return path
    return _write


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config"
    path.write_text("")
    return path
