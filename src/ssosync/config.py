"""
SSOSYNC Configuration.

Default file locations and the immutable option set that is handed to every
sync stage. Locations follow the AWS CLI conventions and can be overridden
through the environment or the command line.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ssosync.models import SSOToken

CONFIG_FILE_ENV = "AWS_CONFIG_FILE"
CACHE_DIR_ENV = "SSOSYNC_CACHE_DIR"


def default_config_file() -> Path:
    """Return the AWS config file path, honouring ``AWS_CONFIG_FILE``."""
    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aws" / "config"


def default_cache_dir() -> Path:
    """Return the SSO token cache directory, honouring ``SSOSYNC_CACHE_DIR``."""
    override = os.environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aws" / "sso" / "cache"


@dataclass(frozen=True)
class SyncOptions:
    """Options for a single sync run.

    Args:
        role_name: Permission set to generate profiles for
        start_domain: Substring used to pick the cached SSO token
        profile_prefix: Optional prefix for generated profile names
        region: Region override; the token's region is used when unset
        dry_run: Report changes without writing the config file
        remove: Remove matching profiles instead of adding them
        config_file: AWS config file to reconcile
        cache_dir: Directory holding cached SSO tokens
    """
    role_name: str
    start_domain: str
    profile_prefix: str = ""
    region: Optional[str] = None
    dry_run: bool = False
    remove: bool = False
    config_file: Path = field(default_factory=default_config_file)
    cache_dir: Path = field(default_factory=default_cache_dir)

    def resolve_region(self, token: SSOToken) -> str:
        return self.region or token.region
