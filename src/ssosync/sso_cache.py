"""
SSO token cache lookup for SSOSYNC.

The AWS CLI stores SSO access tokens as JSON files under ``~/.aws/sso/cache``.
This module picks the most recently written token for a start domain.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ssosync.errors import TokenNotFoundError
from ssosync.models import SSOToken

logger = logging.getLogger(__name__)


def parse_sso_token(raw: Union[str, bytes]) -> Optional[SSOToken]:
    """
    Parse the contents of a cache file into an SSOToken.

    Args:
        raw: Raw JSON of a cache file, as text or undecoded bytes

    Returns:
        SSOToken, or None if the contents are not a usable token
    """
    try:
        data = json.loads(raw)
    except ValueError:
        # also covers UnicodeDecodeError for bytes that are not valid UTF-8
        return None

    if not isinstance(data, dict):
        return None

    access_token = data.get("accessToken")
    if not isinstance(access_token, str) or not access_token:
        return None

    region = data.get("region")
    start_url = data.get("startUrl")
    return SSOToken(
        access_token=access_token,
        region=region if isinstance(region, str) else "",
        start_url=start_url if isinstance(start_url, str) else "",
    )


def find_sso_token(cache_dir: Union[str, Path], start_domain: str = "") -> SSOToken:
    """
    Find the newest cached SSO token whose start URL contains start_domain.

    Every ``*.json`` file in cache_dir is considered, in name order. Files that
    cannot be read or parsed are skipped. When several files share the newest
    modification time, the last one enumerated wins.

    Args:
        cache_dir: Directory containing the SSO token cache
        start_domain: Substring the token's start URL must contain; empty
            matches every token

    Returns:
        SSOToken: The selected token

    Raises:
        TokenNotFoundError: If the directory is unreadable or nothing matches
    """
    cache_dir = Path(cache_dir)
    try:
        cache_files = sorted(p for p in cache_dir.iterdir() if p.suffix == ".json")
    except OSError as e:
        raise TokenNotFoundError(f"Unable to read SSO cache directory {cache_dir}: {e}") from e

    selected = None
    latest_mtime = None

    for cache_file in cache_files:
        try:
            raw = cache_file.read_bytes()
            mtime = cache_file.stat().st_mtime
        except OSError as e:
            logger.debug("Skipping unreadable cache file %s: %s", cache_file.name, e)
            continue

        token = parse_sso_token(raw)
        if token is None:
            logger.debug("Skipping %s: not an SSO token", cache_file.name)
            continue

        if start_domain and start_domain not in token.start_url:
            continue

        if latest_mtime is None or mtime >= latest_mtime:
            latest_mtime = mtime
            selected = (cache_file, token)

    if selected is None:
        raise TokenNotFoundError(f"Unable to find an AWS SSO token for domain {start_domain}")

    logger.debug("Using SSO token from %s", selected[0])
    return selected[1]
