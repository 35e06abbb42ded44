"""Data types passed between the token, account and profile stages."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# keys that identify a section as written by ssosync for a given run
IDENTIFYING_KEYS = ("sso_start_url", "sso_account_id", "sso_role_name", "region")


@dataclass(frozen=True)
class SSOToken:
    access_token: str
    region: str
    start_url: str


@dataclass(frozen=True)
class Account:
    id: str
    name: str


@dataclass(frozen=True)
class SkippedAccount:
    """An account left out during role validation.

    ``error`` is set when the role lookup failed, and ``None`` when the role
    simply is not assignable in the account.
    """
    account: Account
    reason: str
    error: Optional[Exception] = None


@dataclass
class AccountListing:
    accounts: list[Account] = field(default_factory=list)
    skipped: list[SkippedAccount] = field(default_factory=list)


@dataclass(frozen=True)
class ProfileSettings:
    """Values written to (and matched against) every managed profile section."""
    start_url: str
    region: str
    role_name: str

    def values_for(self, account_id: str) -> dict[str, str]:
        return {
            "sso_start_url": self.start_url,
            "sso_region": self.region,
            "sso_account_id": account_id,
            "sso_role_name": self.role_name,
            "region": self.region,
        }


@dataclass(frozen=True)
class ProfileChange:
    action: str  # "add", "update" or "remove"
    profile_name: str
    values: dict[str, str] = field(default_factory=dict)


@dataclass
class SyncResult:
    config_path: Path
    dry_run: bool = False
    remove: bool = False
    changes: list[ProfileChange] = field(default_factory=list)
    skipped: list[SkippedAccount] = field(default_factory=list)

    @property
    def removed(self) -> list[ProfileChange]:
        return [c for c in self.changes if c.action == "remove"]

    @property
    def written(self) -> list[ProfileChange]:
        return [c for c in self.changes if c.action in ("add", "update")]
