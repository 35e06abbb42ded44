"""
SSOSYNC Error Types.

Fatal errors raised by the sync stages. The sync command is the only place
these are caught and turned into a colored message and a nonzero exit code.
"""

from typing import Optional


class SSOSyncError(Exception):
    """Base class for all errors raised by ssosync."""
    pass


class TokenNotFoundError(SSOSyncError):
    """Raised when no cached SSO token matches the requested start domain."""
    pass


class TransportError(SSOSyncError):
    """Raised when a call to the AWS SSO portal API fails."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class SSOClientError(TransportError):
    """Raised when the SSO client cannot be created for a region."""
    pass


class ConfigFileError(SSOSyncError, OSError):
    """Raised when the AWS config file cannot be loaded or saved."""
    pass
