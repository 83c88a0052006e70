"""
Exception hierarchy for the admin tools.

Every failure that should end a command with exit status 1 derives from
StaffAdminError. Anything else reaching the CLI is reported as unexpected.
"""

from typing import Optional


class StaffAdminError(Exception):
    """Base class for expected, user-facing failures."""
    exit_code = 1


class UsageError(StaffAdminError):
    """Wrong or missing arguments."""
    pass


class ConfigurationError(StaffAdminError):
    """Required environment configuration is missing."""
    pass


class NotFoundError(StaffAdminError):
    """The targeted staff member does not exist."""

    def __init__(self, username: str):
        super().__init__(f'Staff member "{username}" not found')
        self.username = username


class ConflictError(StaffAdminError):
    """A staff member with the same username already exists."""

    def __init__(self, username: str):
        super().__init__(f'Username "{username}" already exists')
        self.username = username


class StoreError(StaffAdminError):
    """Failure reported by the remote store or the transport in front of it."""

    def __init__(self, message: str, code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @property
    def is_unique_violation(self) -> bool:
        # PostgreSQL unique_violation, surfaced by PostgREST as HTTP 409
        return self.code == "23505"
