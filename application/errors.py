"""
Error taxonomy raised by the services.

Every error is raised before anything is saved, so a failed operation
leaves the persisted document unchanged. None of them are retried here.
"""

from typing import Optional


class StoreError(Exception):
    """Base class for service errors."""

    default_message = "Operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmail(StoreError):
    """Raised when an email is already used by another user (case-insensitive)."""

    default_message = "Email is already in use"


class UserNotFound(StoreError):
    """Raised when no user matches the given id or email."""

    default_message = "User not found"


class InvalidCredentials(StoreError):
    """Raised when the password digest does not match the stored one."""

    default_message = "Invalid password"


class EntryNotFound(StoreError):
    """Raised when an entry id does not exist for the user."""

    default_message = "Entry not found"


class InvalidFormat(StoreError):
    """Raised when an imported document cannot be parsed or lacks required keys."""

    default_message = "Invalid document format"
