"""Exception hierarchy for rosterctl.

Each error carries a stable ``code`` that the service layer copies into
:class:`~rosterctl.services.result.ServiceError` so callers can branch on
it without parsing messages.
"""

from __future__ import annotations

from typing import Any


class RosterError(Exception):
    """Base class for all rosterctl domain errors."""

    code = "ROSTER_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class LoadError(RosterError):
    """Bootstrap data could not be read, parsed, or validated."""

    code = "LOAD_FAILED"

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}", source=source)
        self.source = source
        self.reason = reason


class FriendNotFound(RosterError):
    """No roster entry matches the given email."""

    code = "NOT_FOUND"

    def __init__(self, email: str) -> None:
        super().__init__(f"Friend not found: {email}", email=email)
        self.email = email


class DuplicateFriend(RosterError):
    """A roster entry with the given email already exists."""

    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str) -> None:
        super().__init__(f"Friend already exists: {email}", email=email)
        self.email = email
