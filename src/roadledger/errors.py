"""Error kinds raised by the gateway and controllers.

Every error carries a human-readable ``message`` suitable for a toast or an
inline error label; views catch :class:`LedgerError` at the handler seam.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for user-facing ledger failures."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(LedgerError):
    """The backend could not be reached at all."""


class AuthError(LedgerError):
    """The backend rejected the login."""


class UserCreationError(LedgerError):
    """The backend rejected a new user account."""


class LoadError(LedgerError):
    """Listing records failed."""


class SaveError(LedgerError):
    """Creating or updating a record was rejected."""


class DeleteError(LedgerError):
    """Deleting a record was rejected."""
