"""Desktop views."""

from . import auth, ledger

__all__ = ["auth", "ledger"]
