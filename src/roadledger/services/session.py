"""Login state for the ledger client."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..logging_config import get_logger
from ..models.user import User
from .gateway import BiltyGateway
from .record_store import RecordStore

logger = get_logger(__name__)


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class SessionController:
    """Tracks the signed-in user and owns the store's load/clear lifecycle."""

    def __init__(self, gateway: BiltyGateway, store: RecordStore) -> None:
        self.gateway = gateway
        self.store = store
        self.current_user: Optional[User] = None

    @property
    def state(self) -> SessionState:
        return SessionState.LOGGED_IN if self.current_user else SessionState.LOGGED_OUT

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def login(self, username: str, password: str) -> User:
        """Authenticate, then reload every record.

        Raises AuthError or NetworkError without touching the session. A
        LoadError after a successful login propagates with the session kept.
        """

        user = self.gateway.login(username, password)
        self.current_user = user
        logger.info("User logged in", extra={"username": user.username})
        self.store.clear()
        self.store.list()
        return user

    def logout(self) -> None:
        username = self.current_user.username if self.current_user else None
        self.current_user = None
        self.store.clear()
        logger.info("User logged out", extra={"username": username})

    def register_user(self, username: str, password: str) -> None:
        self.gateway.create_user(username, password)
        logger.info("User account created", extra={"username": username})
