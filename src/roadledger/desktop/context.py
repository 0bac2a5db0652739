"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import flet as ft
import requests

from ..config import BaseConfig
from ..models.user import User
from ..services.form import FormController
from ..services.gateway import BiltyGateway
from ..services.record_store import RecordStore
from ..services.session import SessionController


@dataclass
class AppContext:
    """Explicit application state shared by the views.

    Views read from here and change it only through the session, store and
    form operations.
    """

    config: BaseConfig
    gateway: BiltyGateway
    store: RecordStore
    session: SessionController
    form: FormController

    page: Optional[ft.Page] = None
    loading: bool = False
    dev_mode: bool = False

    @property
    def current_user(self) -> Optional[User]:
        return self.session.current_user


def create_app_context(
    config: Optional[BaseConfig] = None,
    http_session: Optional[requests.Session] = None,
) -> AppContext:
    """Wire the gateway, store and controllers for one app window."""

    if config is None:
        config = BaseConfig()

    gateway = BiltyGateway(config, session=http_session)
    store = RecordStore(gateway)
    return AppContext(
        config=config,
        gateway=gateway,
        store=store,
        session=SessionController(gateway, store),
        form=FormController(),
        dev_mode=config.DEV_MODE,
    )
