"""Navigation and routing for the Flet app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

import flet as ft

from ..logging_config import get_logger
from .components import show_error_dialog

if TYPE_CHECKING:
    from .context import AppContext

logger = get_logger(__name__)

LOGIN_ROUTE = "/login"
LEDGER_ROUTE = "/ledger"

ViewBuilder = Callable[["AppContext", ft.Page], ft.View]


class Router:
    """Maps routes to view builders and keeps the ledger behind the login."""

    def __init__(self, page: ft.Page, context: AppContext):
        self.page = page
        self.context = context
        self.routes: Dict[str, ViewBuilder] = {}

    def register(self, route: str, builder: ViewBuilder) -> None:
        logger.debug(f"Registering route: {route}")
        self.routes[route] = builder

    def resolve(self, route: str) -> str:
        """Return the route that should actually be shown for ``route``."""

        if not self.context.session.is_authenticated:
            return LOGIN_ROUTE
        if route == LOGIN_ROUTE or route not in self.routes:
            return LEDGER_ROUTE
        return route

    def route_change(self, e: ft.RouteChangeEvent) -> None:
        requested = e.route or "/"
        route = self.resolve(requested)
        if route != requested:
            logger.info(f"Redirecting {requested} -> {route}")
            self.page.go(route)
            return

        builder = self.routes.get(route)
        if builder is None:
            logger.error(f"No builder registered for route: {route}")
            return

        try:
            view = builder(self.context, self.page)
        except Exception as ex:
            logger.error(f"Failed to build view for route {route}: {ex}", exc_info=True)
            show_error_dialog(self.page, "Error", f"Error loading view: {ex}")
            return
        self.page.views.clear()
        self.page.views.append(view)
        self.page.update()
        logger.info(f"Loaded view for route: {route}")

    def view_pop(self, e: ft.ViewPopEvent) -> None:
        if len(self.page.views) > 1:
            self.page.views.pop()
        self.page.go(self.page.views[-1].route)
