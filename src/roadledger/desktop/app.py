"""Main Flet application entry point."""

from __future__ import annotations

import flet as ft

from ..logging_config import setup_logging
from .components import show_toast
from .context import create_app_context
from .navigation import LEDGER_ROUTE, LOGIN_ROUTE, Router
from .views.auth import build_auth_view
from .views.ledger import build_ledger_view


def main(page: ft.Page) -> None:
    """Configure the page, wire routes and open the login gate."""

    ctx = create_app_context()
    logger = setup_logging(ctx.config)
    logger.info("Roadways ledger starting", extra={"api_url": ctx.config.API_URL})

    ctx.page = page
    page.title = f"{ctx.config.APP_NAME} (DEV)" if ctx.dev_mode else ctx.config.APP_NAME
    page.theme_mode = ft.ThemeMode.LIGHT
    page.padding = 0
    page.window.width = 1280
    page.window.height = 800
    page.window.min_width = 900
    page.window.min_height = 600

    def on_close(_e):
        logger.info("Application closing")
        ctx.gateway.http.close()

    page.on_close = on_close

    def on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        message = getattr(e, "data", None) or "<no-data>"
        logger.error("Flet page error", extra={"event": "error", "data": message})
        show_toast(page, f"UI error: {message}", is_error=True)

    page.on_error = on_error

    router = Router(page, ctx)
    router.register(LOGIN_ROUTE, build_auth_view)
    router.register(LEDGER_ROUTE, build_ledger_view)
    page.on_route_change = router.route_change
    page.on_view_pop = router.view_pop

    page.go(LOGIN_ROUTE)


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
