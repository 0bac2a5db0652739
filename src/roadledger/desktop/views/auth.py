"""Login view with a create-user dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...errors import AuthError, LedgerError, LoadError, NetworkError
from ...logging_config import get_logger
from ..components import show_toast
from ..navigation import LEDGER_ROUTE, LOGIN_ROUTE

if TYPE_CHECKING:  # pragma: no cover
    from ..context import AppContext

logger = get_logger(__name__)

LOGIN_LABEL = "Log In"
LOGGING_IN_LABEL = "Logging In..."
LOAD_FAILED = "Error loading data. Check backend URL."


def build_auth_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the login gate shown while no user is signed in."""

    username_field = ft.TextField(label="Username", autofocus=True, width=300)
    password_field = ft.TextField(
        label="Password", password=True, can_reveal_password=True, width=300
    )
    error_text = ft.Text("", color=ft.Colors.ERROR, visible=False)
    login_button = ft.FilledButton(LOGIN_LABEL, width=300)

    def do_login(_e):
        error_text.visible = False
        login_button.text = LOGGING_IN_LABEL
        login_button.disabled = True
        page.update()

        load_error: LoadError | None = None
        try:
            user = ctx.session.login(username_field.value or "", password_field.value or "")
        except (AuthError, NetworkError) as exc:
            logger.warning(f"Login failed: {exc.message}")
            error_text.value = exc.message
            error_text.visible = True
            return
        except LoadError as exc:
            logger.error(f"Record load after login failed: {exc.message}")
            user = ctx.current_user
            load_error = exc
        finally:
            login_button.text = LOGIN_LABEL
            login_button.disabled = False
            page.update()

        password_field.value = ""
        ctx.form.begin_create()
        page.go(LEDGER_ROUTE)
        if load_error is not None:
            show_toast(page, LOAD_FAILED, is_error=True)
        else:
            show_toast(page, f"Welcome, {user.username}!")

    login_button.on_click = do_login
    username_field.on_submit = lambda _: password_field.focus()
    password_field.on_submit = do_login

    def open_create_user(_e):
        page.dialog = build_create_user_dialog(ctx, page)
        page.dialog.open = True
        page.update()

    return ft.View(
        route=LOGIN_ROUTE,
        controls=[
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Icon(ft.Icons.LOCAL_SHIPPING, size=64, color=ft.Colors.PRIMARY),
                        ft.Text(
                            ctx.config.APP_NAME,
                            size=28,
                            weight=ft.FontWeight.BOLD,
                            text_align=ft.TextAlign.CENTER,
                        ),
                        ft.Text(
                            "Sign in to continue",
                            size=16,
                            color=ft.Colors.ON_SURFACE_VARIANT,
                        ),
                        ft.Container(height=24),
                        username_field,
                        password_field,
                        error_text,
                        ft.Container(height=8),
                        login_button,
                        ft.TextButton("Create user", on_click=open_create_user),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=8,
                ),
                alignment=ft.alignment.center,
                expand=True,
            )
        ],
        padding=20,
    )


def build_create_user_dialog(ctx: AppContext, page: ft.Page) -> ft.AlertDialog:
    new_username = ft.TextField(label="New username", width=280)
    new_password = ft.TextField(
        label="New password", password=True, can_reveal_password=True, width=280
    )
    error_text = ft.Text("", color=ft.Colors.ERROR, visible=False)

    def close(_e=None):
        dialog.open = False
        page.update()

    def submit(_e):
        error_text.visible = False
        try:
            ctx.session.register_user(new_username.value or "", new_password.value or "")
        except LedgerError as exc:
            error_text.value = exc.message
            error_text.visible = True
            page.update()
            return
        new_username.value = ""
        new_password.value = ""
        close()
        show_toast(page, "User created successfully! You can now log in.")

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Create user"),
        content=ft.Column(
            controls=[new_username, new_password, error_text],
            tight=True,
            spacing=10,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=close),
            ft.FilledButton("Create", on_click=submit),
        ],
    )
    return dialog
