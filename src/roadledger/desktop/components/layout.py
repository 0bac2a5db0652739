"""Layout components for the desktop app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

import flet as ft

if TYPE_CHECKING:
    from ..context import AppContext


def build_app_bar(
    ctx: AppContext,
    title: str,
    *,
    on_logout: Callable[[ft.ControlEvent], None],
    on_refresh: Optional[Callable[[ft.ControlEvent], None]] = None,
) -> ft.AppBar:
    """App bar with the signed-in user and logout/refresh actions."""

    actions: List[ft.Control] = []
    if on_refresh is not None:
        actions.append(
            ft.IconButton(icon=ft.Icons.REFRESH, tooltip="Reload records", on_click=on_refresh)
        )
    if ctx.current_user is not None:
        actions.extend(
            [
                ft.Chip(
                    label=ft.Text(ctx.current_user.username),
                    leading=ft.Icon(ft.Icons.PERSON),
                ),
                ft.IconButton(icon=ft.Icons.LOGOUT, tooltip="Logout", on_click=on_logout),
            ]
        )

    return ft.AppBar(
        leading=ft.Icon(ft.Icons.LOCAL_SHIPPING),
        title=ft.Text(title, size=20, weight=ft.FontWeight.BOLD),
        center_title=False,
        bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
        actions=actions,
    )


def build_card(title: ft.Control, content: ft.Control, expand: bool | int = False) -> ft.Card:
    return ft.Card(
        content=ft.Container(
            ft.Column(controls=[title, ft.Divider(), content], spacing=12),
            padding=16,
        ),
        elevation=2,
        expand=expand,
    )


def empty_state(message: str, ref: Optional[ft.Ref] = None) -> ft.Container:
    """Placeholder shown instead of an empty table."""

    return ft.Container(
        ref=ref,
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
        visible=False,
    )
