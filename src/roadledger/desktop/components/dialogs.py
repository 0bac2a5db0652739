"""Dialog and toast helpers for the desktop app."""

from __future__ import annotations

from typing import Callable, Optional

import flet as ft


def _refresh(page: ft.Page) -> None:
    try:
        page.update()
    except AssertionError:
        # Headless contexts may not attach the overlay to a live page
        pass


def show_toast(page: ft.Page, message: str, is_error: bool = False) -> None:
    """Short-lived status message: green on success, red on failure."""

    page.snack_bar = ft.SnackBar(
        content=ft.Text(message, color=ft.Colors.WHITE),
        bgcolor=ft.Colors.RED_600 if is_error else ft.Colors.GREEN_600,
        duration=3000,
    )
    page.snack_bar.open = True
    _refresh(page)


def show_error_dialog(page: ft.Page, title: str, message: str) -> None:
    def close_dialog(_e):
        dialog.open = False
        _refresh(page)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[ft.TextButton("OK", on_click=close_dialog)],
    )
    page.dialog = dialog
    dialog.open = True
    _refresh(page)


def show_confirm_dialog(
    page: ft.Page,
    title: str,
    message: str,
    on_confirm: Callable[[], None],
    on_cancel: Optional[Callable[[], None]] = None,
) -> None:
    """Ask before a destructive action; ``on_confirm`` runs after the dialog closes."""

    def handle_confirm(_e):
        dialog.open = False
        _refresh(page)
        on_confirm()

    def handle_cancel(_e):
        dialog.open = False
        _refresh(page)
        if on_cancel:
            on_cancel()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[
            ft.TextButton("Cancel", on_click=handle_cancel),
            ft.FilledButton("Delete", on_click=handle_confirm),
        ],
    )
    page.dialog = dialog
    dialog.open = True
    _refresh(page)
