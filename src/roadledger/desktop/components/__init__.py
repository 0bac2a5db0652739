"""Reusable UI components for the desktop app."""

from .dialogs import show_confirm_dialog, show_error_dialog, show_toast
from .layout import build_app_bar, build_card, empty_state

__all__ = [
    "build_app_bar",
    "build_card",
    "empty_state",
    "show_confirm_dialog",
    "show_error_dialog",
    "show_toast",
]
