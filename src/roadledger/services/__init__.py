"""Service module exports."""

from . import export_csv, form, formatting, gateway, record_store, session, table

__all__ = [
    "export_csv",
    "form",
    "formatting",
    "gateway",
    "record_store",
    "session",
    "table",
]
