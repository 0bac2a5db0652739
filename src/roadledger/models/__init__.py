"""Schema exports."""

from .bilty import DATE_FIELDS, FIELD_NAMES, NUMERIC_FIELDS, BiltyRecord, to_decimal
from .user import User

__all__ = [
    "BiltyRecord",
    "DATE_FIELDS",
    "FIELD_NAMES",
    "NUMERIC_FIELDS",
    "User",
    "to_decimal",
]
