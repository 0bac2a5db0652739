"""Schema for bilty (truck dispatch) ledger records."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

# Editable fields in the order the form and the API payload use them.
FIELD_NAMES: tuple[str, ...] = (
    "bilty_sl_no",
    "lr_no",
    "bill_no",
    "bill_date",
    "truck_no",
    "destination",
    "weight",
    "freight",
    "diesel",
    "total_adv",
    "balance",
    "pump_name",
    "payment_officer",
    "damage_if_any",
    "margin",
)
NUMERIC_FIELDS: frozenset[str] = frozenset(
    {"weight", "freight", "diesel", "total_adv", "balance", "margin"}
)
DATE_FIELDS: frozenset[str] = frozenset({"bill_date"})
TEXT_FIELDS: tuple[str, ...] = (
    "bilty_sl_no",
    "lr_no",
    "bill_no",
    "bill_date",
    "truck_no",
    "destination",
    "pump_name",
    "payment_officer",
    "damage_if_any",
    "date_added",
)


def to_decimal(value: Any) -> Optional[Decimal]:
    """Parse a backend or form value into a finite Decimal.

    Returns None for None, blanks, booleans, non-numeric text, NaN and infinity.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float)):
        value = repr(value)
    text = str(value).strip().replace(",", "")
    if not text:
        return None
    try:
        parsed = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


class BiltyRecord(SQLModel):
    """One dispatch entry as returned by ``/api/bilty``.

    Every field except the server-assigned ``id`` is optional; numeric fields that
    arrive blank or malformed are stored as None so formatting never fails.
    """

    id: Optional[int] = Field(default=None)
    bilty_sl_no: Optional[str] = Field(default=None)
    lr_no: Optional[str] = Field(default=None)
    bill_no: Optional[str] = Field(default=None)
    bill_date: Optional[str] = Field(default=None)
    truck_no: Optional[str] = Field(default=None)
    destination: Optional[str] = Field(default=None)
    weight: Optional[Decimal] = Field(default=None)
    freight: Optional[Decimal] = Field(default=None)
    diesel: Optional[Decimal] = Field(default=None)
    total_adv: Optional[Decimal] = Field(default=None)
    balance: Optional[Decimal] = Field(default=None)
    pump_name: Optional[str] = Field(default=None)
    payment_officer: Optional[str] = Field(default=None)
    damage_if_any: Optional[str] = Field(default=None)
    margin: Optional[Decimal] = Field(default=None)
    date_added: Optional[str] = Field(default=None)

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[Decimal]:
        return to_decimal(value)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        return str(value)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return int(value)
