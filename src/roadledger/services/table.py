"""Project the record store into display rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.bilty import BiltyRecord
from .formatting import (
    CURRENCY_SYMBOL,
    DEFAULT_DATE_FORMAT,
    format_currency,
    format_date,
    format_volume,
    format_weight,
)

MISSING = "N/A"


@dataclass(frozen=True)
class BiltyRow:
    """Display strings for one table row, keyed by the record id."""

    record_id: Optional[int]
    bilty_sl_no: str
    lr_no: str
    bill_no: str
    bill_date: str
    truck_no: str
    destination: str
    weight: str
    freight: str
    advance: str
    balance: str
    diesel: str
    pump_name: str
    margin: str


@dataclass(frozen=True)
class BiltyTable:
    rows: tuple[BiltyRow, ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def _money(value) -> str:
    return f"{CURRENCY_SYMBOL} {format_currency(value)}"


def project_row(record: BiltyRecord, date_format: str = DEFAULT_DATE_FORMAT) -> BiltyRow:
    return BiltyRow(
        record_id=record.id,
        bilty_sl_no=record.bilty_sl_no or "",
        lr_no=record.lr_no or MISSING,
        bill_no=record.bill_no or "",
        bill_date=format_date(record.bill_date, date_format, placeholder=MISSING),
        truck_no=record.truck_no or MISSING,
        destination=record.destination or "",
        weight=f"{format_weight(record.weight)} MT",
        freight=_money(record.freight),
        advance=f"Adv: {_money(record.total_adv)}",
        balance=f"Bal: {_money(record.balance)}",
        diesel=f"{format_volume(record.diesel)} L",
        pump_name=record.pump_name or "",
        margin=_money(record.margin),
    )


def project_table(
    records: Iterable[BiltyRecord], date_format: str = DEFAULT_DATE_FORMAT
) -> BiltyTable:
    """Build the table view-model; an empty table signals the no-data state."""

    return BiltyTable(rows=tuple(project_row(r, date_format) for r in records))
