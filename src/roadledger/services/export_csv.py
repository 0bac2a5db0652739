"""CSV export of the in-memory bilty ledger."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..logging_config import get_logger
from ..models.bilty import BiltyRecord
from .formatting import (
    DEFAULT_DATE_FORMAT,
    format_date,
    format_plain_number,
    format_volume,
    format_weight,
)

logger = get_logger(__name__)

EXPORT_FILENAME = "North_East_Roadways_Ledger.csv"

HEADERS: tuple[str, ...] = (
    "ID",
    "BILTY SL NO.",
    "LR NO.",
    "BILL NO",
    "BILL DATE",
    "TRUCK NO",
    "DESTINATION",
    "Weight (MT)",
    "Freight (₹)",
    "DIESEL (L)",
    "TOTAL ADV (₹)",
    "BALANCE (₹)",
    "PUMP NAME",
    "Payment Officer",
    "Damage If Any",
    "MARGIN (₹)",
    "Date Added",
)


def _text(value) -> str:
    return "" if value is None else str(value)


def _raw_amount(value) -> str:
    return format_plain_number(value, default="0")


def record_to_row(record: BiltyRecord, date_format: str = DEFAULT_DATE_FORMAT) -> list[str]:
    """Serialize one record in header order.

    Money columns are plain numbers; weight and diesel keep fixed decimals.
    """

    return [
        _text(record.id),
        _text(record.bilty_sl_no),
        _text(record.lr_no),
        _text(record.bill_no),
        format_date(record.bill_date, date_format),
        _text(record.truck_no),
        _text(record.destination),
        format_weight(record.weight),
        _raw_amount(record.freight),
        format_volume(record.diesel),
        _raw_amount(record.total_adv),
        _raw_amount(record.balance),
        _text(record.pump_name),
        _text(record.payment_officer),
        _text(record.damage_if_any),
        _raw_amount(record.margin),
        format_date(record.date_added, date_format),
    ]


def render_csv(records: Iterable[BiltyRecord], date_format: str = DEFAULT_DATE_FORMAT) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADERS)
    for record in records:
        writer.writerow(record_to_row(record, date_format))
    return buffer.getvalue()


def export_bilty_csv(
    *,
    records: Sequence[BiltyRecord],
    output_dir: Path,
    filename: str = EXPORT_FILENAME,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Optional[Path]:
    """Write the ledger to ``output_dir/filename``.

    Returns the path written, or None without touching the disk when there is
    nothing to export.
    """

    if not records:
        logger.info("Export skipped, no records")
        return None

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / filename
    # newline="" keeps the writer's "\n" terminators intact on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        fh.write(render_csv(records, date_format))

    logger.info("Ledger exported", extra={"path": str(output_path), "rows": len(records)})
    return output_path
