"""Display formatting for ledger quantities and dates."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from ..models.bilty import to_decimal

CURRENCY_SYMBOL = "₹"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def _quantize(number: Decimal, places: int) -> Decimal:
    """Round half-up to ``places`` decimals without hitting the context precision."""

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(number.as_tuple().digits), number.adjusted() + places + 2)
        result = number.quantize(quantum, rounding=ROUND_HALF_UP)
    # -0.00 reads as a real amount in the ledger
    return result.copy_abs() if result.is_zero() else result


def _fixed(value: Any, places: int) -> str:
    number = to_decimal(value) or Decimal(0)
    return f"{_quantize(number, places):f}"


def format_currency(value: Any) -> str:
    """Two-decimal amount; missing or non-numeric values render as ``0.00``."""

    return _fixed(value, 2)


def format_weight(value: Any) -> str:
    """Three-decimal weight in metric tons, without the unit."""

    return _fixed(value, 3)


def format_volume(value: Any) -> str:
    """Two-decimal diesel volume in litres, without the unit."""

    return _fixed(value, 2)


def format_plain_number(value: Any, default: str = "") -> str:
    """Shortest plain-text form of a number: ``"2.500"`` -> ``"2.5"``, ``100`` -> ``"100"``."""

    number = to_decimal(value)
    if number is None:
        return default
    if number.is_zero():
        return "0"
    if number == number.to_integral_value():
        return f"{_quantize(number, 0):f}"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(number.as_tuple().digits))
        return f"{number.normalize():f}"


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date or timestamp string to its calendar date."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def date_input_value(value: Any) -> str:
    """Trim a stored date to the ``YYYY-MM-DD`` part used by the form."""

    if value is None:
        return ""
    text = str(value).strip()
    return text.split("T", 1)[0]


def format_date(value: Any, date_format: str = DEFAULT_DATE_FORMAT, placeholder: str = "") -> str:
    parsed = parse_date(value)
    if parsed is None:
        return placeholder
    return parsed.strftime(date_format)
