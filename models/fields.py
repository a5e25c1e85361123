"""Conversions shared by the model ``to_dict``/``from_dict`` methods."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from dateutil.parser import isoparse


def to_decimal(value: Any) -> Decimal:
    """Convert a stored number (string, int or float) to Decimal.

    Raises:
        ValueError: If the value is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def to_date(value: Any) -> date:
    """Convert a stored ISO-8601 string to a date.

    Timestamps with a time part are truncated to their date.

    Raises:
        ValueError: If the value is not an ISO-8601 date or timestamp.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Not a date: {value!r}")
    return isoparse(value).date()


def same_month(a: date, b: date) -> bool:
    """True when both dates fall in the same calendar year and month."""
    return a.year == b.year and a.month == b.month
