"""Parsing of free-text command-line values."""

import argparse
from datetime import date
from decimal import Decimal, InvalidOperation
from dateutil import parser as date_parser


def parse_amount(value: str) -> Decimal:
    """argparse type for money and share quantities."""
    try:
        amount = Decimal(value.replace(",", "").lstrip("$"))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: '{value}'")
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"amount must be a non-negative number: '{value}'")
    return amount


def parse_date(value: str) -> date:
    """argparse type accepting any date format dateutil understands."""
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        raise argparse.ArgumentTypeError(f"invalid date: '{value}'")


def money(value: Decimal) -> str:
    return f"${value:,.2f}"


def percent(value: Decimal) -> str:
    return f"{value:.2f}%"
