"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_iso_date(date_str: str) -> bool:
    """Return True when a string has the YYYY-MM-DD ledger date shape."""
    return bool(ISO_DATE_PATTERN.match(date_str.strip()))


def is_calendar_date(date_str: str) -> bool:
    """Return True when a string is a YYYY-MM-DD date that exists.

    "2024-02-30" has the right shape but is rejected here.
    """
    if not is_iso_date(date_str):
        return False
    try:
        date.fromisoformat(date_str.strip())
    except ValueError:
        return False
    return True


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "this month", "last month", etc.

    Month-relative forms resolve to the first of the month, which is how
    monthly ledger snapshots are usually dated.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "next month": (today + relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def to_ledger_date(date_str: str) -> str:
    """Parse any accepted date form and return it as YYYY-MM-DD."""
    return parse_date(date_str).isoformat()
