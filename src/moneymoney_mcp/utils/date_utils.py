"""
Date utilities for MoneyMoney date arguments.

MoneyMoney expects calendar dates as YYYY-MM-DD.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

_DAY_PERIODS = {"last_7_days": 7, "last_30_days": 30, "last_90_days": 90}

PERIODS = (
    "this_month",
    "last_month",
    "this_year",
    "last_year",
    *_DAY_PERIODS,
    "ytd",
)


def parse_iso_date(value: Union[str, date]) -> date:
    """
    Parse a YYYY-MM-DD string.

    Args:
        value: Date string, or a date which is returned unchanged

    Returns:
        Parsed date

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid date (expected YYYY-MM-DD): {value}") from None


def parse_period(period: str, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Parse a period shorthand into (start_date, end_date).

    Supported periods:
    - "this_month", "last_month"
    - "this_year", "last_year"
    - "last_7_days", "last_30_days", "last_90_days"
    - "ytd" (year to date)

    Args:
        period: Period shorthand
        today: Reference date (default: today)

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period is not recognized
    """
    if today is None:
        today = date.today()

    if period == "this_month":
        return get_month_range(today.year, today.month)

    elif period == "last_month":
        last_day_last_month = today.replace(day=1) - timedelta(days=1)
        return get_month_range(last_day_last_month.year, last_day_last_month.month)

    elif period == "this_year":
        return date(today.year, 1, 1), date(today.year, 12, 31)

    elif period == "last_year":
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)

    elif period in _DAY_PERIODS:
        return today - timedelta(days=_DAY_PERIODS[period]), today

    elif period == "ytd":
        return date(today.year, 1, 1), today

    else:
        raise ValueError(f"Unknown period: {period}")


def get_month_range(year: int, month: int) -> Tuple[date, date]:
    """
    Get the first and last day of a month.

    Raises:
        ValueError: If month is not in valid range (1-12)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")

    _, last_day = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)
