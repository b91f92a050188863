"""Date utilities for cyclebudget.

Pure functions for calendar-normalising date construction, parsing and formatting.
"""

from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

import pandas as pd

from cyclebudget.domain.models import InvalidArgument

# pandas reads these as the wall clock
RELATIVE_DATE_WORDS = frozenset({"now", "today"})


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling out-of-range months and days into adjacent ones.

    Month 13 is January of the next year and month 0 is December of the
    previous one. Day 0 is the last day of the previous month and a day past
    the end of the month spills into the following month.

    Args:
        year: Calendar year.
        month: Month number, any integer.
        day: Day of month, any integer.

    Returns:
        The normalised date.

    Raises:
        InvalidArgument: If the result falls outside years 1 to 9999.
    """
    years, month_index = divmod(month - 1, 12)
    try:
        first = date(year + years, month_index + 1, 1)
        return first + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        raise InvalidArgument(
            f"Date {year}-{month}-{day} is outside the supported range ({MINYEAR}-{MAXYEAR})"
        ) from e


def add_days(value: date, days: int) -> date:
    """Move a date by a number of days, raising InvalidArgument past years 1-9999."""
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise InvalidArgument(f"{value} {days:+d} days is outside the supported range ({MINYEAR}-{MAXYEAR})") from e


def to_date(value: date | datetime | str) -> date:
    """Coerce a reference date to a calendar date, dropping any time of day.

    Strings must be ISO 8601 dates or timestamps and are parsed with
    pandas.to_datetime. Relative words such as "today" are refused so that the
    current date is only ever passed in explicitly.

    Args:
        value: A date, datetime or date string.

    Returns:
        Calendar date.

    Raises:
        InvalidArgument: If the value is not a date or cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidArgument(f"Reference date must be a date, got {type(value).__name__}")

    text = value.strip()
    if text.lower() in RELATIVE_DATE_WORDS:
        raise InvalidArgument(f"Relative date '{value}' is not allowed, give YYYY-MM-DD")

    try:
        parsed = pd.to_datetime(text, format="ISO8601")
    except (ValueError, OverflowError) as e:
        raise InvalidArgument(f"Could not parse date '{value}'") from e

    if pd.isna(parsed):
        raise InvalidArgument(f"Could not parse date '{value}'")
    return parsed.date()


def format_local_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def format_month_day(value: date) -> str:
    """Format a date as M/D without zero padding (e.g. "2/14")."""
    return f"{value.month}/{value.day}"


def iter_days(start: date, end: date) -> list[date]:
    """List every day from start to end, both inclusive.

    Args:
        start: First day.
        end: Last day.

    Returns:
        Days in ascending order, empty if end is before start.
    """
    count = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(max(count, 0))]
