"""Pure functions for validating user input.

Form-level validators return (is_valid, error_message) tuples so callers can
show the message. require_start_day raises instead, for code that must not
continue with a bad value.
"""

import math
from datetime import date

from cyclebudget.domain.models import CycleStartDay, InvalidArgument

MIN_START_DAY = 1
MAX_START_DAY = 31

# Whole numbers up to here are exact as floats and fit SQLite INTEGER
MAX_AMOUNT = 10**15


def validate_amount(amount: str | int | float) -> tuple[bool, str | None]:
    """Validate an entered amount.

    Amounts are whole numbers of minor units, so fractions are refused rather
    than rounded.

    Args:
        amount: Amount as typed or as a number.

    Returns:
        Tuple of (is_valid, error_message).
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return False, "Enter a valid amount"

    if not math.isfinite(value):
        return False, "Enter a valid amount"

    if value < 0:
        return False, "Amount must be 0 or more"

    if not value.is_integer():
        return False, "Amount must be a whole number"

    if value > MAX_AMOUNT:
        return False, f"Amount must be at most {MAX_AMOUNT:,}"

    return True, None


def validate_date(value: str | None) -> tuple[bool, str | None]:
    """Validate a YYYY-MM-DD date string.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not value:
        return False, "Enter a date"

    try:
        date.fromisoformat(value.strip())
    except ValueError:
        return False, "Enter a valid date"

    return True, None


def validate_start_day(day: str | int) -> tuple[bool, str | None]:
    """Validate a cycle start day.

    Returns:
        Tuple of (is_valid, error_message).
    """
    try:
        value = int(day)
    except (TypeError, ValueError):
        return False, f"Enter a valid day ({MIN_START_DAY}-{MAX_START_DAY})"

    if not MIN_START_DAY <= value <= MAX_START_DAY:
        return False, f"Day must be between {MIN_START_DAY} and {MAX_START_DAY}"

    return True, None


def validate_all(results: list[tuple[bool, str | None]]) -> str | None:
    """Return the first error message, or None if everything is valid."""
    for is_valid, error in results:
        if not is_valid and error:
            return error
    return None


def require_start_day(day: int) -> CycleStartDay:
    """Check a cycle start day, raising on anything outside 1-31.

    Args:
        day: Day of month.

    Returns:
        The day as a CycleStartDay.

    Raises:
        InvalidArgument: If day is not an integer between 1 and 31.
    """
    if isinstance(day, bool) or not isinstance(day, int):
        raise InvalidArgument(f"Start day must be an integer, got {day!r}")
    if not MIN_START_DAY <= day <= MAX_START_DAY:
        raise InvalidArgument(f"Start day must be between {MIN_START_DAY} and {MAX_START_DAY}, got {day}")
    return CycleStartDay(day)
