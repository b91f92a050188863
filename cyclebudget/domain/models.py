"""Domain type definitions for cyclebudget.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in minor units (integers only)
- CycleStartDay: Day of month (1-31) a budget cycle begins
- PeriodKey: Canonical string identifying a budget cycle
"""

from dataclasses import dataclass
from typing import Literal, NewType

# Money amounts are stored as integer minor units to avoid floating point errors
Money = NewType("Money", int)

# Configured day of month on which every budget cycle starts
CycleStartDay = NewType("CycleStartDay", int)

# "start_year-start_month-start_day-end_year-end_month-end_day", e.g. "2024-1-15-2024-2-14"
PeriodKey = NewType("PeriodKey", str)

EntryKind = Literal["expense", "income"]


class InvalidArgument(ValueError):
    """Raised when a start day, month or reference date is out of range or unparseable."""


@dataclass(frozen=True)
class LedgerEntry:
    """Immutable income or expense record."""

    entry_date: str  # YYYY-MM-DD
    amount: Money
    note: str | None = None
    id: int | None = None
