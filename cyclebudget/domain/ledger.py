"""Pure functions for bounding and totalling entries by cycle."""

from collections.abc import Iterable

from cyclebudget.dates import format_local_date
from cyclebudget.domain.models import LedgerEntry, Money
from cyclebudget.domain.period import BudgetCycle


def cycle_date_bounds(cycle: BudgetCycle) -> tuple[str, str]:
    """Get inclusive (since, until) date strings for filtering stored entries.

    Args:
        cycle: Budget cycle.

    Returns:
        Tuple of (since, until) in YYYY-MM-DD format, both inclusive.
    """
    return format_local_date(cycle.start), format_local_date(cycle.end)


def sum_amounts(entries: Iterable[LedgerEntry]) -> Money:
    """Total the amounts of the given entries."""
    return Money(sum(entry.amount for entry in entries))
