"""Pure functions for building the cumulative usage chart series.

This module contains the functional core for charts:
- No I/O operations and no plotting
- One data point per day of a cycle
- Rendering is left to the caller
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from cyclebudget.dates import format_local_date, format_month_day, iter_days
from cyclebudget.domain.models import LedgerEntry, Money


@dataclass(frozen=True)
class ChartPoint:
    """Immutable chart data for a single day."""

    date: str  # YYYY-MM-DD
    date_label: str  # M/D
    actual_expense: Money  # cumulative expenses minus cumulative incomes
    budget_line: float | None  # budget spread evenly up to this day


def totals_by_date(entries: Iterable[LedgerEntry]) -> dict[str, Money]:
    """Sum entry amounts per YYYY-MM-DD date."""
    totals: dict[str, int] = defaultdict(int)
    for entry in entries:
        totals[entry.entry_date] += entry.amount
    return {day: Money(amount) for day, amount in totals.items()}


def generate_chart_data(
    cycle_start: date,
    cycle_end: date,
    budget: Money | None,
    expenses: Iterable[LedgerEntry],
    incomes: Iterable[LedgerEntry],
) -> list[ChartPoint]:
    """Build the daily series for the budget usage chart.

    Args:
        cycle_start: First day of the cycle.
        cycle_end: Last day of the cycle.
        budget: Budget for the cycle, or None to omit the budget line.
        expenses: Expense entries; entries outside the cycle are ignored.
        incomes: Income entries; entries outside the cycle are ignored.

    Returns:
        One ChartPoint per day, oldest first.
    """
    days = iter_days(cycle_start, cycle_end)
    daily_budget = budget / len(days) if budget is not None and days else None

    expenses_by_date = totals_by_date(expenses)
    incomes_by_date = totals_by_date(incomes)

    points: list[ChartPoint] = []
    cumulative_expense = 0
    cumulative_income = 0

    for elapsed, day in enumerate(days, 1):
        key = format_local_date(day)
        cumulative_expense += expenses_by_date.get(key, 0)
        cumulative_income += incomes_by_date.get(key, 0)

        points.append(
            ChartPoint(
                date=key,
                date_label=format_month_day(day),
                actual_expense=Money(cumulative_expense - cumulative_income),
                budget_line=daily_budget * elapsed if daily_budget is not None else None,
            )
        )

    return points
