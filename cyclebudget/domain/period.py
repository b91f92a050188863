"""Pure functions for budget cycle boundaries and period lists.

This module contains the functional core for budget periods:
- No I/O operations (no database, no console, no clock)
- No side effects
- "Now" is always passed in by the caller
- Easy to test

A cycle starts on the configured start day of one month and ends the day
before the start day of the next month. Dates are built with make_date, so a
start day past the end of a short month rolls into the following month
(start day 31 in February 2023 starts the cycle on March 3rd).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from cyclebudget.dates import add_days, format_month_day, make_date, to_date
from cyclebudget.domain.models import CycleStartDay, InvalidArgument, PeriodKey
from cyclebudget.domain.validation import require_start_day

# Mid-month day used to pick the cycle for a calendar month, inside every month
MID_MONTH_DAY = 15


@dataclass(frozen=True)
class BudgetCycle:
    """Immutable budget cycle boundaries (both dates inclusive)."""

    start: date
    end: date
    start_year: int
    start_month: int
    end_year: int
    end_month: int


@dataclass(frozen=True)
class PeriodListEntry:
    """Immutable period picker entry."""

    cycle: BudgetCycle
    label: str
    reference_date: date
    period_key: PeriodKey


@dataclass(frozen=True)
class MonthlyCycle:
    """Immutable cycle keyed by the year and month it starts in."""

    year: int
    month: int
    cycle: BudgetCycle


class WalkStop(Enum):
    """Why a walk through neighbouring cycles stopped."""

    EXHAUSTED = "exhausted"  # requested number of cycles reached
    DUPLICATE = "duplicate"  # probe landed on a cycle already listed


@dataclass(frozen=True)
class CycleListing:
    """Immutable period list with the reason each walk stopped."""

    entries: list[PeriodListEntry]
    past_stop: WalkStop
    future_stop: WalkStop


def _build_cycle(start: date, end: date) -> BudgetCycle:
    return BudgetCycle(
        start=start,
        end=end,
        start_year=start.year,
        start_month=start.month,
        end_year=end.year,
        end_month=end.month,
    )


def calculate_cycle(start_day: CycleStartDay | int, reference_date: date | datetime | str) -> BudgetCycle:
    """Calculate the budget cycle containing a reference date.

    Args:
        start_day: Day of month the cycle starts on (1-31).
        reference_date: Date to locate, time of day is ignored.

    Returns:
        BudgetCycle with start, end and their year/month components.

    Raises:
        InvalidArgument: If start_day is outside 1-31, the date is invalid or
            the cycle would fall outside years 1-9999.
    """
    start_day = require_start_day(start_day)
    ref = to_date(reference_date)

    if ref.day >= start_day:
        # Cycle began this month
        start = make_date(ref.year, ref.month, start_day)
        end = make_date(ref.year, ref.month + 1, start_day - 1)
    else:
        # Cycle began last month
        start = make_date(ref.year, ref.month - 1, start_day)
        end = make_date(ref.year, ref.month, start_day - 1)

    return _build_cycle(start, end)


def calculate_cycle_for_month(start_day: CycleStartDay | int, year: int, month: int) -> BudgetCycle:
    """Calculate the cycle for a calendar month, evaluated on the 15th.

    Args:
        start_day: Day of month the cycle starts on (1-31).
        year: Calendar year.
        month: Month number (1-12).

    Returns:
        BudgetCycle anchored at or before the given month.

    Raises:
        InvalidArgument: If start_day or month is out of range.
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidArgument(f"Month must be between 1 and 12, got {month!r}")
    return calculate_cycle(start_day, make_date(year, month, MID_MONTH_DAY))


def remaining_days(start_day: CycleStartDay | int, reference_date: date | datetime | str) -> int:
    """Count days left in the cycle, including the reference date itself.

    Args:
        start_day: Day of month the cycle starts on (1-31).
        reference_date: Day to count from.

    Returns:
        Remaining days, 1 on the last day of the cycle, never negative.
    """
    ref = to_date(reference_date)
    cycle = calculate_cycle(start_day, ref)
    return max((cycle.end - ref).days + 1, 0)


def format_cycle_period(start_day: CycleStartDay | int, reference_date: date | datetime | str) -> str:
    """Format the cycle containing reference_date, e.g. "2024-1-15 to 2024-2-14"."""
    cycle = calculate_cycle(start_day, reference_date)
    return (
        f"{cycle.start_year}-{cycle.start_month}-{cycle.start.day} to "
        f"{cycle.end_year}-{cycle.end_month}-{cycle.end.day}"
    )


def format_cycle_short(cycle: BudgetCycle) -> str:
    """Format a cycle as a picker label, e.g. "1/15-2/14"."""
    return f"{format_month_day(cycle.start)}-{format_month_day(cycle.end)}"


def period_key(cycle: BudgetCycle) -> PeriodKey:
    """Build the canonical key from the six integer date components of a cycle."""
    return PeriodKey(
        f"{cycle.start_year}-{cycle.start_month}-{cycle.start.day}-{cycle.end_year}-{cycle.end_month}-{cycle.end.day}"
    )


def is_current_cycle(
    start_day: CycleStartDay | int,
    selected_date: date | datetime | str,
    now: date | datetime | str,
) -> bool:
    """Check whether selected_date falls in the same cycle as now.

    Cycles are compared by start and end year/month.
    """
    current = calculate_cycle(start_day, now)
    selected = calculate_cycle(start_day, selected_date)
    return (
        current.start_year == selected.start_year
        and current.start_month == selected.start_month
        and current.end_year == selected.end_year
        and current.end_month == selected.end_month
    )


def shift_reference_month(reference_date: date | datetime | str, offset: int) -> date:
    """Move a reference date by whole months, landing on the 15th.

    Args:
        reference_date: Date to move from.
        offset: Number of months, negative for the past.

    Returns:
        The 15th of the target month.
    """
    ref = to_date(reference_date)
    return make_date(ref.year, ref.month + offset, MID_MONTH_DAY)


def _make_entry(cycle: BudgetCycle, reference_date: date) -> PeriodListEntry:
    return PeriodListEntry(
        cycle=cycle,
        label=format_cycle_short(cycle),
        reference_date=reference_date,
        period_key=period_key(cycle),
    )


def _require_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _walk_cycles(
    start_day: int,
    origin: BudgetCycle,
    count: int,
    forward: bool,
    seen: set[PeriodKey],
) -> tuple[list[PeriodListEntry], WalkStop]:
    """Step away from origin one cycle at a time.

    Each probe is the day before the last cycle's start (backward) or the day
    after its end (forward). Stops after count cycles, or as soon as a probe
    reproduces a cycle already in seen.

    Returns:
        Tuple of (entries in discovery order, stop reason).
    """
    entries: list[PeriodListEntry] = []
    last = origin

    for _ in range(count):
        if forward:
            probe = add_days(last.end, 1)
        else:
            probe = add_days(last.start, -1)

        cycle = calculate_cycle(start_day, probe)
        key = period_key(cycle)
        if key in seen:
            return entries, WalkStop.DUPLICATE

        seen.add(key)
        entries.append(_make_entry(cycle, cycle.start))
        last = cycle

    return entries, WalkStop.EXHAUSTED


def list_cycles_detailed(
    start_day: CycleStartDay | int,
    past_count: int,
    future_count: int,
    now: date | datetime | str,
) -> CycleListing:
    """List cycles around now for a period picker, with walk stop reasons.

    Args:
        start_day: Day of month the cycle starts on (1-31).
        past_count: Maximum number of cycles before the current one.
        future_count: Maximum number of cycles after the current one.
        now: Date whose cycle is the current one.

    Returns:
        CycleListing with entries unique by period key, newest start first.

    Raises:
        InvalidArgument: If start_day, counts or now are invalid.
    """
    start_day = require_start_day(start_day)
    past_count = _require_count("past_count", past_count)
    future_count = _require_count("future_count", future_count)
    today = to_date(now)

    current = calculate_cycle(start_day, today)
    current_entry = _make_entry(current, today)
    seen = {current_entry.period_key}

    past, past_stop = _walk_cycles(start_day, current, past_count, forward=False, seen=seen)
    future, future_stop = _walk_cycles(start_day, current, future_count, forward=True, seen=seen)

    entries = sorted(past + [current_entry] + future, key=lambda e: e.cycle.start, reverse=True)

    return CycleListing(entries=entries, past_stop=past_stop, future_stop=future_stop)


def list_cycles(
    start_day: CycleStartDay | int,
    past_count: int,
    future_count: int,
    now: date | datetime | str,
) -> list[PeriodListEntry]:
    """List cycles around now, newest first. See list_cycles_detailed."""
    return list_cycles_detailed(start_day, past_count, future_count, now).entries


def list_monthly_cycles(
    start_day: CycleStartDay | int,
    now: date | datetime | str,
    months_back: int = 12,
) -> list[MonthlyCycle]:
    """List the cycles of the current and previous calendar months.

    Each month is evaluated on its 15th. Months whose cycle starts in the same
    year and month as one already listed are skipped.

    Args:
        start_day: Day of month the cycle starts on (1-31).
        now: Date whose month is the newest one listed.
        months_back: Number of months to go back from now.

    Returns:
        List of MonthlyCycle, newest first.
    """
    start_day = require_start_day(start_day)
    months_back = _require_count("months_back", months_back)
    today = to_date(now)

    results: list[MonthlyCycle] = []
    seen: set[tuple[int, int]] = set()

    for offset in range(months_back + 1):
        probe = make_date(today.year, today.month - offset, MID_MONTH_DAY)
        cycle = calculate_cycle(start_day, probe)
        key = (cycle.start_year, cycle.start_month)
        if key in seen:
            continue
        seen.add(key)
        results.append(MonthlyCycle(year=cycle.start_year, month=cycle.start_month, cycle=cycle))

    return results
