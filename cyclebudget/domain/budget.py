"""Pure functions for budget calculations.

This module contains the functional core for cycle budgets:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in minor units (Money type). A budget of None means
no budget has been set for the cycle yet.
"""

from dataclasses import dataclass
from typing import Literal

from cyclebudget.domain.models import Money
from cyclebudget.domain.period import BudgetCycle

UsageLevel = Literal["ok", "warning", "over"]

WARNING_PERCENTAGE = 80.0
OVER_PERCENTAGE = 100.0


@dataclass(frozen=True)
class CycleBudgetStatus:
    """Immutable budget status for one cycle."""

    cycle: BudgetCycle
    budget: Money | None
    total_incomes: Money
    total_expenses: Money
    available: Money
    remaining: Money | None
    percentage: float
    remaining_days: int
    daily_budget: float | None
    level: UsageLevel
    overdrawn: bool


def calculate_remaining_budget(budget: Money | None, total_incomes: Money, total_expenses: Money) -> Money | None:
    """Calculate what is left of the budget after incomes and expenses.

    Args:
        budget: Budget for the cycle, or None if unset.
        total_incomes: Sum of incomes in the cycle.
        total_expenses: Sum of expenses in the cycle.

    Returns:
        Remaining amount (negative when overspent), or None if no budget.
    """
    if budget is None:
        return None
    return Money(budget + total_incomes - total_expenses)


def calculate_available_budget(budget: Money | None, total_incomes: Money) -> Money:
    """Calculate the spendable amount (budget plus incomes), 0 without a budget."""
    if budget is None:
        return Money(0)
    return Money(budget + total_incomes)


def calculate_budget_percentage(total_expenses: Money, available: Money) -> float:
    """Calculate percentage of the available budget used.

    Args:
        total_expenses: Sum of expenses in the cycle.
        available: Budget plus incomes.

    Returns:
        Percentage used (0-100+), 0 when nothing is available.
    """
    if available <= 0:
        return 0.0
    return (total_expenses / available) * 100


def calculate_daily_budget(remaining: Money | None, remaining_days: int) -> float | None:
    """Spread the remaining budget over the remaining days.

    Returns:
        Amount per day, or None without a budget or with no days left.
    """
    if remaining is None or remaining_days <= 0:
        return None
    return remaining / remaining_days


def is_budget_overdrawn(remaining: Money | None) -> bool:
    """Check whether more has been spent than was available."""
    if remaining is None:
        return False
    return remaining < 0


def budget_usage_level(percentage: float) -> UsageLevel:
    """Classify budget usage for display."""
    if percentage > OVER_PERCENTAGE:
        return "over"
    if percentage > WARNING_PERCENTAGE:
        return "warning"
    return "ok"


def compute_cycle_status(
    cycle: BudgetCycle,
    budget: Money | None,
    total_incomes: Money,
    total_expenses: Money,
    remaining_days: int,
) -> CycleBudgetStatus:
    """Compute budget status for a cycle.

    Args:
        cycle: The cycle being reported.
        budget: Budget stored for the cycle, or None.
        total_incomes: Sum of incomes in the cycle.
        total_expenses: Sum of expenses in the cycle.
        remaining_days: Days left in the cycle, including today.

    Returns:
        CycleBudgetStatus with all derived figures.
    """
    remaining = calculate_remaining_budget(budget, total_incomes, total_expenses)
    available = calculate_available_budget(budget, total_incomes)
    percentage = calculate_budget_percentage(total_expenses, available)

    return CycleBudgetStatus(
        cycle=cycle,
        budget=budget,
        total_incomes=total_incomes,
        total_expenses=total_expenses,
        available=available,
        remaining=remaining,
        percentage=percentage,
        remaining_days=remaining_days,
        daily_budget=calculate_daily_budget(remaining, remaining_days),
        level=budget_usage_level(percentage),
        overdrawn=is_budget_overdrawn(remaining),
    )
