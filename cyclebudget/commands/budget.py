"""Budget command for setting and reviewing the cycle budget."""

import sqlite3
import sys

from rich.console import Console

from cyclebudget.commands.period import describe_cycle, load_start_day, resolve_reference_date
from cyclebudget.domain.budget import CycleBudgetStatus, compute_cycle_status
from cyclebudget.domain.ledger import cycle_date_bounds, sum_amounts
from cyclebudget.domain.models import InvalidArgument, Money
from cyclebudget.domain.period import calculate_cycle, is_current_cycle, remaining_days
from cyclebudget.domain.validation import validate_amount
from cyclebudget.store.queries import delete_budget, get_budget, get_entries_between, set_budget

console = Console()

LEVEL_STYLES = {"ok": "green", "warning": "yellow", "over": "red"}


def parse_amount(amount_str: str) -> Money | None:
    """Parse an amount string into Money.

    Args:
        amount_str: Amount as typed, in minor units.

    Returns:
        Money amount, or None if invalid.
    """
    is_valid, error = validate_amount(amount_str)
    if not is_valid:
        console.print(f"[red]{error}[/red]")
        return None
    return Money(int(float(amount_str)))


def render_status(status: CycleBudgetStatus) -> None:
    """Print a budget status block."""
    console.print(f"[bold cyan]{describe_cycle(status.cycle)}[/bold cyan]\n")

    if status.budget is None:
        console.print("[yellow]No budget set for this cycle[/yellow]")
        console.print("[dim]Set one with 'cyclebudget budget --set AMOUNT'[/dim]\n")

    budget_display = f"{status.budget:,}" if status.budget is not None else "-"
    console.print(f"  Budget:     {budget_display:>12}")
    console.print(f"  Incomes:    {status.total_incomes:>12,}")
    console.print(f"  Expenses:   {status.total_expenses:>12,}")

    if status.remaining is None:
        return

    style = LEVEL_STYLES[status.level]
    console.print(f"  Remaining:  [{style}]{status.remaining:>12,}[/{style}]")
    console.print(f"  Used:       [{style}]{status.percentage:>11.0f}%[/{style}]")

    if status.daily_budget is not None:
        console.print(f"  Per day:    {status.daily_budget:>12,.0f}  [dim]({status.remaining_days} day(s) left)[/dim]")

    if status.overdrawn:
        console.print("\n[red]Budget overdrawn[/red]", style="bold")


def budget_command(set_amount: str | None = None, date_str: str | None = None, clear: bool = False) -> None:
    """Set or clear the budget for a cycle, then show its status."""
    if clear and set_amount is not None:
        console.print("[red]--set and --clear cannot be used together[/red]", style="bold")
        sys.exit(1)

    start_day = load_start_day()

    try:
        reference = resolve_reference_date(date_str)
        cycle = calculate_cycle(start_day, reference)

        if clear:
            if delete_budget(cycle):
                console.print(f"[green]✓ Budget for {describe_cycle(cycle)} cleared[/green]\n")
            else:
                console.print(f"[yellow]No budget was set for {describe_cycle(cycle)}[/yellow]\n")
        elif set_amount is not None:
            amount = parse_amount(set_amount)
            if amount is None:
                sys.exit(1)
            set_budget(cycle, amount)
            console.print(f"[green]✓ Budget for {describe_cycle(cycle)} set to {amount:,}[/green]\n")

        since, until = cycle_date_bounds(cycle)
        total_expenses = sum_amounts(get_entries_between("expense", since, until))
        total_incomes = sum_amounts(get_entries_between("income", since, until))

        # Days left only make sense for the cycle we are in
        today = resolve_reference_date(None)
        days_left = remaining_days(start_day, today) if is_current_cycle(start_day, cycle.start, today) else 0

        status = compute_cycle_status(cycle, get_budget(cycle), total_incomes, total_expenses, days_left)
        render_status(status)

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
