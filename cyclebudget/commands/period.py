"""Period commands for showing budget cycles."""

import sys
from datetime import date

from rich.console import Console
from rich.table import Table

from cyclebudget.config import get_start_day, set_start_day
from cyclebudget.dates import format_local_date, to_date
from cyclebudget.domain.models import CycleStartDay, InvalidArgument
from cyclebudget.domain.period import (
    BudgetCycle,
    WalkStop,
    calculate_cycle,
    calculate_cycle_for_month,
    format_cycle_period,
    is_current_cycle,
    list_cycles_detailed,
    list_monthly_cycles,
    remaining_days,
    shift_reference_month,
)
from cyclebudget.domain.validation import validate_start_day

console = Console()


def resolve_reference_date(date_str: str | None, today: date | None = None) -> date:
    """Turn an optional --date value into a reference date.

    Args:
        date_str: Date given on the command line, or None for today.
        today: Current date. If None, reads the clock.

    Returns:
        Reference date.

    Raises:
        InvalidArgument: If date_str cannot be parsed.
    """
    if date_str:
        return to_date(date_str)
    return today or date.today()


def load_start_day() -> CycleStartDay:
    """Read the configured start day, exiting with a message if unavailable."""
    try:
        return get_start_day()
    except FileNotFoundError:
        console.print("[red]Config not found. Run 'cyclebudget init' first.[/red]", style="bold")
        sys.exit(1)
    except InvalidArgument as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)


def describe_cycle(cycle: BudgetCycle) -> str:
    """Format cycle boundaries as ISO dates."""
    return f"{format_local_date(cycle.start)} → {format_local_date(cycle.end)}"


def settings_command(start_day: int | None = None) -> None:
    """Show or change the cycle start day."""
    try:
        if start_day is not None:
            is_valid, error = validate_start_day(start_day)
            if not is_valid:
                console.print(f"[red]{error}[/red]", style="bold")
                sys.exit(1)

            set_start_day(start_day)
            console.print(f"[green]✓ Cycles now start on day {start_day}[/green]")
            console.print("[dim]Cycle boundaries for past periods have moved accordingly[/dim]")
            return

        current = get_start_day()
        console.print(f"Cycle start day: [bold]{current}[/bold]")

    except FileNotFoundError:
        console.print("[red]Config not found. Run 'cyclebudget init' first.[/red]", style="bold")
        sys.exit(1)
    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def period_command(
    date_str: str | None = None,
    year: int | None = None,
    month: int | None = None,
) -> None:
    """Show the cycle for a date or a calendar month."""
    start_day = load_start_day()
    today = date.today()

    try:
        if year is not None or month is not None:
            if year is None or month is None:
                console.print("[red]--year and --month must be given together[/red]", style="bold")
                sys.exit(1)
            cycle = calculate_cycle_for_month(start_day, year, month)
            reference = cycle.start
        else:
            reference = resolve_reference_date(date_str, today)
            cycle = calculate_cycle(start_day, reference)

        console.print(f"[bold cyan]{format_cycle_period(start_day, reference)}[/bold cyan]")
        console.print(f"[dim]{describe_cycle(cycle)} ({(cycle.end - cycle.start).days + 1} days)[/dim]")

        if is_current_cycle(start_day, reference, today):
            days_left = remaining_days(start_day, today)
            console.print(f"[green]Current cycle[/green], {days_left} day(s) remaining")
        else:
            previous = format_local_date(shift_reference_month(reference, -1))
            following = format_local_date(shift_reference_month(reference, 1))
            console.print("[dim]Not the current cycle[/dim]")
            console.print(f"[dim]Previous: --date {previous}  Next: --date {following}[/dim]")

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)


def periods_command(past: int = 6, future: int = 1) -> None:
    """List cycles around the current one, newest first."""
    start_day = load_start_day()
    today = date.today()

    try:
        listing = list_cycles_detailed(start_day, past, future, today)
    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=f"Budget cycles (start day {start_day})")
    table.add_column("Label", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Key", style="dim")
    table.add_column("", justify="center")

    for entry in listing.entries:
        marker = "●" if entry.cycle.start <= today <= entry.cycle.end else ""
        table.add_row(
            entry.label,
            format_local_date(entry.cycle.start),
            format_local_date(entry.cycle.end),
            entry.period_key,
            marker,
        )

    console.print(table)

    if listing.past_stop is WalkStop.DUPLICATE:
        console.print("[yellow]Fewer past cycles than requested: no further distinct cycles[/yellow]")
    if listing.future_stop is WalkStop.DUPLICATE:
        console.print("[yellow]Fewer future cycles than requested: no further distinct cycles[/yellow]")


def months_command(back: int = 12) -> None:
    """List the cycle of each recent calendar month."""
    start_day = load_start_day()

    try:
        months = list_monthly_cycles(start_day, date.today(), back)
    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title="Monthly cycles")
    table.add_column("Month", style="cyan")
    table.add_column("Cycle")

    for item in months:
        table.add_row(f"{item.year}-{item.month:02d}", describe_cycle(item.cycle))

    console.print(table)
