"""Chart command: cumulative spending against the budget line."""

import sqlite3
import sys

from rich.console import Console
from rich.table import Table

from cyclebudget.commands.period import describe_cycle, load_start_day, resolve_reference_date
from cyclebudget.domain.chart import ChartPoint, generate_chart_data
from cyclebudget.domain.ledger import cycle_date_bounds
from cyclebudget.domain.models import InvalidArgument, Money
from cyclebudget.domain.period import calculate_cycle
from cyclebudget.store.queries import get_budget, get_entries_between

console = Console()


def calculate_bar_length(amount: float, max_amount: float, bar_width: int) -> int:
    """Calculate bar length for a value, scaled to the largest value."""
    if max_amount <= 0 or amount <= 0:
        return 0
    return int((amount / max_amount) * bar_width)


def render_chart(points: list[ChartPoint], bar_width: int = 30) -> None:
    """Render chart points as a table with text bars."""
    values = [float(p.actual_expense) for p in points]
    values += [p.budget_line for p in points if p.budget_line is not None]
    scale = max(values, default=0.0)

    table = Table()
    table.add_column("Day", style="cyan")
    table.add_column("Net spent", justify="right")
    table.add_column("Budget line", justify="right", style="dim")
    table.add_column("")

    for point in points:
        over = point.budget_line is not None and point.actual_expense > point.budget_line
        colour = "red" if over else "green"
        bar = "█" * calculate_bar_length(point.actual_expense, scale, bar_width)
        budget_display = f"{point.budget_line:,.0f}" if point.budget_line is not None else "-"
        table.add_row(point.date_label, f"{point.actual_expense:,}", budget_display, f"[{colour}]{bar}[/{colour}]")

    console.print(table)


def chart_command(date_str: str | None = None) -> None:
    """Show the cumulative usage chart for a cycle."""
    start_day = load_start_day()

    try:
        cycle = calculate_cycle(start_day, resolve_reference_date(date_str))
        since, until = cycle_date_bounds(cycle)

        budget: Money | None = get_budget(cycle)
        expenses = get_entries_between("expense", since, until)
        incomes = get_entries_between("income", since, until)

        points = generate_chart_data(cycle.start, cycle.end, budget, expenses, incomes)

        console.print(f"[bold cyan]{describe_cycle(cycle)}[/bold cyan]")
        if budget is None:
            console.print("[dim]No budget set, budget line omitted[/dim]")
        render_chart(points)

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
