"""CLI entry point for cyclebudget."""

import typer

from cyclebudget.commands.admin import init_command
from cyclebudget.commands.budget import budget_command
from cyclebudget.commands.chart import chart_command
from cyclebudget.commands.entries import add_command, edit_command, entries_command, remove_command
from cyclebudget.commands.period import months_command, period_command, periods_command, settings_command

app = typer.Typer(
    name="cyclebudget",
    help="Personal budget tracking with a configurable cycle start day",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Personal budget tracking with a configurable cycle start day."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Reset the config even if files exist"),
    migrate: bool = typer.Option(False, "--migrate", help="Update the database schema only"),
) -> None:
    """Initialize cyclebudget database and configuration."""
    init_command(force, migrate)


@app.command()
def settings(
    start_day: int = typer.Option(None, "--start-day", help="Day of month your budget cycle starts (1-31)"),
) -> None:
    """Show or change your cycle start day."""
    settings_command(start_day)


@app.command()
def period(
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    year: int = typer.Option(None, "--year", help="Calendar year (with --month)"),
    month: int = typer.Option(None, "--month", help="Calendar month 1-12 (with --year)"),
) -> None:
    """Show the budget cycle for a date or month."""
    period_command(date, year, month)


@app.command()
def periods(
    past: int = typer.Option(6, "--past", help="Number of past cycles to list"),
    future: int = typer.Option(1, "--future", help="Number of future cycles to list"),
) -> None:
    """List your budget cycles, newest first."""
    periods_command(past, future)


@app.command()
def months(
    back: int = typer.Option(12, "--back", help="Number of months to go back"),
) -> None:
    """List the cycle for each recent month."""
    months_command(back)


@app.command()
def budget(
    set_amount: str = typer.Option(None, "--set", help="Set the budget for the cycle"),
    date: str = typer.Option(None, "--date", "-d", help="Any date in the cycle (YYYY-MM-DD, default: today)"),
    clear: bool = typer.Option(False, "--clear", help="Remove the budget for the cycle"),
) -> None:
    """Set, clear or show your budget for a cycle."""
    budget_command(set_amount, date, clear)


@app.command()
def add(
    kind: str = typer.Argument(..., help="'expense' or 'income'"),
    amount: str = typer.Argument(..., help="Amount"),
    date: str = typer.Option(None, "--date", "-d", help="Entry date (YYYY-MM-DD, default: today)"),
    note: str = typer.Option(None, "--note", "-n", help="Optional note"),
) -> None:
    """Record an expense or income."""
    add_command(kind, amount, date, note)


@app.command()
def edit(
    kind: str = typer.Argument(..., help="'expense' or 'income'"),
    entry_id: int = typer.Argument(..., help="Entry ID (see 'entries')"),
    amount: str = typer.Option(None, "--amount", "-a", help="New amount"),
    date: str = typer.Option(None, "--date", "-d", help="New date (YYYY-MM-DD)"),
    note: str = typer.Option(None, "--note", "-n", help="New note (empty to clear)"),
) -> None:
    """Change an expense or income."""
    edit_command(kind, entry_id, amount, date, note)


@app.command()
def entries(
    date: str = typer.Option(None, "--date", "-d", help="Any date in the cycle (YYYY-MM-DD, default: today)"),
) -> None:
    """List your incomes and expenses for a cycle."""
    entries_command(date)


@app.command()
def remove(
    kind: str = typer.Argument(..., help="'expense' or 'income'"),
    entry_id: int = typer.Argument(..., help="Entry ID (see 'entries')"),
) -> None:
    """Delete an expense or income."""
    remove_command(kind, entry_id)


@app.command()
def chart(
    date: str = typer.Option(None, "--date", "-d", help="Any date in the cycle (YYYY-MM-DD, default: today)"),
) -> None:
    """Show cumulative spending against your budget line."""
    chart_command(date)


if __name__ == "__main__":
    app()
