"""Commands for recording, editing, listing and removing incomes and expenses."""

import sqlite3
import sys

from rich.console import Console
from rich.table import Table

from cyclebudget.commands.budget import parse_amount
from cyclebudget.commands.period import describe_cycle, load_start_day, resolve_reference_date
from cyclebudget.dates import format_local_date
from cyclebudget.domain.ledger import cycle_date_bounds, sum_amounts
from cyclebudget.domain.models import EntryKind, InvalidArgument
from cyclebudget.domain.period import calculate_cycle
from cyclebudget.domain.validation import validate_all, validate_amount, validate_date
from cyclebudget.store.queries import delete_entry, get_entries_between, get_entry, insert_entry, update_entry

console = Console()

ENTRY_KINDS: tuple[EntryKind, ...] = ("expense", "income")


def check_kind(kind: str) -> EntryKind:
    """Validate an entry kind argument, exiting on anything unknown."""
    if kind not in ENTRY_KINDS:
        console.print(f"[red]Kind must be one of: {', '.join(ENTRY_KINDS)}[/red]", style="bold")
        sys.exit(1)
    return kind  # type: ignore[return-value]


def check_entry_fields(amount_str: str | None, date_str: str | None) -> None:
    """Run the form validators on the fields given, exiting on the first error."""
    results: list[tuple[bool, str | None]] = []
    if amount_str is not None:
        results.append(validate_amount(amount_str))
    if date_str is not None:
        results.append(validate_date(date_str))

    error = validate_all(results)
    if error:
        console.print(f"[red]{error}[/red]", style="bold")
        sys.exit(1)


def add_command(kind: str, amount_str: str, date_str: str | None = None, note: str | None = None) -> None:
    """Record an expense or income."""
    entry_kind = check_kind(kind)
    check_entry_fields(amount_str, date_str)

    try:
        entry_date = format_local_date(resolve_reference_date(date_str))
        amount = parse_amount(amount_str)
        if amount is None:
            sys.exit(1)

        entry_id = insert_entry(entry_kind, entry_date, amount, note)
        console.print(f"[green]✓ Recorded {entry_kind} #{entry_id}: {amount:,} on {entry_date}[/green]")

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def edit_command(
    kind: str,
    entry_id: int,
    amount_str: str | None = None,
    date_str: str | None = None,
    note: str | None = None,
) -> None:
    """Change the amount, date or note of an expense or income.

    Fields left as None keep their stored value. An empty note clears it.
    """
    entry_kind = check_kind(kind)

    if amount_str is None and date_str is None and note is None:
        console.print("[yellow]Nothing to change: give --amount, --date or --note[/yellow]")
        sys.exit(1)

    check_entry_fields(amount_str, date_str)

    try:
        entry = get_entry(entry_kind, entry_id)
        if entry is None:
            console.print(f"[yellow]No {entry_kind} with ID {entry_id}[/yellow]")
            sys.exit(1)

        amount = entry.amount
        if amount_str is not None:
            parsed = parse_amount(amount_str)
            if parsed is None:
                sys.exit(1)
            amount = parsed

        entry_date = format_local_date(resolve_reference_date(date_str)) if date_str is not None else entry.entry_date
        new_note = (note or None) if note is not None else entry.note

        update_entry(entry_kind, entry_id, entry_date, amount, new_note)
        console.print(f"[green]✓ Updated {entry_kind} #{entry_id}: {amount:,} on {entry_date}[/green]")

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def entries_command(date_str: str | None = None) -> None:
    """List the incomes and expenses of a cycle."""
    start_day = load_start_day()

    try:
        cycle = calculate_cycle(start_day, resolve_reference_date(date_str))
        since, until = cycle_date_bounds(cycle)

        for entry_kind in ENTRY_KINDS:
            entries = get_entries_between(entry_kind, since, until)
            if not entries:
                console.print(f"[dim]No {entry_kind}s in {describe_cycle(cycle)}[/dim]")
                continue

            colour = "red" if entry_kind == "expense" else "green"
            table = Table(title=f"{entry_kind.capitalize()}s - {describe_cycle(cycle)} ({len(entries)})")
            table.add_column("#", style="dim", justify="right")
            table.add_column("Date", style="cyan")
            table.add_column("Amount", justify="right")
            table.add_column("Note", style="white")

            for entry in entries:
                table.add_row(str(entry.id), entry.entry_date, f"[{colour}]{entry.amount:,}[/{colour}]", entry.note or "")

            console.print(table)
            console.print(f"[bold]Total:[/bold] {sum_amounts(entries):,}\n")

    except InvalidArgument as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)


def remove_command(kind: str, entry_id: int) -> None:
    """Delete an expense or income by ID."""
    entry_kind = check_kind(kind)

    try:
        if delete_entry(entry_kind, entry_id):
            console.print(f"[green]✓ Deleted {entry_kind} #{entry_id}[/green]")
        else:
            console.print(f"[yellow]No {entry_kind} with ID {entry_id}[/yellow]")
            sys.exit(1)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
