"""Database query functions."""

import sqlite3
from pathlib import Path

from cyclebudget.domain.models import EntryKind, LedgerEntry, Money
from cyclebudget.domain.period import BudgetCycle
from cyclebudget.store.schema import get_db_path

_ENTRY_TABLE: dict[str, str] = {"expense": "expenses", "income": "incomes"}


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def _entry_table(kind: EntryKind) -> str:
    try:
        return _ENTRY_TABLE[kind]
    except KeyError:
        raise ValueError(f"Unknown entry kind: {kind!r}") from None


def _row_to_entry(row: sqlite3.Row) -> LedgerEntry:
    return LedgerEntry(entry_date=row["date"], amount=Money(row["amount"]), note=row["note"], id=row["id"])


def get_budget(cycle: BudgetCycle, db_path: Path | None = None) -> Money | None:
    """Get the budget stored for a cycle.

    Args:
        cycle: Budget cycle, looked up by start year and month.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Budget amount, or None if not set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT amount FROM budgets WHERE start_year = ? AND start_month = ?",
            (cycle.start_year, cycle.start_month),
        )
        row = cursor.fetchone()
        return Money(row["amount"]) if row else None


def set_budget(cycle: BudgetCycle, amount: Money, db_path: Path | None = None) -> None:
    """Set (insert or replace) the budget for a cycle.

    Args:
        cycle: Budget cycle.
        amount: Budget amount in minor units.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO budgets (start_year, start_month, end_year, end_month, amount)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(start_year, start_month)
                DO UPDATE SET end_year = excluded.end_year, end_month = excluded.end_month, amount = excluded.amount
                """,
                (cycle.start_year, cycle.start_month, cycle.end_year, cycle.end_month, amount),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_budget(cycle: BudgetCycle, db_path: Path | None = None) -> bool:
    """Delete the budget for a cycle.

    Returns:
        True if a budget was deleted, False if none was set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "DELETE FROM budgets WHERE start_year = ? AND start_month = ?",
                (cycle.start_year, cycle.start_month),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def insert_entry(
    kind: EntryKind,
    date: str,
    amount: Money,
    note: str | None = None,
    db_path: Path | None = None,
) -> int:
    """Insert an expense or income.

    Args:
        kind: "expense" or "income".
        date: Entry date (YYYY-MM-DD).
        amount: Amount in minor units.
        note: Optional free text.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        ID of the new entry.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    table = _entry_table(kind)
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                f"INSERT INTO {table} (date, amount, note) VALUES (?, ?, ?)",
                (date, amount, note),
            )
            conn.commit()
            return int(cursor.lastrowid or 0)
        except sqlite3.Error:
            conn.rollback()
            raise


def get_entry(kind: EntryKind, entry_id: int, db_path: Path | None = None) -> LedgerEntry | None:
    """Get a single expense or income by ID.

    Returns:
        The entry, or None if there is no entry with that ID.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    table = _entry_table(kind)
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(f"SELECT id, date, amount, note FROM {table} WHERE id = ?", (entry_id,))
        row = cursor.fetchone()
        return _row_to_entry(row) if row else None


def update_entry(
    kind: EntryKind,
    entry_id: int,
    date: str,
    amount: Money,
    note: str | None = None,
    db_path: Path | None = None,
) -> bool:
    """Update an expense or income.

    Returns:
        True if the entry existed and was updated.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    table = _entry_table(kind)
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                f"UPDATE {table} SET date = ?, amount = ?, note = ? WHERE id = ?",
                (date, amount, note, entry_id),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_entry(kind: EntryKind, entry_id: int, db_path: Path | None = None) -> bool:
    """Delete an expense or income.

    Returns:
        True if the entry existed and was deleted.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    table = _entry_table(kind)
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(f"DELETE FROM {table} WHERE id = ?", (entry_id,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def get_entries_between(
    kind: EntryKind,
    since: str,
    until: str,
    db_path: Path | None = None,
) -> list[LedgerEntry]:
    """Get expenses or incomes dated between since and until.

    Args:
        kind: "expense" or "income".
        since: First date (YYYY-MM-DD), inclusive.
        until: Last date (YYYY-MM-DD), inclusive.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Entries ordered by date descending, newest entry first within a day.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    table = _entry_table(kind)
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute(
            f"SELECT id, date, amount, note FROM {table} WHERE date >= ? AND date <= ? ORDER BY date DESC, id DESC",
            (since, until),
        )
        return [_row_to_entry(row) for row in cursor.fetchall()]
