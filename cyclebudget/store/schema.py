"""Database schema initialization and migrations."""

import os
import sqlite3
from pathlib import Path

ENTRY_TABLES = ("expenses", "incomes")


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_db_path() -> Path:
    """Get the default database path (XDG compliant)."""
    return get_xdg_data_home() / "cyclebudget" / "cyclebudget.db"


def database_exists(db_path: Path | None = None) -> bool:
    """Check if the database file exists.

    Args:
        db_path: Path to check. If None, uses default location.

    Returns:
        True if database exists, False otherwise.
    """
    if db_path is None:
        db_path = get_db_path()
    return db_path.exists()


def init_database(db_path: Path | None = None) -> None:
    """Initialize the database with the required schema.

    Safe to run on an existing database.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database initialization fails.
    """
    if db_path is None:
        db_path = get_db_path()

    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    try:
        # One budget per cycle, keyed by the year and month the cycle starts in
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS budgets (
                start_year INTEGER NOT NULL,
                start_month INTEGER NOT NULL,
                end_year INTEGER NOT NULL,
                end_month INTEGER NOT NULL,
                amount INTEGER NOT NULL,
                PRIMARY KEY (start_year, start_month)
            )
        """
        )

        for table in ENTRY_TABLES:
            cursor.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {table} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    date TEXT NOT NULL,
                    amount INTEGER NOT NULL,
                    note TEXT,
                    created_at TEXT NOT NULL DEFAULT (datetime('now'))
                )
            """
            )

            cursor.execute(f"CREATE INDEX IF NOT EXISTS idx_{table}_date ON {table}(date)")

        conn.commit()

    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()
