"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from cyclebudget.store.queries import (
    delete_budget,
    delete_entry,
    get_budget,
    get_entries_between,
    get_entry,
    insert_entry,
    set_budget,
    update_entry,
)
from cyclebudget.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "delete_budget",
    "delete_entry",
    "get_budget",
    "get_entries_between",
    "get_entry",
    "insert_entry",
    "set_budget",
    "update_entry",
]
