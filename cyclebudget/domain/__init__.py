"""Domain models and types for cyclebudget.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations, no clock reads
- Easy to test
- Business logic separated from infrastructure
"""

from cyclebudget.domain.models import (
    CycleStartDay,
    EntryKind,
    InvalidArgument,
    LedgerEntry,
    Money,
    PeriodKey,
)

__all__ = ["CycleStartDay", "EntryKind", "InvalidArgument", "LedgerEntry", "Money", "PeriodKey"]
