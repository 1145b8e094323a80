"""Domain models and pure functions for expense-tracker.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from persistence and the CLI
"""

from expense_tracker.domain.models import (
    DEFAULT_CATEGORY,
    CategoryName,
    Description,
    Expense,
    ExpenseUpdate,
    Money,
    Month,
    Store,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "CategoryName",
    "Description",
    "Expense",
    "ExpenseUpdate",
    "Money",
    "Month",
    "Store",
]
