"""Domain types for expense-tracker.

NewTypes give semantic clarity to plain values:
- Money: Amount in cents (minor units)
- Month: Month key in YYYY-MM format
- CategoryName: Expense category label
- Description: Expense description text
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import NewType

# Money amounts are held as cents to avoid floating point drift in sums
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-08")
Month = NewType("Month", str)

CategoryName = NewType("CategoryName", str)

Description = NewType("Description", str)

DEFAULT_CATEGORY = CategoryName("General")


@dataclass(frozen=True)
class Expense:
    """Immutable spending record."""

    id: int
    date: str  # YYYY-MM-DD
    description: Description
    amount: Money
    category: CategoryName = DEFAULT_CATEGORY
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ExpenseUpdate:
    """Requested changes to an expense. None means the field was not provided."""

    description: str | None = None
    amount: float | None = None
    date: str | None = None
    category: str | None = None


@dataclass
class Store:
    """Everything persisted between invocations."""

    next_id: int = 1
    expenses: list[Expense] = field(default_factory=list)
    budgets: dict[Month, Money] = field(default_factory=dict)
