"""Pure functions for monthly budget logic.

This module contains the functional core for budget operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

from dataclasses import dataclass

from expense_tracker.dates import month_key
from expense_tracker.domain.expenses import sum_for_month
from expense_tracker.domain.models import Expense, Money, Month
from expense_tracker.domain.money import to_money
from expense_tracker.errors import ValidationError


@dataclass(frozen=True)
class BudgetWarning:
    """Immutable notice that a month's spending went over its budget."""

    month: Month
    budget: Money
    spent: Money


@dataclass(frozen=True)
class BudgetStatus:
    """Immutable budget status for a month."""

    month: Month
    budget: Money
    spent: Money
    remaining: Money  # Negative when over budget


def validate_budget_amount(amount: float) -> Money:
    """Convert a budget amount to cents and require it to be positive."""
    try:
        cents = to_money(amount)
    except ValueError as e:
        raise ValidationError("--set must be a positive number") from e
    if cents <= 0:
        raise ValidationError("--set must be a positive number")
    return cents


def read_budget(budgets: dict[Month, Money], month: Month) -> Money | None:
    """Return the configured budget for a month, or None when none is set.

    A stored budget of 0 is returned as 0, distinct from None.
    """
    return budgets.get(month)


def active_budget(budgets: dict[Month, Money], month: Month) -> Money | None:
    """Return the budget for a month if it is positive, else None."""
    budget = read_budget(budgets, month)
    if budget is None or budget <= 0:
        return None
    return budget


def compute_budget_status(expenses: list[Expense], budgets: dict[Month, Money], month: Month) -> BudgetStatus | None:
    """Compute spending against the budget for a month.

    Args:
        expenses: All expenses.
        budgets: Month budgets in cents.
        month: Month key (YYYY-MM).

    Returns:
        BudgetStatus, or None when the month has no active budget.
    """
    budget = active_budget(budgets, month)
    if budget is None:
        return None
    spent = sum_for_month(expenses, month)
    return BudgetStatus(month=month, budget=budget, spent=spent, remaining=Money(budget - spent))


def check_budget_exceeded(expenses: list[Expense], budgets: dict[Month, Money], date: str) -> BudgetWarning | None:
    """Check whether the month containing date is over its budget.

    Spending is summed across all categories.

    Args:
        expenses: All expenses, including the one just added or updated.
        budgets: Month budgets in cents.
        date: YYYY-MM-DD date of the changed expense.

    Returns:
        BudgetWarning if spending exceeds a positive budget, else None.
    """
    try:
        month = month_key(date)
    except ValueError:
        return None

    status = compute_budget_status(expenses, budgets, month)
    if status is None or status.spent <= status.budget:
        return None
    return BudgetWarning(month=month, budget=status.budget, spent=status.spent)
