"""Store operations: each loads the store, applies a query or mutation and
persists the result when something changed."""

import logging
from datetime import date
from pathlib import Path

from expense_tracker.domain.budget import (
    BudgetStatus,
    BudgetWarning,
    check_budget_exceeded,
    compute_budget_status,
    read_budget,
    validate_budget_amount,
)
from expense_tracker.domain.expenses import (
    apply_update,
    category_totals,
    create_expense,
    filter_expenses,
    find_by_id,
    sum_for_month,
    sum_total,
)
from expense_tracker.domain.models import CategoryName, Expense, ExpenseUpdate, Money, Month
from expense_tracker.errors import NotFoundError
from expense_tracker.store.persistence import load_store, save_store

logger = logging.getLogger(__name__)


def add_expense(
    data_dir: Path,
    description: str,
    amount: float,
    date_str: str | None = None,
    category: str | None = None,
    today: date | None = None,
) -> tuple[Expense, BudgetWarning | None]:
    """Add an expense.

    Args:
        data_dir: Directory holding the store file.
        description: Description text.
        amount: Amount in major units, must be > 0.
        date_str: YYYY-MM-DD date, today when omitted.
        category: Category, "General" when omitted.
        today: Date used when date_str is omitted.

    Returns:
        Tuple of (expense, warning):
        - expense: The stored expense with its assigned ID
        - warning: BudgetWarning if the month is now over budget, else None

    Raises:
        ValidationError: If any input is invalid.
        CorruptStoreError: If the store cannot be loaded.
        PersistenceError: If the store cannot be saved.
    """
    store = load_store(data_dir)
    expense = create_expense(store.next_id, description, amount, date_str, category, today=today)
    store.expenses.append(expense)
    store.next_id += 1
    save_store(store, data_dir)
    logger.info("Added expense %d", expense.id)

    return expense, check_budget_exceeded(store.expenses, store.budgets, expense.date)


def update_expense(data_dir: Path, expense_id: int, changes: ExpenseUpdate) -> tuple[Expense, BudgetWarning | None]:
    """Apply changes to an existing expense.

    Returns:
        Tuple of (expense, warning) as for add_expense.

    Raises:
        NotFoundError: If no expense has that ID.
        ValidationError: If a provided field is invalid. Nothing is saved.
    """
    store = load_store(data_dir)
    current, index = find_by_id(store.expenses, expense_id)
    if current is None:
        raise NotFoundError(expense_id)

    updated = apply_update(current, changes)
    store.expenses[index] = updated
    save_store(store, data_dir)
    logger.info("Updated expense %d", expense_id)

    return updated, check_budget_exceeded(store.expenses, store.budgets, updated.date)


def delete_expense(data_dir: Path, expense_id: int) -> Expense:
    """Remove an expense. Its ID is never reassigned.

    Returns:
        The removed expense.

    Raises:
        NotFoundError: If no expense has that ID.
    """
    store = load_store(data_dir)
    expense, index = find_by_id(store.expenses, expense_id)
    if expense is None:
        raise NotFoundError(expense_id)

    del store.expenses[index]
    save_store(store, data_dir)
    logger.info("Deleted expense %d", expense_id)
    return expense


def get_expense(data_dir: Path, expense_id: int) -> Expense:
    """Get a single expense by ID.

    Raises:
        NotFoundError: If no expense has that ID.
    """
    expense, _ = find_by_id(load_store(data_dir).expenses, expense_id)
    if expense is None:
        raise NotFoundError(expense_id)
    return expense


def list_expenses(
    data_dir: Path,
    month: int | None = None,
    year: int | None = None,
    category: str | None = None,
) -> list[Expense]:
    """Get expenses matching the filters, sorted by date then ID."""
    return filter_expenses(load_store(data_dir).expenses, month, year, category)


def get_total(data_dir: Path, category: str | None = None) -> Money:
    """Get all-time spending, optionally for one category."""
    return sum_total(load_store(data_dir).expenses, category)


def get_month_total(data_dir: Path, month: Month, category: str | None = None) -> Money:
    """Get spending for a month key, optionally for one category."""
    return sum_for_month(load_store(data_dir).expenses, month, category)


def get_category_totals(
    data_dir: Path,
    month: int | None = None,
    year: int | None = None,
) -> dict[CategoryName, Money]:
    """Get spending per category for a period."""
    return category_totals(filter_expenses(load_store(data_dir).expenses, month, year))


def set_budget(data_dir: Path, month: Month, amount: float) -> Money:
    """Set the budget for a month, replacing any existing one.

    Returns:
        The stored budget in cents.

    Raises:
        ValidationError: If amount is not positive.
    """
    budget = validate_budget_amount(amount)
    store = load_store(data_dir)
    store.budgets[month] = budget
    save_store(store, data_dir)
    logger.info("Set budget for %s", month)
    return budget


def clear_budget(data_dir: Path, month: Month) -> bool:
    """Remove the budget for a month.

    Returns:
        True if a budget was removed, False if none was set.
    """
    store = load_store(data_dir)
    if month not in store.budgets:
        return False
    del store.budgets[month]
    save_store(store, data_dir)
    logger.info("Cleared budget for %s", month)
    return True


def get_budget(data_dir: Path, month: Month) -> Money | None:
    """Get the configured budget for a month, or None when none is set."""
    return read_budget(load_store(data_dir).budgets, month)


def get_budget_status(data_dir: Path, month: Month) -> BudgetStatus | None:
    """Get budget, spending and remaining amount for a month.

    Returns:
        BudgetStatus, or None when the month has no positive budget.
    """
    store = load_store(data_dir)
    return compute_budget_status(store.expenses, store.budgets, month)
