"""Expense management commands (add, update, delete)."""

from rich.markup import escape

from expense_tracker.commands.output import console, fail, print_budget_warning
from expense_tracker.config import Settings
from expense_tracker.domain.models import ExpenseUpdate
from expense_tracker.domain.money import format_money
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.store.queries import add_expense, delete_expense, update_expense


def add_command(
    settings: Settings,
    description: str,
    amount: float,
    date: str | None = None,
    category: str | None = None,
) -> None:
    """Add an expense.

    Args:
        settings: Resolved settings.
        description: Expense description.
        amount: Expense amount, must be > 0.
        date: Expense date (YYYY-MM-DD), today when omitted.
        category: Category name, "General" when omitted.
    """
    try:
        expense, warning = add_expense(settings.data_dir, description, amount, date, category)
    except ExpenseTrackerError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Expense added successfully (ID: {expense.id})")
    console.print(f"  Date: {expense.date}")
    console.print(f"  Description: {escape(expense.description)}")
    console.print(f"  Category: {escape(expense.category)}")
    console.print(f"  Amount: {escape(format_money(expense.amount, settings.currency))}")
    print_budget_warning(warning, settings.currency)


def update_command(
    settings: Settings,
    expense_id: int,
    description: str | None = None,
    amount: float | None = None,
    date: str | None = None,
    category: str | None = None,
) -> None:
    """Update the fields of an expense that were provided.

    Args:
        settings: Resolved settings.
        expense_id: Expense ID (from 'expense-tracker list').
        description: New description.
        amount: New amount, must be > 0 when given.
        date: New date (YYYY-MM-DD).
        category: New category.
    """
    changes = ExpenseUpdate(description=description, amount=amount, date=date, category=category)
    try:
        expense, warning = update_expense(settings.data_dir, expense_id, changes)
    except ExpenseTrackerError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Expense updated successfully (ID: {expense.id})")
    console.print(
        f"  {expense.date}  {escape(expense.description)}  [magenta]{escape(expense.category)}[/magenta]  "
        f"{escape(format_money(expense.amount, settings.currency))}"
    )
    print_budget_warning(warning, settings.currency)


def delete_command(settings: Settings, expense_id: int) -> None:
    """Delete an expense."""
    try:
        expense = delete_expense(settings.data_dir, expense_id)
    except ExpenseTrackerError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Expense deleted successfully (ID: {expense.id})")
    console.print(f"[dim]  {expense.date}  {escape(expense.description)}[/dim]")
