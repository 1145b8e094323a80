"""Shared rendering helpers for command output."""

import sys
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from expense_tracker.domain.budget import BudgetWarning
from expense_tracker.domain.models import Expense
from expense_tracker.domain.money import format_money

console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/red]", style="bold")
    sys.exit(1)


def truncate(text: str, width: int) -> str:
    """Shorten text to width characters, marking the cut with '...'."""
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def build_expense_table(expenses: list[Expense], currency: str, title: str | None = None) -> Table:
    """Build a table of expenses in the given order."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for expense in expenses:
        table.add_row(
            str(expense.id),
            expense.date,
            escape(truncate(expense.description, 32)),
            escape(truncate(expense.category, 14)),
            format_money(expense.amount, currency),
        )

    return table


def print_budget_warning(warning: BudgetWarning | None, currency: str) -> None:
    """Print the budget-exceeded notice, if any."""
    if warning is None:
        return
    console.print(
        f"[yellow]Warning: budget for {warning.month} exceeded! "
        f"Budget: {escape(format_money(warning.budget, currency))}, "
        f"Spent: {escape(format_money(warning.spent, currency))}[/yellow]"
    )
