"""Budget command for setting, clearing and reading monthly budgets."""

from datetime import date

from rich.markup import escape

from expense_tracker.commands.output import console, fail
from expense_tracker.config import Settings
from expense_tracker.dates import make_month_key
from expense_tracker.domain.models import Month
from expense_tracker.domain.money import format_money
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.store.queries import clear_budget, get_budget_status, set_budget


def resolve_budget_month(month: int | None, year: int | None, today: date | None = None) -> Month:
    """Resolve the budget month, defaulting to the current month and year."""
    today = today or date.today()
    return make_month_key(year or today.year, month or today.month)


def budget_command(
    settings: Settings,
    set_amount: float | None = None,
    clear: bool = False,
    month: int | None = None,
    year: int | None = None,
) -> None:
    """Set, clear or show the budget for a month.

    Args:
        settings: Resolved settings.
        set_amount: New budget amount, must be > 0.
        clear: Remove the month's budget.
        month: Month (1-12), current month when omitted.
        year: Year, current year when omitted.
    """
    currency = settings.currency

    try:
        if set_amount is not None and clear:
            fail("Use either --set or --clear, not both")

        key = resolve_budget_month(month, year)

        if set_amount is not None:
            budget = set_budget(settings.data_dir, key, set_amount)
            console.print(f"[green]✓[/green] Budget for {key} set to {escape(format_money(budget, currency))}")
            return

        if clear:
            if clear_budget(settings.data_dir, key):
                console.print(f"[green]✓[/green] Budget for {key} cleared")
            else:
                console.print(f"[yellow]No budget set for {key}[/yellow]")
            return

        status = get_budget_status(settings.data_dir, key)
    except ExpenseTrackerError as e:
        fail(str(e))

    if status is None:
        console.print(f"[yellow]No budget set for {key}[/yellow]")
        return

    remaining_style = "red" if status.remaining < 0 else "green"
    console.print(f"Budget for {key}: {escape(format_money(status.budget, currency))}")
    console.print(
        f"Spent: {escape(format_money(status.spent, currency))}, "
        f"Remaining: [{remaining_style}]{escape(format_money(status.remaining, currency))}[/{remaining_style}]"
    )
