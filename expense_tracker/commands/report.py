"""List and summary commands for viewing expenses."""

from datetime import date

from rich.markup import escape
from rich.table import Table

from expense_tracker.commands.output import build_expense_table, console, fail
from expense_tracker.config import Settings
from expense_tracker.dates import make_month_key, month_label, resolve_period
from expense_tracker.domain.models import CategoryName, Money
from expense_tracker.domain.money import format_money
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.store.queries import get_category_totals, get_month_total, get_total, list_expenses


def describe_period(month: int | None, year: int | None) -> str:
    """Describe a list/export period for titles."""
    if month and year:
        return month_label(make_month_key(year, month))
    if year:
        return str(year)
    return "All Time"


def list_command(
    settings: Settings,
    category: str | None = None,
    month: int | None = None,
    year: int | None = None,
) -> None:
    """List expenses matching the filters.

    Args:
        settings: Resolved settings.
        category: Category filter (case-insensitive).
        month: Month (1-12); applies to the current year unless year is given.
        year: Year filter.
    """
    category = category.strip() if category else None
    try:
        month, year = resolve_period(month, year)
        expenses = list_expenses(settings.data_dir, month, year, category)
    except ExpenseTrackerError as e:
        fail(str(e))

    if not expenses:
        console.print("[yellow]No expenses found[/yellow]")
        return

    title = f"Expenses - {describe_period(month, year)} ({len(expenses)})"
    if category:
        title = f"{title} [{category}]"
    console.print(build_expense_table(expenses, settings.currency, title=escape(title)))


def render_category_totals(totals: dict[CategoryName, Money], currency: str) -> None:
    """Render per-category totals with each category's share of spending."""
    grand_total = sum(totals.values())

    table = Table(title="By Category")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Share", justify="right", style="dim")

    for category, amount in totals.items():
        share = amount / grand_total * 100 if grand_total else 0.0
        table.add_row(escape(category), format_money(amount, currency), f"{share:.0f}%")

    console.print(table)


def summary_command(
    settings: Settings,
    month: int | None = None,
    year: int | None = None,
    category: str | None = None,
    by_category: bool = False,
) -> None:
    """Show total spending, all time or for one month.

    Args:
        settings: Resolved settings.
        month: Month (1-12); all time when omitted.
        year: Year of the month, current year when omitted.
        category: Restrict the total to one category (case-insensitive).
        by_category: Also show a per-category breakdown.
    """
    category = category.strip() if category else None
    currency = settings.currency

    try:
        if not month:
            total = get_total(settings.data_dir, category)
            label = "Total expenses"
            breakdown_period: tuple[int | None, int | None] = (None, None)
        else:
            year = year or date.today().year
            key = make_month_key(year, month)
            total = get_month_total(settings.data_dir, key, category)
            label = f"Total expenses for {month_label(key)}"
            breakdown_period = (month, year)

        totals = get_category_totals(settings.data_dir, *breakdown_period) if by_category else {}
    except ExpenseTrackerError as e:
        fail(str(e))

    if category:
        label = f"{label} ({escape(category)})"
    console.print(f"[bold]{label}:[/bold] {escape(format_money(total, currency))}")

    if by_category:
        if totals:
            render_category_totals(totals, currency)
        else:
            console.print("[dim]No expenses in this period[/dim]")
