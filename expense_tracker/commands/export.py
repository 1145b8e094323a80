"""Export command for writing expenses to CSV."""

from pathlib import Path

from rich.markup import escape

from expense_tracker.commands.output import console, fail
from expense_tracker.config import Settings
from expense_tracker.dates import resolve_period
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.store.export import export_expenses


def export_command(
    settings: Settings,
    output: str = "expenses.csv",
    category: str | None = None,
    month: int | None = None,
    year: int | None = None,
) -> None:
    """Export expenses matching the filters to a CSV file.

    Args:
        settings: Resolved settings.
        output: Output CSV file path.
        category: Category filter (case-insensitive).
        month: Month (1-12); applies to the current year unless year is given.
        year: Year filter.
    """
    output_path = Path(output).expanduser()
    category = category.strip() if category else None

    try:
        month, year = resolve_period(month, year)
        count = export_expenses(settings.data_dir, output_path, month, year, category)
    except ExpenseTrackerError as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Exported {count} rows to {escape(str(output_path))}")
