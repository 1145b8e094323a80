"""CLI entry point for expense-tracker."""

from pathlib import Path

import typer

from expense_tracker.commands.admin import backup_command, init_command
from expense_tracker.commands.budget import budget_command
from expense_tracker.commands.expenses import add_command, delete_command, update_command
from expense_tracker.commands.export import export_command
from expense_tracker.commands.output import fail
from expense_tracker.commands.report import list_command, summary_command
from expense_tracker.config import load_settings
from expense_tracker.errors import ConfigError
from expense_tracker.logs import configure_logging

app = typer.Typer(
    name="expense-tracker",
    help="Simple CLI expense tracker",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        envvar="EXPENSE_TRACKER_DATA_DIR",
        help="Directory holding expenses.json (default: ~/.local/share/expense-tracker)",
    ),
    config: str = typer.Option(None, "--config", help="Config file (default: ~/.config/expense-tracker/config.toml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
) -> None:
    """Simple CLI expense tracker."""
    configure_logging(verbose)
    try:
        ctx.obj = load_settings(
            Path(config).expanduser() if config else None,
            Path(data_dir).expanduser() if data_dir else None,
        )
    except ConfigError as e:
        fail(str(e))


@app.command()
def add(
    ctx: typer.Context,
    description: str = typer.Option(..., "--description", "-d", help="Expense description"),
    amount: float = typer.Option(..., "--amount", "-a", help="Expense amount (> 0)"),
    date: str = typer.Option(None, "--date", help="Date in YYYY-MM-DD (default: today)"),
    category: str = typer.Option(None, "--category", "-c", help="Category name (default: General)"),
) -> None:
    """Add an expense."""
    add_command(ctx.obj, description, amount, date, category)


@app.command()
def update(
    ctx: typer.Context,
    expense_id: int = typer.Option(..., "--id", min=1, help="Expense ID"),
    description: str = typer.Option(None, "--description", "-d", help="New description"),
    amount: float = typer.Option(None, "--amount", "-a", help="New amount (> 0)"),
    date: str = typer.Option(None, "--date", help="New date (YYYY-MM-DD)"),
    category: str = typer.Option(None, "--category", "-c", help="New category"),
) -> None:
    """Update the given fields of an expense."""
    update_command(ctx.obj, expense_id, description, amount, date, category)


@app.command()
def delete(
    ctx: typer.Context,
    expense_id: int = typer.Option(..., "--id", min=1, help="Expense ID"),
) -> None:
    """Delete an expense."""
    delete_command(ctx.obj, expense_id)


@app.command(name="list")
def list_expenses(
    ctx: typer.Context,
    category: str = typer.Option(None, "--category", "-c", help="Filter by category (case-insensitive)"),
    month: int = typer.Option(None, "--month", help="Filter by month (1-12) of the current year or --year"),
    year: int = typer.Option(None, "--year", help="Filter by year (e.g. 2025)"),
) -> None:
    """List your expenses."""
    list_command(ctx.obj, category, month, year)


@app.command()
def summary(
    ctx: typer.Context,
    month: int = typer.Option(None, "--month", help="Month (1-12) of the current year or --year"),
    year: int = typer.Option(None, "--year", help="Year for --month (default: current year)"),
    category: str = typer.Option(None, "--category", "-c", help="Filter by category"),
    by_category: bool = typer.Option(False, "--by-category", help="Show totals per category"),
) -> None:
    """Show your total spending."""
    summary_command(ctx.obj, month, year, category, by_category)


@app.command()
def budget(
    ctx: typer.Context,
    set_amount: float = typer.Option(None, "--set", help="Set the monthly budget (e.g. 500)"),
    clear: bool = typer.Option(False, "--clear", help="Remove the monthly budget"),
    month: int = typer.Option(None, "--month", help="Month (1-12) (default: current month)"),
    year: int = typer.Option(None, "--year", help="Year (default: current year)"),
) -> None:
    """Set or show your monthly budget."""
    budget_command(ctx.obj, set_amount, clear, month, year)


@app.command()
def export(
    ctx: typer.Context,
    output: str = typer.Option("expenses.csv", "--output", "-o", help="Output CSV file path"),
    category: str = typer.Option(None, "--category", "-c", help="Filter by category"),
    month: int = typer.Option(None, "--month", help="Filter by month (1-12) of the current year or --year"),
    year: int = typer.Option(None, "--year", help="Filter by year"),
) -> None:
    """Export your expenses to CSV."""
    export_command(ctx.obj, output, category, month, year)


@app.command(name="init")
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing store and config"),
) -> None:
    """Initialize the expense store and configuration."""
    init_command(ctx.obj, force)


@app.command(name="backup")
def backup(
    ctx: typer.Context,
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: <data dir>/backups)"),
) -> None:
    """Backup your expense store."""
    backup_command(ctx.obj, output_dir)


if __name__ == "__main__":
    app()
