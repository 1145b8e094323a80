"""CSV export of filtered expenses."""

import logging
from pathlib import Path

import pandas as pd

from expense_tracker.domain.models import Expense
from expense_tracker.errors import ExportIOError
from expense_tracker.store.queries import list_expenses

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["id", "date", "description", "category", "amount"]


def expenses_to_frame(expenses: list[Expense]) -> pd.DataFrame:
    """Build the export table, amounts formatted with two decimals."""
    rows = [[e.id, e.date, e.description, e.category, f"{e.amount / 100:.2f}"] for e in expenses]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def write_csv(expenses: list[Expense], output_path: Path) -> int:
    """Write expenses to a CSV file in the given order.

    Args:
        expenses: Expenses to write.
        output_path: Destination file. Its directory must exist.

    Returns:
        Number of rows written (excluding the header).

    Raises:
        ExportIOError: If the file cannot be written.
    """
    frame = expenses_to_frame(expenses)
    try:
        frame.to_csv(output_path, index=False, lineterminator="\n")
    except OSError as e:
        raise ExportIOError(f"Cannot write {output_path}: {e}") from e

    logger.info("Exported %d rows to %s", len(frame), output_path)
    return len(frame)


def export_expenses(
    data_dir: Path,
    output_path: Path,
    month: int | None = None,
    year: int | None = None,
    category: str | None = None,
) -> int:
    """Export expenses matching the filters to CSV.

    Returns:
        Number of rows written.
    """
    return write_csv(list_expenses(data_dir, month, year, category), output_path)
