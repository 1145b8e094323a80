"""Error types raised by expense-tracker.

Every failure the CLI reports derives from ExpenseTrackerError, so command
functions can catch one type and print its message.
"""


class ExpenseTrackerError(Exception):
    """Base class for all reportable errors."""


class ValidationError(ExpenseTrackerError, ValueError):
    """Bad or missing user input (empty description, non-positive amount, bad date or month)."""


class NotFoundError(ExpenseTrackerError):
    """No expense with the requested ID."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"Expense with ID {expense_id} not found")
        self.expense_id = expense_id


class CorruptStoreError(ExpenseTrackerError):
    """The store file exists but cannot be read or parsed."""


class PersistenceError(ExpenseTrackerError):
    """Writing the store to disk failed."""


class ExportIOError(ExpenseTrackerError):
    """Writing the CSV export failed."""


class ConfigError(ExpenseTrackerError):
    """The config file exists but is invalid."""
