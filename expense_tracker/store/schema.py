"""Store file locations and the JSON document layout."""

import os
from datetime import datetime
from pathlib import Path
from typing import Any

from expense_tracker.domain.models import DEFAULT_CATEGORY, CategoryName, Description, Expense, Month, Store
from expense_tracker.domain.money import from_money, to_money

STORE_FILE_NAME = "expenses.json"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_data_dir() -> Path:
    """Get the default data directory (XDG compliant)."""
    return get_xdg_data_home() / "expense-tracker"


def get_store_path(data_dir: Path) -> Path:
    """Get the store file path inside a data directory."""
    return data_dir / STORE_FILE_NAME


def store_exists(data_dir: Path) -> bool:
    """Check if the store file exists."""
    return get_store_path(data_dir).exists()


def _timestamp_to_json(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _timestamp_from_json(value: Any) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(value)


def expense_to_dict(expense: Expense) -> dict[str, Any]:
    """Serialize an expense to its JSON form."""
    return {
        "id": expense.id,
        "date": expense.date,
        "description": expense.description,
        "amount": from_money(expense.amount),
        "category": expense.category,
        "created_at": _timestamp_to_json(expense.created_at),
        "updated_at": _timestamp_to_json(expense.updated_at),
    }


def expense_from_dict(data: dict[str, Any]) -> Expense:
    """Deserialize an expense, defaulting a missing category.

    Raises:
        KeyError: If a required field is missing.
        TypeError: If a field has the wrong type.
        ValueError: If a field cannot be converted.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expense entry must be an object, got {type(data).__name__}")
    if not isinstance(data["date"], str) or not isinstance(data["description"], str):
        raise TypeError("expense date and description must be strings")
    if data.get("category") is not None and not isinstance(data["category"], str):
        raise TypeError("expense category must be a string")
    return Expense(
        id=int(data["id"]),
        date=data["date"],
        description=Description(data["description"]),
        amount=to_money(float(data["amount"])),
        category=CategoryName(data.get("category") or DEFAULT_CATEGORY),
        created_at=_timestamp_from_json(data.get("created_at")),
        updated_at=_timestamp_from_json(data.get("updated_at")),
    )


def store_to_dict(store: Store) -> dict[str, Any]:
    """Serialize the whole store to its JSON form."""
    return {
        "next_id": store.next_id,
        "expenses": [expense_to_dict(e) for e in store.expenses],
        "budgets": {month: from_money(amount) for month, amount in store.budgets.items()},
    }


def store_from_dict(data: Any) -> Store:
    """Deserialize the store and normalize older or partial documents.

    Null budgets and expenses become empty, and next_id is raised to 1 or
    past the highest stored ID when it lags behind.

    Raises:
        KeyError, TypeError, ValueError: If the document has an unexpected shape.
    """
    if not isinstance(data, dict):
        raise TypeError(f"store must be an object, got {type(data).__name__}")

    raw_expenses = data.get("expenses") or []
    raw_budgets = data.get("budgets") or {}
    if not isinstance(raw_expenses, list) or not isinstance(raw_budgets, dict):
        raise TypeError("expenses must be a list and budgets an object")

    expenses = [expense_from_dict(item) for item in raw_expenses]
    budgets = {Month(str(month)): to_money(float(amount)) for month, amount in raw_budgets.items()}

    next_id = int(data.get("next_id") or 0)
    highest_id = max((e.id for e in expenses), default=0)
    next_id = max(next_id, highest_id + 1, 1)

    return Store(next_id=next_id, expenses=expenses, budgets=budgets)
