"""Store layer - provides persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from expense_tracker.store.export import export_expenses, write_csv
from expense_tracker.store.persistence import load_store, save_store
from expense_tracker.store.queries import (
    add_expense,
    clear_budget,
    delete_expense,
    get_budget,
    get_budget_status,
    get_category_totals,
    get_expense,
    get_month_total,
    get_total,
    list_expenses,
    set_budget,
    update_expense,
)
from expense_tracker.store.schema import get_default_data_dir, get_store_path, store_exists

__all__ = [
    # Schema
    "get_default_data_dir",
    "get_store_path",
    "store_exists",
    # Persistence
    "load_store",
    "save_store",
    # Queries
    "add_expense",
    "clear_budget",
    "delete_expense",
    "get_budget",
    "get_budget_status",
    "get_category_totals",
    "get_expense",
    "get_month_total",
    "get_total",
    "list_expenses",
    "set_budget",
    "update_expense",
    # Export
    "export_expenses",
    "write_csv",
]
