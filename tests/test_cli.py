"""End-to-end tests for the expense-tracker CLI."""

import csv
import json
from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from expense_tracker.cli import app

runner = CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def invoke(data_dir: Path, tmp_path: Path):
    config_path = tmp_path / "config.toml"

    def _invoke(*args: str):
        return runner.invoke(app, ["--data-dir", str(data_dir), "--config", str(config_path), *args])

    return _invoke


def read_store(data_dir: Path) -> dict:
    return json.loads((data_dir / "expenses.json").read_text(encoding="utf-8"))


class TestAddListSummaryDelete:
    """Tests for the basic expense lifecycle."""

    def test_flow(self, invoke) -> None:
        """Should total both expenses, then only the remaining one."""
        today = date.today().isoformat()

        result = invoke("add", "--description", "Lunch", "--amount", "20", "--date", today)
        assert result.exit_code == 0, result.output
        assert "Expense added successfully (ID: 1)" in result.output

        result = invoke("add", "--description", "Dinner", "--amount", "10", "--date", today)
        assert "(ID: 2)" in result.output

        result = invoke("list")
        assert result.exit_code == 0
        assert "Lunch" in result.output
        assert "Dinner" in result.output

        result = invoke("summary")
        assert "Total expenses: $30.00" in result.output

        result = invoke("delete", "--id", "2")
        assert result.exit_code == 0
        assert "Expense deleted successfully" in result.output

        result = invoke("summary")
        assert "Total expenses: $20.00" in result.output

    def test_empty_list(self, invoke) -> None:
        """Should say there is nothing to show."""
        result = invoke("list")

        assert result.exit_code == 0
        assert "No expenses found" in result.output

    def test_add_validation_error(self, invoke, data_dir: Path) -> None:
        """Should exit 1 with the message and save nothing."""
        result = invoke("add", "--description", "  ", "--amount", "5")

        assert result.exit_code == 1
        assert "Error: --description is required" in result.output
        assert not (data_dir / "expenses.json").exists()

    def test_add_invalid_date(self, invoke) -> None:
        """Should reject a malformed date."""
        result = invoke("add", "--description", "Lunch", "--amount", "5", "--date", "14/08/2025")

        assert result.exit_code == 1
        assert "invalid date" in result.output

    def test_delete_unknown(self, invoke) -> None:
        """Should report a missing ID."""
        result = invoke("delete", "--id", "9")

        assert result.exit_code == 1
        assert "Expense with ID 9 not found" in result.output


class TestUpdate:
    """Tests for the update command."""

    def test_update_amount_and_category(self, invoke) -> None:
        """Should change only the given fields."""
        invoke("add", "--description", "Coffee", "--amount", "5", "--date", "2025-08-01", "--category", "Food")

        result = invoke("update", "--id", "1", "--amount", "7.5", "--category", "Beverage")
        assert result.exit_code == 0, result.output

        result = invoke("list", "--category", "beverage")
        assert "Coffee" in result.output
        assert "$7.50" in result.output

    def test_zero_amount_rejected(self, invoke, data_dir: Path) -> None:
        """Should fail and keep the stored amount."""
        invoke("add", "--description", "Coffee", "--amount", "5", "--date", "2025-08-01")

        result = invoke("update", "--id", "1", "--amount", "0")

        assert result.exit_code == 1
        assert "--amount must be a positive number" in result.output
        assert read_store(data_dir)["expenses"][0]["amount"] == 5.0

    def test_unknown_id(self, invoke) -> None:
        """Should report a missing ID."""
        result = invoke("update", "--id", "3", "--description", "x")

        assert result.exit_code == 1
        assert "not found" in result.output


class TestBudget:
    """Tests for the budget command."""

    def test_budget_exceeded_warning(self, invoke) -> None:
        """Should warn on the add that pushes spending over budget."""
        result = invoke("budget", "--set", "50", "--month", "8", "--year", "2025")
        assert result.exit_code == 0
        assert "Budget for 2025-08 set to $50.00" in result.output

        result = invoke("add", "--description", "Groceries", "--amount", "40", "--date", "2025-08-03")
        assert "Warning" not in result.output

        result = invoke("add", "--description", "Cinema", "--amount", "20", "--date", "2025-08-04")
        assert result.exit_code == 0
        assert "Warning: budget for 2025-08 exceeded! Budget: $50.00, Spent: $60.00" in result.output

    def test_read_budget(self, invoke) -> None:
        """Should show the budget with spent and remaining."""
        invoke("budget", "--set", "100", "--month", "8", "--year", "2025")
        invoke("add", "--description", "Groceries", "--amount", "40", "--date", "2025-08-03")

        result = invoke("budget", "--month", "8", "--year", "2025")

        assert "Budget for 2025-08: $100.00" in result.output
        assert "Spent: $40.00, Remaining: $60.00" in result.output

    def test_no_budget(self, invoke) -> None:
        """Should say none is set."""
        result = invoke("budget", "--month", "1", "--year", "2024")

        assert result.exit_code == 0
        assert "No budget set for 2024-01" in result.output

    def test_clear(self, invoke, data_dir: Path) -> None:
        """Should remove the budget."""
        invoke("budget", "--set", "100", "--month", "8", "--year", "2025")

        result = invoke("budget", "--clear", "--month", "8", "--year", "2025")

        assert "Budget for 2025-08 cleared" in result.output
        assert read_store(data_dir)["budgets"] == {}

    def test_bad_month(self, invoke) -> None:
        """Should reject months outside 1-12."""
        result = invoke("budget", "--month", "13")

        assert result.exit_code == 1
        assert "--month must be 1-12" in result.output


class TestSummary:
    """Tests for the summary command."""

    def test_month_summary(self, invoke) -> None:
        """Should total one month of the given year."""
        invoke("add", "--description", "Fuel", "--amount", "40", "--date", "2025-08-10")
        invoke("add", "--description", "Fuel", "--amount", "30", "--date", "2025-09-10")

        result = invoke("summary", "--month", "8", "--year", "2025")

        assert "Total expenses for August 2025: $40.00" in result.output

    def test_category_summary(self, invoke) -> None:
        """Should total one category case-insensitively."""
        invoke("add", "--description", "Lunch", "--amount", "12", "--date", "2025-08-10", "--category", "Food")
        invoke("add", "--description", "Bus", "--amount", "3", "--date", "2025-08-10", "--category", "Travel")

        result = invoke("summary", "--category", "food")

        assert "Total expenses (food): $12.00" in result.output

    def test_by_category(self, invoke) -> None:
        """Should show a breakdown table."""
        invoke("add", "--description", "Lunch", "--amount", "12", "--date", "2025-08-10", "--category", "Food")
        invoke("add", "--description", "Bus", "--amount", "3", "--date", "2025-08-10", "--category", "Travel")

        result = invoke("summary", "--by-category")

        assert "Total expenses: $15.00" in result.output
        assert "Food" in result.output
        assert "80%" in result.output


    def test_year_out_of_range(self, invoke) -> None:
        """Should reject a five-digit year with an error line."""
        invoke("add", "--description", "Fuel", "--amount", "40", "--date", "2025-08-10")

        for args in [("summary", "--month", "1", "--year", "10000"), ("list", "--year", "10000")]:
            result = invoke(*args)

            assert result.exit_code == 1
            assert "Error: --year must be between 1 and 9999" in result.output


class TestExport:
    """Tests for the export command."""

    def test_month_without_year_uses_current_year(self, invoke, tmp_path: Path) -> None:
        """Should export the same rows list shows for the current year's month."""
        today = date.today()
        this_month = today.replace(day=1).isoformat()
        last_year = today.replace(year=today.year - 1, day=1).isoformat()
        invoke("add", "--description", "Now", "--amount", "10", "--date", this_month)
        invoke("add", "--description", "Then", "--amount", "20", "--date", last_year)
        output = tmp_path / "out.csv"

        result = invoke("export", "--output", str(output), "--month", str(today.month))

        assert result.exit_code == 0, result.output
        assert "Exported 1 rows" in result.output
        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows == [
            ["id", "date", "description", "category", "amount"],
            ["1", this_month, "Now", "General", "10.00"],
        ]

        listed = invoke("list", "--month", str(today.month))
        assert "Now" in listed.output
        assert "Then" not in listed.output

    def test_unwritable_destination(self, invoke, tmp_path: Path) -> None:
        """Should report an export failure."""
        result = invoke("export", "--output", str(tmp_path / "missing" / "out.csv"))

        assert result.exit_code == 1
        assert "Error" in result.output


class TestStoreErrors:
    """Tests for store-level failures surfaced by the CLI."""

    def test_corrupt_store(self, invoke, data_dir: Path) -> None:
        """Should report the corrupt file and leave it untouched."""
        data_dir.mkdir(parents=True)
        (data_dir / "expenses.json").write_text("garbage", encoding="utf-8")

        result = invoke("add", "--description", "Lunch", "--amount", "5")

        assert result.exit_code == 1
        assert "Error: Cannot read store" in result.output
        assert (data_dir / "expenses.json").read_text(encoding="utf-8") == "garbage"


    def test_non_string_category(self, invoke, data_dir: Path) -> None:
        """Should report a store whose category is not text as corrupt."""
        data_dir.mkdir(parents=True)
        document = {"expenses": [{"id": 1, "date": "2025-01-01", "description": "x", "amount": 5, "category": 5}]}
        (data_dir / "expenses.json").write_text(json.dumps(document), encoding="utf-8")

        result = invoke("list")

        assert result.exit_code == 1
        output = " ".join(result.output.split())
        assert "Error: Store" in output
        assert "unexpected structure: expense category must be a string" in output

    def test_config_directory(self, data_dir: Path, tmp_path: Path) -> None:
        """Should report a config path that cannot be read."""
        result = runner.invoke(app, ["--data-dir", str(data_dir), "--config", str(tmp_path), "list"])

        assert result.exit_code == 1
        assert "Error: Cannot read config file" in " ".join(result.output.split())


class TestAdmin:
    """Tests for init and backup."""

    def test_init_then_refuse(self, invoke, data_dir: Path, tmp_path: Path) -> None:
        """Should create the store and config once, then require --force."""
        result = invoke("init")
        assert result.exit_code == 0, result.output
        assert read_store(data_dir) == {"next_id": 1, "expenses": [], "budgets": {}}
        assert (tmp_path / "config.toml").exists()

        result = invoke("init")
        assert result.exit_code == 1
        assert "--force" in result.output

        assert invoke("init", "--force").exit_code == 0

    def test_backup(self, invoke, tmp_path: Path) -> None:
        """Should copy the store into the backup directory."""
        invoke("add", "--description", "Lunch", "--amount", "5", "--date", "2025-08-01")
        backup_dir = tmp_path / "backups"

        result = invoke("backup", "--output", str(backup_dir))

        assert result.exit_code == 0, result.output
        backups = list(backup_dir.glob("expenses_*.json"))
        assert len(backups) == 1
        assert json.loads(backups[0].read_text(encoding="utf-8"))["next_id"] == 2

    def test_backup_without_store(self, invoke) -> None:
        """Should fail when there is nothing to back up."""
        result = invoke("backup")

        assert result.exit_code == 1
        assert "Store not found" in result.output
