"""Admin commands for init and backup."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

from expense_tracker.commands.output import console, fail
from expense_tracker.config import Settings, create_default_config
from expense_tracker.domain.models import Store
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.store.persistence import save_store
from expense_tracker.store.schema import get_store_path, store_exists


def backup_command(
    settings: Settings,
    output_dir: str | None = None,
) -> None:
    """Backup the expense store."""
    store_path = get_store_path(settings.data_dir)

    if not store_exists(settings.data_dir):
        fail("Store not found. Add an expense or run 'expense-tracker init' first.")

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = settings.data_dir / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    store_backup = backup_dir / f"expenses_{timestamp}.json"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(store_path, store_backup)
    except OSError as e:
        fail(f"Backup failed: {e}")

    console.print(f"[green]✓[/green] Store backed up to: {store_backup}")
    console.print(f"[dim]Backup directory: {backup_dir}[/dim]")


def init_command(settings: Settings, force: bool = False) -> None:
    """Initialize an empty store and the default config file."""
    store_path = get_store_path(settings.data_dir)
    config_path = settings.config_path

    has_store = store_exists(settings.data_dir)
    config_exists = config_path.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (has_store or config_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if has_store:
            console.print(f"  Store already exists: {store_path}")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'expense-tracker init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating store at {store_path}...[/cyan]")
        save_store(Store(), settings.data_dir)
        console.print("[green]✓[/green] Store initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except ExpenseTrackerError as e:
        fail(str(e))
    except OSError as e:
        fail(f"Filesystem error: {e}")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Store: {store_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")
