"""Loading and atomically saving the store file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from expense_tracker.domain.models import Store
from expense_tracker.errors import CorruptStoreError, PersistenceError
from expense_tracker.store.schema import get_store_path, store_from_dict, store_to_dict

logger = logging.getLogger(__name__)


def load_store(data_dir: Path) -> Store:
    """Load the store from a data directory.

    Args:
        data_dir: Directory holding the store file.

    Returns:
        The loaded store, or an empty one when the file does not exist yet.

    Raises:
        CorruptStoreError: If the file exists but cannot be read or parsed.
    """
    path = get_store_path(data_dir)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.debug("No store at %s, starting empty", path)
        return Store()
    except (OSError, ValueError) as e:
        raise CorruptStoreError(f"Cannot read store {path}: {e}") from e

    try:
        store = store_from_dict(raw)
    except (KeyError, TypeError, ValueError) as e:
        raise CorruptStoreError(f"Store {path} has an unexpected structure: {e}") from e

    logger.debug("Loaded %d expenses and %d budgets from %s", len(store.expenses), len(store.budgets), path)
    return store


def save_store(store: Store, data_dir: Path) -> None:
    """Save the store, replacing the previous file atomically.

    The document is written to a temporary file in the same directory and
    renamed over the store file, so a crash mid-write keeps the last
    committed state.

    Args:
        store: Store to persist.
        data_dir: Directory holding the store file. Created if missing.

    Raises:
        PersistenceError: If the directory, temp file or rename fails.
    """
    path = get_store_path(data_dir)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Cannot create data directory {data_dir}: {e}") from e

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=data_dir)
    except OSError as e:
        raise PersistenceError(f"Cannot create temporary file in {data_dir}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(store_to_dict(store), f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise PersistenceError(f"Cannot save store {path}: {e}") from e

    logger.debug("Saved %d expenses to %s", len(store.expenses), path)
