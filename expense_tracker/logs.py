"""Logging setup: diagnostics go to stderr through rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route expense_tracker log records through a RichHandler on stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logger = logging.getLogger("expense_tracker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
