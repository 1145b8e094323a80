"""Conversions between user-facing currency amounts and Money (cents)."""

import math

from expense_tracker.domain.models import Money


def to_money(amount: float) -> Money:
    """Convert a decimal currency amount to cents.

    Args:
        amount: Amount in major units (e.g. 12.34).

    Returns:
        Amount in cents, rounded to the nearest cent.

    Raises:
        ValueError: If amount is NaN or infinite.
    """
    if not math.isfinite(amount):
        raise ValueError(f"invalid amount {amount!r}")
    return Money(round(amount * 100))


def from_money(amount: Money) -> float:
    """Convert cents back to a decimal currency amount."""
    return amount / 100


def format_money(amount: Money, currency: str = "$") -> str:
    """Format cents for display with two decimals, e.g. '$12.34'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount) / 100:,.2f}"
