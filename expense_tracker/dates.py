"""Date utilities for expense-tracker.

Pure functions for parsing dates, deriving month keys and resolving the
month/year filters the CLI accepts.
"""

from datetime import date, datetime

from expense_tracker.domain.models import Month
from expense_tracker.errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date.

    Args:
        value: Date text.

    Returns:
        The parsed date.

    Raises:
        ValueError: If value is not a valid YYYY-MM-DD calendar date.
    """
    parsed = datetime.strptime(value, DATE_FORMAT).date()
    # strptime accepts unpadded fields like 2025-8-1
    if parsed.strftime(DATE_FORMAT) != value:
        raise ValueError(f"date {value!r} does not match format 'YYYY-MM-DD'")
    return parsed


def month_key(value: str) -> Month:
    """Derive the YYYY-MM key for a YYYY-MM-DD date.

    Raises:
        ValueError: If value is not a valid date.
    """
    return Month(parse_date(value).strftime(MONTH_FORMAT))


def make_month_key(year: int, month: int) -> Month:
    """Build a YYYY-MM key from a year and a month number.

    Raises:
        ValidationError: If month is outside 1-12 or year is outside 1-9999.
    """
    validate_month(month)
    if year < 1 or year > 9999:
        raise ValidationError(f"--year must be between 1 and 9999, got {year}")
    return Month(f"{year:04d}-{month:02d}")


def month_label(month: Month) -> str:
    """Human-readable month, e.g. 'January 2025'."""
    return datetime.strptime(month, MONTH_FORMAT).strftime("%B %Y")


def validate_month(month: int) -> None:
    """Raise ValidationError unless month is in 1-12."""
    if month < 1 or month > 12:
        raise ValidationError("--month must be 1-12")


def resolve_period(month: int | None, year: int | None, today: date | None = None) -> tuple[int | None, int | None]:
    """Resolve list/export period filters.

    Zero or None means no constraint. A month without a year applies to the
    current year.

    Args:
        month: Month number (1-12) or None.
        year: Year or None.
        today: Reference date for the current year. Defaults to today.

    Returns:
        Tuple of (month, year), each None when unconstrained.

    Raises:
        ValidationError: If month is outside 1-12 or year is outside 1-9999.
    """
    month = month or None
    year = year or None
    if month is not None:
        validate_month(month)
    if year is not None and (year < 1 or year > 9999):
        raise ValidationError(f"--year must be between 1 and 9999, got {year}")
    if month is not None and year is None:
        year = (today or date.today()).year
    return month, year
