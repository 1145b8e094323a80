"""Pure functions for expense validation, filtering and aggregation.

This module contains the functional core for expense operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

import logging
from dataclasses import replace
from datetime import date, datetime

from expense_tracker.dates import DATE_FORMAT, month_key, parse_date
from expense_tracker.domain.models import (
    DEFAULT_CATEGORY,
    CategoryName,
    Description,
    Expense,
    ExpenseUpdate,
    Money,
    Month,
)
from expense_tracker.domain.money import to_money
from expense_tracker.errors import ValidationError

logger = logging.getLogger(__name__)


def validate_description(description: str) -> Description:
    """Trim a description and require it to be non-empty."""
    trimmed = description.strip()
    if not trimmed:
        raise ValidationError("--description is required")
    return Description(trimmed)


def validate_amount(amount: float) -> Money:
    """Convert an amount to cents and require it to be positive."""
    try:
        cents = to_money(amount)
    except ValueError as e:
        raise ValidationError("--amount must be a positive number") from e
    if cents <= 0:
        raise ValidationError("--amount must be a positive number")
    return cents


def validate_date(value: str | None, today: date | None = None) -> str:
    """Validate a YYYY-MM-DD date, defaulting blank input to today.

    Args:
        value: Date text or None.
        today: Date used when value is blank. Defaults to the host clock.

    Returns:
        The date text in YYYY-MM-DD form.

    Raises:
        ValidationError: If value is not a valid date.
    """
    if value is None or not value.strip():
        return (today or date.today()).strftime(DATE_FORMAT)
    value = value.strip()
    try:
        parse_date(value)
    except ValueError as e:
        raise ValidationError(f"invalid date {value!r}, expected YYYY-MM-DD") from e
    return value


def normalize_category(category: str | None) -> CategoryName:
    """Trim a category, falling back to the default category when blank."""
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return CategoryName(category.strip())


def category_matches(category: str, wanted: str | None) -> bool:
    """Case-insensitive exact category match. An empty wanted matches anything."""
    if not wanted:
        return True
    return category.casefold() == wanted.casefold()


def create_expense(
    expense_id: int,
    description: str,
    amount: float,
    date_str: str | None = None,
    category: str | None = None,
    now: datetime | None = None,
    today: date | None = None,
) -> Expense:
    """Validate input and build a new expense.

    Args:
        expense_id: ID to assign.
        description: Description text (trimmed, required).
        amount: Amount in major units, must be > 0.
        date_str: YYYY-MM-DD date, today when omitted.
        category: Category, "General" when omitted.
        now: Timestamp for created_at/updated_at.
        today: Date used when date_str is omitted.

    Returns:
        The new Expense.

    Raises:
        ValidationError: If any input is invalid.
    """
    desc = validate_description(description)
    cents = validate_amount(amount)
    expense_date = validate_date(date_str, today)
    timestamp = now or datetime.now().astimezone()
    return Expense(
        id=expense_id,
        date=expense_date,
        description=desc,
        amount=cents,
        category=normalize_category(category),
        created_at=timestamp,
        updated_at=timestamp,
    )


def apply_update(expense: Expense, changes: ExpenseUpdate, now: datetime | None = None) -> Expense:
    """Apply requested changes to an expense.

    All fields are validated before any is applied, so a failed update
    leaves nothing half-changed. Blank description, category and date are
    treated as not provided.

    Args:
        expense: Current expense.
        changes: Requested changes.
        now: Timestamp for updated_at.

    Returns:
        The updated Expense.

    Raises:
        ValidationError: If a provided amount is not positive or a provided date is invalid.
    """
    fields: dict = {}

    if changes.amount is not None:
        fields["amount"] = validate_amount(changes.amount)

    if changes.date is not None and changes.date.strip():
        fields["date"] = validate_date(changes.date)

    if changes.description is not None and changes.description.strip():
        fields["description"] = Description(changes.description.strip())

    if changes.category is not None and changes.category.strip():
        fields["category"] = CategoryName(changes.category.strip())

    fields["updated_at"] = now or datetime.now().astimezone()
    return replace(expense, **fields)


def find_by_id(expenses: list[Expense], expense_id: int) -> tuple[Expense | None, int]:
    """Locate an expense by ID.

    Returns:
        Tuple of (expense, index), or (None, -1) when not found.
    """
    for index, expense in enumerate(expenses):
        if expense.id == expense_id:
            return expense, index
    return None, -1


def filter_expenses(
    expenses: list[Expense],
    month: int | None = None,
    year: int | None = None,
    category: str | None = None,
) -> list[Expense]:
    """Select expenses matching every given constraint.

    Args:
        expenses: Expenses to filter.
        month: Month number (1-12); None or 0 means any month.
        year: Year; None or 0 means any year.
        category: Category (case-insensitive); None or "" means any.

    Returns:
        Matching expenses sorted by date, then ID.
    """
    matched: list[Expense] = []
    for expense in expenses:
        if not category_matches(expense.category, category):
            continue
        if month or year:
            try:
                parsed = parse_date(expense.date)
            except ValueError:
                logger.debug("Skipping expense %d with unparseable date %r", expense.id, expense.date)
                continue
            if year and parsed.year != year:
                continue
            if month and parsed.month != month:
                continue
        matched.append(expense)

    return sorted(matched, key=lambda e: (e.date, e.id))


def sum_for_month(expenses: list[Expense], month: Month, category: str | None = None) -> Money:
    """Total spending for a month key, optionally for one category.

    Returns:
        Sum in cents, 0 when nothing matches.
    """
    total = 0
    for expense in expenses:
        try:
            key = month_key(expense.date)
        except ValueError:
            continue
        if key == month and category_matches(expense.category, category):
            total += expense.amount
    return Money(total)


def sum_total(expenses: list[Expense], category: str | None = None) -> Money:
    """All-time spending, optionally for one category."""
    return Money(sum(e.amount for e in expenses if category_matches(e.category, category)))


def category_totals(expenses: list[Expense]) -> dict[CategoryName, Money]:
    """Group spending by category.

    Categories differing only in letter case are merged under the spelling
    of the expense with the lowest ID.

    Returns:
        Dictionary of category -> total, largest first.
    """
    totals: dict[str, int] = {}
    names: dict[str, CategoryName] = {}
    for expense in sorted(expenses, key=lambda e: e.id):
        key = expense.category.casefold()
        names.setdefault(key, expense.category)
        totals[key] = totals.get(key, 0) + expense.amount

    ordered = sorted(totals.items(), key=lambda item: (-item[1], names[item[0]].casefold()))
    return {names[key]: Money(total) for key, total in ordered}
