"""Base utilities and helpers for statistics services."""

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def month_start(day: date) -> date:
    return day.replace(day=1)


def shift_months(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``'s month.

    Args:
        day: Any date inside the reference month.
        months: Offset in months; negative values go back in time.

    Returns:
        First day of the target month.
    """
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def year_start(day: date) -> date:
    return day.replace(month=1, day=1)


def month_label(day: date) -> str:
    """Short English month name ("Jan", "Feb", ...)."""
    return calendar.month_abbr[day.month]


def to_money(value: Decimal | int | float | None) -> Decimal:
    """Normalize a SQL aggregate to a two-place Decimal; NULL becomes 0."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
