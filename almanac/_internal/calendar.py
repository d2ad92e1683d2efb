"""Month arithmetic on top of the stdlib ``calendar`` module.

Used by period arithmetic, field adjustment and the adjusters. Not part
of the public API.
"""

from __future__ import annotations

import calendar as _stdlib_calendar
import datetime as _dt

from almanac._internal.constants import MONTHS_PER_YEAR

is_leap_year = _stdlib_calendar.isleap


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year``.

    Raises:
        ValueError: For a month outside 1-12.

    Examples:
        >>> days_in_month(2024, 2)
        29
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")
    return _stdlib_calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 365 + is_leap_year(year)


def last_day_of_month(value: _dt.date) -> _dt.date:
    """Return the last day of the month containing ``value``.

    Examples:
        >>> last_day_of_month(_dt.date(2024, 2, 10))
        datetime.date(2024, 2, 29)
    """
    return value.replace(day=days_in_month(value.year, value.month))


def shift_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Move a (year, month) pair by a signed number of months.

    Examples:
        >>> shift_months(2017, 2, -27)
        (2014, 11)
        >>> shift_months(2017, 12, 1)
        (2018, 1)
    """
    total = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, new_month = divmod(total, MONTHS_PER_YEAR)
    return new_year, new_month + 1


def clamped_date(year: int, month: int, day: int) -> _dt.date:
    """Build a date, clamping ``day`` to the last valid day of the month.

    Examples:
        >>> clamped_date(2017, 2, 31)
        datetime.date(2017, 2, 28)
    """
    return _dt.date(year, month, min(day, days_in_month(year, month)))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "last_day_of_month",
    "shift_months",
    "clamped_date",
]
