"""Period arithmetic for ``date`` and ``datetime`` values.

This module provides functions for adding Period values to the host
``date`` and ``datetime`` types, with month overflow clamping.

Clamping behavior:
    When adding a Period results in an invalid date (e.g., Jan 31 + 1 month),
    the day is clamped to the last valid day of the target month.

Examples:
    date(2024, 1, 31) + Period(months=1) -> date(2024, 2, 29)  # leap year
    date(2023, 1, 31) + Period(months=1) -> date(2023, 2, 28)
    date(2024, 2, 29) + Period(years=1)  -> date(2025, 2, 28)
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING, TypeVar

from almanac._internal.calendar import clamped_date, shift_months
from almanac._internal.validation import validate_year

if TYPE_CHECKING:
    from almanac.core.period import Period

_D = TypeVar("_D", _dt.date, _dt.datetime)


def add_months(value: _D, months: int) -> _D:
    """Add a signed number of months, clamping the day of month.

    Time of day and tzinfo of a ``datetime`` are preserved.

    Raises:
        ValidationError: If the result falls outside years 1-9999.

    Examples:
        >>> add_months(_dt.date(2017, 1, 31), 1)
        datetime.date(2017, 2, 28)
    """
    if months == 0:
        return value
    year, month = shift_months(value.year, value.month, months)
    validate_year(year)
    target = clamped_date(year, month, value.day)
    return value.replace(year=target.year, month=target.month, day=target.day)


def add_period(value: _D, period: Period) -> _D:
    """Add a Period to a date or datetime, clamping day if necessary.

    The components are applied in order:
    1. Years and months (as total_months), clamping the day
    2. Weeks and days (as total_days)

    Args:
        value: The date or datetime to add to.
        period: The period to add.

    Returns:
        A new value of the same type offset by the period.

    Examples:
        >>> from almanac.core.period import Period
        >>> add_period(_dt.date(2024, 1, 31), Period(months=1))
        datetime.date(2024, 2, 29)

        >>> add_period(_dt.datetime(2017, 2, 2, 11, 30), Period.of(2, 3, 4))
        datetime.datetime(2019, 5, 6, 11, 30)
    """
    result = add_months(value, period.total_months)
    if period.total_days != 0:
        result = result + _dt.timedelta(days=period.total_days)
    return result


def subtract_period(value: _D, period: Period) -> _D:
    """Subtract a Period from a date or datetime.

    This is equivalent to adding the negated period.

    Examples:
        >>> from almanac.core.period import Period
        >>> subtract_period(_dt.date(2024, 3, 31), Period(months=1))
        datetime.date(2024, 2, 29)
    """
    return add_period(value, -period)


__all__ = [
    "add_months",
    "add_period",
    "subtract_period",
]
