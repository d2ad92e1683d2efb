"""Temporal adjusters.

An adjuster is any callable taking a ``date`` and returning a ``date``.
``with_adjuster`` applies one to a date, or to the date part of a
datetime while keeping its time of day and tzinfo.

Examples:
    >>> from datetime import datetime
    >>> start = datetime(2017, 2, 2, 11, 30)
    >>> with_adjuster(start, first_day_of_next_month)
    datetime.datetime(2017, 3, 1, 11, 30)
    >>> with_adjuster(start, next_day(THURSDAY))
    datetime.datetime(2017, 2, 9, 11, 30)
"""

from __future__ import annotations

import datetime as _dt
from typing import Callable, TypeVar

from almanac._internal import calendar as _calendar
from almanac._internal.constants import MID_MONTH_PAYDAY
from almanac._internal.validation import validate_range

_D = TypeVar("_D", _dt.date, _dt.datetime)

Adjuster = Callable[[_dt.date], _dt.date]

# ISO weekday numbers
MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(1, 8)


def with_adjuster(value: _D, adjuster: Adjuster) -> _D:
    """Apply ``adjuster`` to the date part of ``value``."""
    if isinstance(value, _dt.datetime):
        target = adjuster(value.date())
        return value.replace(year=target.year, month=target.month, day=target.day)
    return adjuster(value)


def first_day_of_month(value: _dt.date) -> _dt.date:
    return value.replace(day=1)


def last_day_of_month(value: _dt.date) -> _dt.date:
    return _calendar.last_day_of_month(value)


def first_day_of_next_month(value: _dt.date) -> _dt.date:
    return last_day_of_month(value) + _dt.timedelta(days=1)


def first_day_of_year(value: _dt.date) -> _dt.date:
    return _dt.date(value.year, 1, 1)


def last_day_of_year(value: _dt.date) -> _dt.date:
    return _dt.date(value.year, 12, 31)


def next_day(day_of_week: int) -> Adjuster:
    """Return an adjuster to the next ``day_of_week`` strictly after the date.

    Args:
        day_of_week: ISO weekday, MONDAY (1) to SUNDAY (7).
    """
    validate_range("day of week", day_of_week, MONDAY, SUNDAY)

    def adjust(value: _dt.date) -> _dt.date:
        days = (day_of_week - value.isoweekday()) % 7 or 7
        return value + _dt.timedelta(days=days)

    return adjust


def next_or_same(day_of_week: int) -> Adjuster:
    """Return an adjuster to the next ``day_of_week``, or the date itself."""
    validate_range("day of week", day_of_week, MONDAY, SUNDAY)

    def adjust(value: _dt.date) -> _dt.date:
        return value + _dt.timedelta(days=(day_of_week - value.isoweekday()) % 7)

    return adjust


def previous_day(day_of_week: int) -> Adjuster:
    """Return an adjuster to the last ``day_of_week`` strictly before the date."""
    validate_range("day of week", day_of_week, MONDAY, SUNDAY)

    def adjust(value: _dt.date) -> _dt.date:
        days = (value.isoweekday() - day_of_week) % 7 or 7
        return value - _dt.timedelta(days=days)

    return adjust


def previous_or_same(day_of_week: int) -> Adjuster:
    """Return an adjuster to the last ``day_of_week``, or the date itself."""
    validate_range("day of week", day_of_week, MONDAY, SUNDAY)

    def adjust(value: _dt.date) -> _dt.date:
        return value - _dt.timedelta(days=(value.isoweekday() - day_of_week) % 7)

    return adjust


def payday(value: _dt.date) -> _dt.date:
    """Move a date to the pay day of its half of the month.

    Days before the 15th are paid on the 15th, later days on the last day
    of the month. A pay day falling on a weekend moves back to the
    preceding Friday.

    Examples:
        >>> payday(_dt.date(2017, 7, 3))   # July 15, 2017 is a Saturday
        datetime.date(2017, 7, 14)
        >>> payday(_dt.date(2017, 7, 20))
        datetime.date(2017, 7, 31)
    """
    if value.day < MID_MONTH_PAYDAY:
        result = value.replace(day=MID_MONTH_PAYDAY)
    else:
        result = last_day_of_month(value)

    if result.isoweekday() in (SATURDAY, SUNDAY):
        result = previous_day(FRIDAY)(result)
    return result


__all__ = [
    "Adjuster",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    "with_adjuster",
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_next_month",
    "first_day_of_year",
    "last_day_of_year",
    "next_day",
    "next_or_same",
    "previous_day",
    "previous_or_same",
    "payday",
]
