"""Temporal queries.

A query is any callable that reads a value out of a date or datetime.
``query`` applies one, mirroring the adjuster style.
"""

from __future__ import annotations

import datetime as _dt
from typing import Callable, TypeVar

from almanac._internal.constants import PIRATE_DAY_DAY, PIRATE_DAY_MONTH
from almanac.core.period import Period
from almanac.units.chronounit import ChronoUnit

T = TypeVar("T")


def query(value: _dt.date, q: Callable[[_dt.date], T]) -> T:
    """Apply a query function to ``value``."""
    return q(value)


def days_until_pirate_day(value: _dt.date) -> int:
    """Return the days until the next Talk Like a Pirate Day (September 19).

    The count is zero on the day itself. After September 19 the count
    runs to September 19 of the following year.

    Examples:
        >>> days_until_pirate_day(_dt.date(2017, 9, 10))
        9
        >>> days_until_pirate_day(_dt.date(2017, 9, 20))
        364
    """
    date = _dt.date(value.year, value.month, value.day)
    pirate_day = _dt.date(date.year, PIRATE_DAY_MONTH, PIRATE_DAY_DAY)
    if date > pirate_day:
        pirate_day = pirate_day.replace(year=pirate_day.year + 1)
    return (pirate_day - date).days


def days_between(start: _dt.date, end: _dt.date) -> int:
    """Return the signed number of whole days from ``start`` to ``end``.

    Partial days are truncated toward zero.

    Examples:
        >>> days_between(_dt.datetime(2017, 1, 2, 12), _dt.datetime(2017, 1, 1, 13))
        0
    """
    return ChronoUnit.DAYS.between(start, end)


def period_until(start: _dt.date, end: _dt.date) -> Period:
    """Return the years, months and days from ``start`` to ``end``."""
    return Period.between(start, end)


def elapsed_seconds(start: _dt.datetime, end: _dt.datetime) -> float:
    """Return the seconds between two instants, truncated to milliseconds.

    Examples:
        >>> start = _dt.datetime(2017, 1, 1, 0, 0, 0)
        >>> elapsed_seconds(start, start + _dt.timedelta(microseconds=1_500_999))
        1.5
    """
    millis = (end - start) // _dt.timedelta(milliseconds=1)
    return millis / 1000.0


__all__ = [
    "query",
    "days_until_pirate_day",
    "days_between",
    "period_until",
    "elapsed_seconds",
]
