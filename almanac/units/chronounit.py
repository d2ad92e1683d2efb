"""ChronoUnit enumeration for date and time units.

This module provides the ChronoUnit enum representing units from
nanoseconds up to millennia, and the arithmetic to add an amount of a
unit to a ``date`` or ``datetime``.
"""

from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import TypeVar

from almanac._internal.constants import NANOS_PER_MICROSECOND
from almanac.errors import ValidationError

_D = TypeVar("_D", _dt.date, _dt.datetime)


class ChronoUnit(Enum):
    """Standard units for temporal arithmetic.

    Units up to WEEKS have a fixed length and are added as a
    ``timedelta``. MONTHS and longer are calendar units: they are added as
    a number of months, clamping the day of month.

    On aware values, units shorter than a day count elapsed time, so the
    result can carry a different UTC offset. DAYS and WEEKS keep the local
    time of day.

    Note:
        The host ``datetime`` type has microsecond resolution. NANOS
        amounts must therefore be whole microseconds.

    Examples:
        >>> from datetime import datetime
        >>> start = datetime(2017, 2, 2, 11, 30)
        >>> ChronoUnit.HALF_DAYS.add_to(start, 3)
        datetime.datetime(2017, 2, 3, 23, 30)

        >>> ChronoUnit.CENTURIES.add_to(start, -2)
        datetime.datetime(1817, 2, 2, 11, 30)

        >>> ChronoUnit.MONTHS.duration() is None
        True
    """

    NANOS = "nanos"
    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"

    def duration(self) -> _dt.timedelta | None:
        """Return the exact length of one unit, or None for calendar units.

        NANOS has no exact ``timedelta`` and also returns None.

        Examples:
            >>> ChronoUnit.HALF_DAYS.duration()
            datetime.timedelta(seconds=43200)
        """
        return _FIXED_UNITS.get(self)

    @property
    def is_date_based(self) -> bool:
        """Return True for DAYS and longer units."""
        return self in _DATE_BASED

    @property
    def is_time_based(self) -> bool:
        """Return True for units shorter than a day."""
        return not self.is_date_based

    def add_to(self, value: _D, amount: int) -> _D:
        """Add ``amount`` of this unit to a date or datetime.

        Args:
            value: The date or datetime to add to.
            amount: Signed number of units.

        Returns:
            A new value of the same type.

        Raises:
            ValidationError: If a time-based unit is added to a plain date,
                or a NANOS amount is not a whole number of microseconds.
        """
        from almanac.arithmetic.period_ops import add_months

        if self.is_time_based and not isinstance(value, _dt.datetime):
            raise ValidationError(f"{self.name} cannot be added to a date")

        if self is ChronoUnit.NANOS:
            micros, remainder = divmod(amount, NANOS_PER_MICROSECOND)
            if remainder:
                raise ValidationError(
                    f"nanosecond amount {amount} is not a whole number of microseconds"
                )
            return _plus_elapsed(value, _dt.timedelta(microseconds=micros))

        months = _MONTH_UNITS.get(self)
        if months is not None:
            return add_months(value, amount * months)

        step = _FIXED_UNITS[self] * amount
        if self.is_time_based:
            return _plus_elapsed(value, step)
        return value + step

    def between(self, start: _D, end: _D) -> int:
        """Return the number of whole units from ``start`` to ``end``.

        The result is negative when ``end`` is before ``start`` and is
        truncated toward zero.

        Examples:
            >>> from datetime import date
            >>> ChronoUnit.MONTHS.between(date(2017, 1, 31), date(2017, 2, 28))
            0
            >>> ChronoUnit.DAYS.between(date(2017, 9, 20), date(2018, 9, 19))
            364
        """
        months = _MONTH_UNITS.get(self)
        if months is not None:
            return _truncate(_months_between(start, end), months)

        if self.is_time_based:
            start, end = _as_utc(start), _as_utc(end)
        micros = (end - start) // _MICROSECOND
        if self is ChronoUnit.NANOS:
            return micros * NANOS_PER_MICROSECOND
        return _truncate(micros, _FIXED_UNITS[self] // _MICROSECOND)


def _truncate(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def _as_utc(value: _D) -> _D:
    if isinstance(value, _dt.datetime) and value.tzinfo is not None:
        return value.astimezone(_dt.timezone.utc)
    return value


def _plus_elapsed(value: _D, step: _dt.timedelta) -> _D:
    # aware values advance on the UTC timeline, then return to their zone
    if value.tzinfo is None:
        return value + step
    return (_as_utc(value) + step).astimezone(value.tzinfo)


def _months_between(start: _dt.date, end: _dt.date) -> int:
    months = (end.year * 12 + end.month) - (start.year * 12 + start.month)
    if months > 0 and _day_and_time(end) < _day_and_time(start):
        months -= 1
    elif months < 0 and _day_and_time(end) > _day_and_time(start):
        months += 1
    return months


def _day_and_time(value: _dt.date) -> tuple[int, _dt.time]:
    if isinstance(value, _dt.datetime):
        return value.day, value.time()
    return value.day, _dt.time()


_MICROSECOND = _dt.timedelta(microseconds=1)

_FIXED_UNITS: dict[ChronoUnit, _dt.timedelta] = {
    ChronoUnit.MICROS: _dt.timedelta(microseconds=1),
    ChronoUnit.MILLIS: _dt.timedelta(milliseconds=1),
    ChronoUnit.SECONDS: _dt.timedelta(seconds=1),
    ChronoUnit.MINUTES: _dt.timedelta(minutes=1),
    ChronoUnit.HOURS: _dt.timedelta(hours=1),
    ChronoUnit.HALF_DAYS: _dt.timedelta(hours=12),
    ChronoUnit.DAYS: _dt.timedelta(days=1),
    ChronoUnit.WEEKS: _dt.timedelta(weeks=1),
}

_MONTH_UNITS: dict[ChronoUnit, int] = {
    ChronoUnit.MONTHS: 1,
    ChronoUnit.YEARS: 12,
    ChronoUnit.DECADES: 120,
    ChronoUnit.CENTURIES: 1200,
    ChronoUnit.MILLENNIA: 12000,
}

_DATE_BASED = frozenset({ChronoUnit.DAYS, ChronoUnit.WEEKS, *_MONTH_UNITS})


__all__ = ["ChronoUnit"]
