"""Calendar amounts of years, months, weeks and days.

A ``timedelta`` is an exact span. A Period is a calendar amount whose
length depends on where it is applied: one month from January 31 ends
on the last day of February.
"""

from __future__ import annotations

import datetime as _dt
import operator
from typing import Callable, TypeVar

from almanac._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR

_D = TypeVar("_D", _dt.date, _dt.datetime)

_FIELDS = ("years", "months", "weeks", "days")


class Period:
    """An immutable amount of years, months, weeks and days.

    Components are kept exactly as given; ``Period(months=14)`` stays
    fourteen months until ``normalized()`` is called. Any component may
    be negative.

    Examples:
        >>> p = Period.of(2, 3, 4)
        >>> str(p)
        'P2Y3M4D'

        >>> from datetime import datetime
        >>> p.add_to(datetime(2017, 2, 2, 11, 30))
        datetime.datetime(2019, 5, 6, 11, 30)

        >>> from datetime import date
        >>> Period.of_months(1).add_to(date(2024, 1, 31))
        datetime.date(2024, 2, 29)
    """

    __slots__ = ("_parts",)

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
    ) -> None:
        self._parts = (years, months, weeks, days)

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        """Build a Period from years, months and days.

        Examples:
            >>> Period.of(2, 3, 4)
            Period(years=2, months=3, weeks=0, days=4)
        """
        return cls(years, months, 0, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def zero(cls) -> Period:
        return cls()

    @classmethod
    def between(cls, start: _dt.date, end: _dt.date) -> Period:
        """Return the years, months and days from ``start`` to ``end``.

        The start date is included and the end date is excluded. Months are
        counted first; when the remaining day difference has the opposite
        sign to the month count, one month is borrowed back into days. Both
        ``years`` and ``months`` carry the sign of the whole period.

        ``datetime`` arguments are reduced to their date part.

        Args:
            start: The start date, inclusive.
            end: The end date, exclusive.

        Returns:
            A Period with years, months and days components.

        Examples:
            >>> from datetime import date
            >>> Period.between(date(2017, 2, 2), date(2020, 11, 3))
            Period(years=3, months=9, weeks=0, days=1)

            >>> Period.between(date(2017, 1, 31), date(2017, 3, 1))
            Period(years=0, months=1, weeks=0, days=1)
        """
        from almanac._internal.calendar import days_in_month
        from almanac.arithmetic.period_ops import add_months

        start = _as_date(start)
        end = _as_date(end)

        total_months = (end.year * MONTHS_PER_YEAR + end.month) - (
            start.year * MONTHS_PER_YEAR + start.month
        )
        days = end.day - start.day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = (end - add_months(start, total_months)).days
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= days_in_month(end.year, end.month)

        sign = -1 if total_months < 0 else 1
        years, months = divmod(abs(total_months), MONTHS_PER_YEAR)
        return cls(years=sign * years, months=sign * months, days=days)

    @property
    def years(self) -> int:
        return self._parts[0]

    @property
    def months(self) -> int:
        return self._parts[1]

    @property
    def weeks(self) -> int:
        return self._parts[2]

    @property
    def days(self) -> int:
        return self._parts[3]

    @property
    def total_months(self) -> int:
        """Years and months as a single month count.

        Examples:
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self.years * MONTHS_PER_YEAR + self.months

    @property
    def total_days(self) -> int:
        """Weeks and days as a single day count.

        Examples:
            >>> Period(weeks=2, days=3).total_days
            17
        """
        return self.weeks * DAYS_PER_WEEK + self.days

    @property
    def is_zero(self) -> bool:
        return not any(self._parts)

    def normalized(self) -> Period:
        """Fold months into years and days into weeks.

        Examples:
            >>> Period(months=14, days=10).normalized()
            Period(years=1, months=2, weeks=1, days=3)
        """
        years, months = divmod(self.total_months, MONTHS_PER_YEAR)
        weeks, days = divmod(self.total_days, DAYS_PER_WEEK)
        return Period(years, months, weeks, days)

    def add_to(self, value: _D) -> _D:
        """Add this period to a date or datetime.

        Years and months are applied first, clamping the day of month to
        the last valid day, then weeks and days. Time of day and tzinfo
        are preserved.
        """
        from almanac.arithmetic.period_ops import add_period

        return add_period(value, self)

    def subtract_from(self, value: _D) -> _D:
        """Subtract this period from a date or datetime.

        Examples:
            >>> from datetime import datetime
            >>> Period.of(2, 3, 4).subtract_from(datetime(2017, 2, 2, 11, 30))
            datetime.datetime(2014, 10, 29, 11, 30)
        """
        from almanac.arithmetic.period_ops import subtract_period

        return subtract_period(value, self)

    def _zip(self, other: Period, op: Callable[[int, int], int]) -> Period:
        return Period(*(op(a, b) for a, b in zip(self._parts, other._parts)))

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self._zip(other, operator.add)

    def __radd__(self, other: object) -> Period:
        # sum() starts from 0
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self._zip(other, operator.sub)

    def __neg__(self) -> Period:
        return Period(*(-part for part in self._parts))

    def __mul__(self, other: object) -> Period:
        """Scale every component by an integer.

        Examples:
            >>> Period(months=3) * 2
            Period(years=0, months=6, weeks=0, days=0)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Period(*(part * other for part in self._parts))

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        """Compare component by component.

        ``Period(months=12)`` and ``Period(years=1)`` are not equal; compare
        ``normalized()`` forms to treat them alike.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value}" for name, value in zip(_FIELDS, self._parts))
        return f"Period({body})"

    def __str__(self) -> str:
        """ISO 8601 text; weeks are folded into days.

        Examples:
            >>> str(Period(years=1, weeks=2))
            'P1Y14D'
            >>> str(Period())
            'P0D'
        """
        text = "".join(
            f"{value}{unit}"
            for value, unit in ((self.years, "Y"), (self.months, "M"), (self.total_days, "D"))
            if value
        )
        return "P" + (text or "0D")

    def __bool__(self) -> bool:
        return not self.is_zero


def _as_date(value: _dt.date) -> _dt.date:
    if isinstance(value, _dt.datetime):
        return value.date()
    return value


__all__ = ["Period"]
