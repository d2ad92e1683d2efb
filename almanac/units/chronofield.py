"""ChronoField enumeration for reading and setting fields.

Setting a field returns a new value. When the new year or month leaves
the day of month invalid, the day resolves to the last valid day of the
month, so January 31 with MONTH_OF_YEAR set to 2 becomes February 28.
"""

from __future__ import annotations

import datetime as _dt
from enum import Enum
from typing import TypeVar

from almanac._internal.calendar import clamped_date, days_in_year
from almanac._internal.constants import MAX_YEAR, MIN_YEAR
from almanac._internal.validation import validate_day, validate_range
from almanac.errors import ValidationError

_D = TypeVar("_D", _dt.date, _dt.datetime)


class ChronoField(Enum):
    """Standard fields of a date or datetime.

    Examples:
        >>> from datetime import datetime
        >>> start = datetime(2017, 1, 31, 11, 30)
        >>> ChronoField.MONTH_OF_YEAR.adjust_into(start, 2)
        datetime.datetime(2017, 2, 28, 11, 30)

        >>> ChronoField.DAY_OF_WEEK.get(start)  # Tuesday
        2
    """

    YEAR = "year"
    MONTH_OF_YEAR = "month_of_year"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK = "day_of_week"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE_OF_HOUR = "minute_of_hour"
    SECOND_OF_MINUTE = "second_of_minute"

    @property
    def is_time_based(self) -> bool:
        return self in (
            ChronoField.HOUR_OF_DAY,
            ChronoField.MINUTE_OF_HOUR,
            ChronoField.SECOND_OF_MINUTE,
        )

    def get(self, value: _dt.date) -> int:
        """Read this field from a date or datetime.

        DAY_OF_WEEK runs from Monday (1) to Sunday (7).

        Raises:
            ValidationError: If a time field is read from a plain date.
        """
        self._check_supported(value)
        if self is ChronoField.YEAR:
            return value.year
        if self is ChronoField.MONTH_OF_YEAR:
            return value.month
        if self is ChronoField.DAY_OF_MONTH:
            return value.day
        if self is ChronoField.DAY_OF_YEAR:
            return value.timetuple().tm_yday
        if self is ChronoField.DAY_OF_WEEK:
            return value.isoweekday()
        if self is ChronoField.HOUR_OF_DAY:
            return value.hour
        if self is ChronoField.MINUTE_OF_HOUR:
            return value.minute
        return value.second

    def adjust_into(self, value: _D, new_value: int) -> _D:
        """Return a copy of ``value`` with this field set to ``new_value``.

        Args:
            value: The date or datetime to adjust.
            new_value: The new field value.

        Returns:
            A new value of the same type.

        Raises:
            ValidationError: If new_value is out of range for the field.
        """
        self._check_supported(value)

        if self is ChronoField.YEAR:
            validate_range("year", new_value, MIN_YEAR, MAX_YEAR)
            return _with_date(value, clamped_date(new_value, value.month, value.day))
        if self is ChronoField.MONTH_OF_YEAR:
            validate_range("month", new_value, 1, 12)
            return _with_date(value, clamped_date(value.year, new_value, value.day))
        if self is ChronoField.DAY_OF_MONTH:
            validate_day(value.year, value.month, new_value)
            return value.replace(day=new_value)
        if self is ChronoField.DAY_OF_YEAR:
            validate_range("day of year", new_value, 1, days_in_year(value.year))
            target = _dt.date(value.year, 1, 1) + _dt.timedelta(days=new_value - 1)
            return _with_date(value, target)
        if self is ChronoField.DAY_OF_WEEK:
            validate_range("day of week", new_value, 1, 7)
            return value + _dt.timedelta(days=new_value - value.isoweekday())
        if self is ChronoField.HOUR_OF_DAY:
            validate_range("hour", new_value, 0, 23)
            return value.replace(hour=new_value)
        if self is ChronoField.MINUTE_OF_HOUR:
            validate_range("minute", new_value, 0, 59)
            return value.replace(minute=new_value)
        validate_range("second", new_value, 0, 59)
        return value.replace(second=new_value)

    def _check_supported(self, value: _dt.date) -> None:
        if self.is_time_based and not isinstance(value, _dt.datetime):
            raise ValidationError(f"{self.name} is not available on a date")


def _with_date(value: _D, target: _dt.date) -> _D:
    return value.replace(year=target.year, month=target.month, day=target.day)


__all__ = ["ChronoField"]
