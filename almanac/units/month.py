"""Month-of-year enumeration.

Examples:
    >>> Month.FEBRUARY.length(leap_year=True)
    29
    >>> Month.AUGUST.first_day_of_year(leap_year=True)
    214
    >>> Month.JANUARY.plus(2)
    <Month.MARCH: 3>
"""

from __future__ import annotations

from enum import IntEnum

from almanac._internal.calendar import days_in_month
from almanac._internal.validation import validate_month


class Month(IntEnum):
    """A month of the year, JANUARY (1) to DECEMBER (12)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the Month for a 1-based month number.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        validate_month(month)
        return cls(month)

    def length(self, leap_year: bool) -> int:
        """Return the number of days in this month."""
        return days_in_month(2000 if leap_year else 2001, self.value)

    def min_length(self) -> int:
        return self.length(leap_year=False)

    def max_length(self) -> int:
        return self.length(leap_year=True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day of year (1-based) of the first of this month."""
        return 1 + sum(Month(m).length(leap_year) for m in range(1, self.value))

    def plus(self, months: int) -> Month:
        """Return the month ``months`` later, wrapping around the year."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        """Return the month ``months`` earlier, wrapping around the year."""
        return self.plus(-months)


__all__ = ["Month"]
