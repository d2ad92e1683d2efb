"""Range checks that raise ``ValidationError``.

Not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from almanac.errors import ValidationError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Check ``min_val <= value <= max_val``.

    Args:
        name: Name used in the error message.
        value: The value to check.
        min_val: Smallest allowed value.
        max_val: Largest allowed value.

    Raises:
        ValidationError: If value is out of range.

    Examples:
        >>> validate_range("month", 13, 1, 12)
        Traceback (most recent call last):
        ...
        almanac.errors.ValidationError: month must be between 1 and 12, got 13
    """
    if not min_val <= value <= max_val:
        raise ValidationError(f"{name} must be between {min_val} and {max_val}, got {value}")


def validate_year(year: int) -> None:
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    validate_range("month", month, 1, MONTHS_PER_YEAR)


def validate_day(year: int, month: int, day: int) -> None:
    """Check that ``day`` exists in the given month."""
    from almanac._internal.calendar import days_in_month

    validate_range(f"day of {year}-{month:02d}", day, 1, days_in_month(year, month))


def validate_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_non_negative",
]
