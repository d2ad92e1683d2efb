"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class ValidationError(AlmanacError):
    """Invalid input values.

    Raised when a temporal value, amount, or setting is out of range.

    Examples:
        - Month value outside 1-12
        - A nanosecond amount that is not a whole number of microseconds
        - A negative upper bound for a range sum
    """

    pass


class ParseError(AlmanacError):
    """Failed to parse string representation.

    Examples:
        - Malformed SQL date or timestamp text
        - Invalid offset string
    """

    pass


class TimezoneError(AlmanacError):
    """Invalid or unknown timezone.

    Examples:
        - Region id missing from the zone database
        - struct_time without offset information
    """

    pass


class ProductLookupError(AlmanacError):
    """A remote product lookup was refused."""

    pass


__all__ = [
    "AlmanacError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    "ProductLookupError",
]
