"""Almanac: worked examples of calendrical values and concurrency.

Almanac wraps the host ``datetime`` and ``zoneinfo`` types with the
calendar operations they lack (periods, units, fields, adjusters,
queries, pattern and localized formatting) and collects a set of
concurrency helpers built on ``concurrent.futures`` and ``asyncio``.

Core Types:
    Period: Calendar amount (years, months, weeks, days)

Units:
    ChronoUnit: NANOS through MILLENNIA, with add_to and between
    ChronoField: Gettable and settable date and time fields
    Month: JANUARY through DECEMBER

Subpackages:
    arithmetic: Period arithmetic, adjusters and queries
    zones: Zone lookup, conversion and offset scans
    format: ISO, pattern and localized formatting
    convert: Legacy timestamp, struct_time and SQL text conversions
    concurrency: Reductions, futures and async composition

Exceptions:
    AlmanacError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    TimezoneError: Invalid time zone
    ProductLookupError: Failed product lookup

Example:
    >>> from datetime import datetime
    >>> from almanac import Period
    >>> Period.of(2, 3, 4).add_to(datetime(2017, 2, 2, 11, 30))
    datetime.datetime(2019, 5, 6, 11, 30)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from almanac.core.period import Period

# Units
from almanac.units.chronofield import ChronoField
from almanac.units.chronounit import ChronoUnit
from almanac.units.month import Month

# Exceptions
from almanac.errors import (
    AlmanacError,
    ParseError,
    ProductLookupError,
    TimezoneError,
    ValidationError,
)

# Settings
from almanac.config import Settings

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    # Units
    "ChronoField",
    "ChronoUnit",
    "Month",
    # Exceptions
    "AlmanacError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    "ProductLookupError",
    # Settings
    "Settings",
]
