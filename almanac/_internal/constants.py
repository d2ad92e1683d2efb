"""Internal constants for Almanac.

Not part of the public API.
"""

from __future__ import annotations

NANOS_PER_MICROSECOND: int = 1_000
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_HOUR: int = 3_600

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Year range of the host datetime type
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Talk Like a Pirate Day
PIRATE_DAY_MONTH: int = 9
PIRATE_DAY_DAY: int = 19

# First pay day of the month
MID_MONTH_PAYDAY: int = 15


__all__ = [
    "NANOS_PER_MICROSECOND",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_HOUR",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "PIRATE_DAY_MONTH",
    "PIRATE_DAY_DAY",
    "MID_MONTH_PAYDAY",
]
