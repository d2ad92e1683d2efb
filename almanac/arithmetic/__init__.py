"""Calendar arithmetic: periods, adjusters and queries.

Examples:
    >>> from datetime import date
    >>> from almanac.arithmetic import payday, with_adjuster
    >>> with_adjuster(date(2017, 7, 20), payday)
    datetime.date(2017, 7, 31)
"""

from __future__ import annotations

from almanac.arithmetic.adjusters import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    first_day_of_month,
    first_day_of_next_month,
    first_day_of_year,
    last_day_of_month,
    last_day_of_year,
    next_day,
    next_or_same,
    payday,
    previous_day,
    previous_or_same,
    with_adjuster,
)
from almanac.arithmetic.period_ops import add_months, add_period, subtract_period
from almanac.arithmetic.queries import (
    days_between,
    days_until_pirate_day,
    elapsed_seconds,
    period_until,
    query,
)

__all__: list[str] = [
    # Periods
    "add_months",
    "add_period",
    "subtract_period",
    # Adjusters
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
    # Queries
    "query",
    "days_until_pirate_day",
    "days_between",
    "period_until",
    "elapsed_seconds",
]
