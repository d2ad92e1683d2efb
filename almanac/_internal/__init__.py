"""Internal utilities for Almanac.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.calendar import (
    clamped_date,
    days_in_month,
    days_in_year,
    is_leap_year,
    last_day_of_month,
    shift_months,
)
from almanac._internal.validation import (
    validate_day,
    validate_month,
    validate_non_negative,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "clamped_date",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "last_day_of_month",
    "shift_months",
    "validate_day",
    "validate_month",
    "validate_non_negative",
    "validate_range",
    "validate_year",
]
