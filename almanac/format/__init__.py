"""Temporal formatting.

This module provides functions for converting date and time values to
string representations:
    - ISO 8601 output (local, offset and zoned forms)
    - Pattern-letter formatting
    - Locale-aware FULL/LONG/MEDIUM/SHORT styles

Examples:
    >>> from datetime import date
    >>> from almanac.format import format_pattern, format_localized_date, FormatStyle
    >>> format_pattern(date(2017, 2, 5), "yyyy-MM-dd")
    '2017-02-05'
    >>> format_localized_date(date(2017, 3, 13), FormatStyle.FULL, "fr_FR")
    'lundi 13 mars 2017'
"""

from __future__ import annotations

from almanac.format._locales import available_locales
from almanac.format.iso import (
    format_instant,
    format_local_date,
    format_local_date_time,
    format_local_time,
    format_offset_date_time,
    format_zoned_date_time,
    parse_local_date_time,
)
from almanac.format.localized import (
    FormatStyle,
    format_localized_date,
    format_localized_date_time,
    format_localized_time,
    localized_date_pattern,
    localized_time_pattern,
)
from almanac.format.pattern import Pattern, format_pattern, of_pattern

__all__: list[str] = [
    # ISO 8601
    "format_local_date",
    "format_local_time",
    "format_local_date_time",
    "format_offset_date_time",
    "format_zoned_date_time",
    "format_instant",
    "parse_local_date_time",
    # Patterns
    "Pattern",
    "of_pattern",
    "format_pattern",
    # Localized
    "FormatStyle",
    "available_locales",
    "localized_date_pattern",
    "localized_time_pattern",
    "format_localized_date",
    "format_localized_time",
    "format_localized_date_time",
]
