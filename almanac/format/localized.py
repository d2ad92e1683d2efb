"""Locale-aware date and time styles.

Each bundled locale provides FULL, LONG, MEDIUM and SHORT patterns for
dates and for times. Unknown locales fall back to en_US.

Examples:
    >>> from datetime import date
    >>> format_localized_date(date(2017, 3, 13), FormatStyle.FULL)
    'Monday, March 13, 2017'
    >>> format_localized_date(date(2017, 3, 13), FormatStyle.SHORT)
    '3/13/17'
    >>> format_localized_date(date(2017, 3, 13), FormatStyle.FULL, "sr_Latn_RS")
    'ponedeljak, 13. mart 2017.'
"""

from __future__ import annotations

import datetime as _dt
from enum import Enum

from almanac.format._locales import get_locale
from almanac.format.pattern import Pattern


class FormatStyle(Enum):
    """Length of a localized rendering."""

    FULL = "FULL"
    LONG = "LONG"
    MEDIUM = "MEDIUM"
    SHORT = "SHORT"


def localized_date_pattern(style: FormatStyle, locale: str | None = None) -> Pattern:
    """Return the date Pattern for ``style`` in ``locale``."""
    data = get_locale(locale)
    return Pattern(data.date_patterns[style.value], data.tag)


def localized_time_pattern(style: FormatStyle, locale: str | None = None) -> Pattern:
    """Return the time Pattern for ``style`` in ``locale``.

    FULL and LONG include the zone, so they need an aware datetime.
    """
    data = get_locale(locale)
    return Pattern(data.time_patterns[style.value], data.tag)


def format_localized_date(
    value: _dt.date, style: FormatStyle, locale: str | None = None
) -> str:
    """Format the date part of ``value`` in a localized style."""
    return localized_date_pattern(style, locale).format(value)


def format_localized_time(
    value: _dt.time | _dt.datetime, style: FormatStyle, locale: str | None = None
) -> str:
    """Format the time of day of ``value`` in a localized style.

    Raises:
        ValueError: If the style includes a zone and value is naive.
    """
    return localized_time_pattern(style, locale).format(value)


def format_localized_date_time(
    value: _dt.datetime,
    date_style: FormatStyle,
    time_style: FormatStyle | None = None,
    locale: str | None = None,
) -> str:
    """Format a datetime as a localized date followed by a localized time."""
    data = get_locale(locale)
    time_style = time_style or date_style
    return (
        format_localized_date(value, date_style, data.tag)
        + data.date_time_separator
        + format_localized_time(value, time_style, data.tag)
    )


__all__ = [
    "FormatStyle",
    "localized_date_pattern",
    "localized_time_pattern",
    "format_localized_date",
    "format_localized_time",
    "format_localized_date_time",
]
