"""ISO 8601 formatting and parsing for the host date and time types.

Functions:
    format_local_date: YYYY-MM-DD
    format_local_time: HH:MM:SS[.f]
    format_local_date_time: YYYY-MM-DDTHH:MM:SS[.f]
    format_offset_date_time: local date-time followed by +HH:MM or Z
    format_zoned_date_time: offset date-time followed by [Region/Id]
    format_instant: the UTC instant, always ending in Z
    parse_local_date_time: the inverse of format_local_date_time

Seconds are always printed. A non-zero fraction of a second is printed
with trailing zeros removed.

Examples:
    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> format_local_date_time(datetime(2019, 5, 6, 11, 30))
    '2019-05-06T11:30:00'

    >>> moon = datetime(1969, 7, 20, 20, 18, tzinfo=ZoneInfo("UTC"))
    >>> format_zoned_date_time(moon)
    '1969-07-20T20:18:00Z[UTC]'
"""

from __future__ import annotations

import datetime as _dt

from almanac.errors import ParseError


def format_local_date(value: _dt.date) -> str:
    """Format the date part as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_local_time(value: _dt.time | _dt.datetime) -> str:
    """Format the time of day as HH:MM:SS with an optional fraction.

    Examples:
        >>> format_local_time(_dt.time(11, 30, 0, 1000))
        '11:30:00.001'
        >>> format_local_time(_dt.time(20, 2, 56, 150_000))
        '20:02:56.15'
    """
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    return text


def format_local_date_time(value: _dt.datetime) -> str:
    """Format a datetime without its offset or zone."""
    return f"{format_local_date(value)}T{format_local_time(value)}"


def _format_offset(offset: _dt.timedelta) -> str:
    total = int(offset.total_seconds())
    if total == 0:
        return "Z"
    sign = "+" if total > 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def format_offset_date_time(value: _dt.datetime) -> str:
    """Format an aware datetime with its UTC offset.

    Raises:
        ValueError: If value is naive.
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("format_offset_date_time requires an aware datetime")
    return format_local_date_time(value) + _format_offset(offset)


def format_zoned_date_time(value: _dt.datetime) -> str:
    """Format an aware datetime with its offset and, for regions, the zone id.

    Raises:
        ValueError: If value is naive.
    """
    text = format_offset_date_time(value)
    key = getattr(value.tzinfo, "key", None)
    if key:
        text += f"[{key}]"
    return text


def format_instant(value: _dt.datetime) -> str:
    """Format an aware datetime as a UTC instant ending in Z.

    Raises:
        ValueError: If value is naive.
    """
    if value.tzinfo is None:
        raise ValueError("format_instant requires an aware datetime")
    return format_local_date_time(value.astimezone(_dt.timezone.utc)) + "Z"


def parse_local_date_time(s: str) -> _dt.datetime:
    """Parse YYYY-MM-DDTHH:MM[:SS[.f]] into a naive datetime.

    Raises:
        ParseError: If the string is not a local date-time.
    """
    if not isinstance(s, str):
        raise ParseError(f"Expected string, got {type(s).__name__}")
    text = s.strip()
    if "T" not in text:
        raise ParseError(f"Invalid local date-time: {s!r}")
    try:
        value = _dt.datetime.fromisoformat(text)
    except ValueError as exc:
        raise ParseError(f"Invalid local date-time: {s!r}") from exc
    if value.tzinfo is not None:
        raise ParseError(f"Local date-time must not carry an offset: {s!r}")
    return value


__all__ = [
    "format_local_date",
    "format_local_time",
    "format_local_date_time",
    "format_offset_date_time",
    "format_zoned_date_time",
    "format_instant",
    "parse_local_date_time",
]
