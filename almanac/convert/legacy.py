"""Conversions from legacy date carriers to ``date`` and ``datetime``.

Older code passes dates around as POSIX timestamps (seconds or
milliseconds since 1970-01-01 00:00:00 UTC), as ``time.struct_time``
records, or as SQL text. This module turns each of them into the host
date and time types.

Functions:
    local_date_from_timestamp: POSIX seconds to a local date.
    local_date_from_millis: POSIX milliseconds to a local date.
    date_from_sql / date_to_sql: "YYYY-MM-DD" text.
    datetime_from_sql_timestamp / datetime_to_sql_timestamp:
        "YYYY-MM-DD HH:MM:SS[.f]" text.
    zoned_from_struct_time: struct_time with offset to an aware datetime.
    local_from_struct_time: struct_time fields to a naive datetime.
    local_datetime_via_string: timestamp to text and back.

Examples:
    >>> from datetime import timezone
    >>> local_date_from_millis(0, timezone.utc)
    datetime.date(1970, 1, 1)

    >>> date_from_sql("2017-02-02")
    datetime.date(2017, 2, 2)
"""

from __future__ import annotations

import datetime as _dt
import re
import time
from typing import TYPE_CHECKING

from almanac._internal.constants import MILLIS_PER_SECOND
from almanac.errors import ParseError, TimezoneError

if TYPE_CHECKING:
    from almanac.zones.regions import ZoneLike

_SQL_DATE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")
_SQL_TIMESTAMP = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2}) (\d{1,2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?$"
)


def _resolve_zone(zone: ZoneLike | None) -> _dt.tzinfo:
    from almanac.zones.regions import system_default_zone, zone_of

    if zone is None:
        return system_default_zone()
    return zone_of(zone)


def local_date_from_timestamp(seconds: float, zone: ZoneLike | None = None) -> _dt.date:
    """Return the date an instant falls on in ``zone`` (default: system zone).

    Examples:
        >>> local_date_from_timestamp(1_500_000_000, "Asia/Tokyo")
        datetime.date(2017, 7, 14)
    """
    return _dt.datetime.fromtimestamp(seconds, _resolve_zone(zone)).date()


def local_date_from_millis(millis: int, zone: ZoneLike | None = None) -> _dt.date:
    """Return the date a millisecond timestamp falls on in ``zone``."""
    seconds, remainder = divmod(millis, MILLIS_PER_SECOND)
    instant = _dt.datetime.fromtimestamp(seconds, _resolve_zone(zone))
    return (instant + _dt.timedelta(milliseconds=remainder)).date()


def date_from_sql(text: str) -> _dt.date:
    """Parse SQL DATE text ("YYYY-MM-DD").

    Raises:
        ParseError: If text is not a valid SQL date.
    """
    text = text.strip()
    if not _SQL_DATE.match(text):
        raise ParseError(f"Invalid SQL date: {text!r}")
    year, month, day = (int(part) for part in text.split("-"))
    try:
        return _dt.date(year, month, day)
    except ValueError as exc:
        raise ParseError(f"Invalid SQL date: {text!r}") from exc


def date_to_sql(value: _dt.date) -> str:
    """Format a date as SQL DATE text."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def datetime_from_sql_timestamp(text: str) -> _dt.datetime:
    """Parse SQL TIMESTAMP text ("YYYY-MM-DD HH:MM:SS[.fffffffff]").

    Fractions finer than a microsecond are truncated.

    Raises:
        ParseError: If text is not a valid SQL timestamp.

    Examples:
        >>> datetime_from_sql_timestamp("2017-02-02 11:30:00.0")
        datetime.datetime(2017, 2, 2, 11, 30)
    """
    match = _SQL_TIMESTAMP.match(text.strip())
    if not match:
        raise ParseError(f"Invalid SQL timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or "0"
    microsecond = int(fraction.ljust(9, "0")[:6])
    try:
        return _dt.datetime(year, month, day, hour, minute, second, microsecond)
    except ValueError as exc:
        raise ParseError(f"Invalid SQL timestamp: {text!r}") from exc


def datetime_to_sql_timestamp(value: _dt.datetime) -> str:
    """Format a datetime as SQL TIMESTAMP text.

    A zero fraction prints as ".0", matching JDBC drivers.

    Examples:
        >>> datetime_to_sql_timestamp(_dt.datetime(2017, 2, 2, 11, 30))
        '2017-02-02 11:30:00.0'
    """
    fraction = f"{value.microsecond:06d}".rstrip("0") or "0"
    return (
        f"{date_to_sql(value)} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{fraction}"
    )


def zoned_from_struct_time(st: time.struct_time) -> _dt.datetime:
    """Convert a struct_time that carries its UTC offset to an aware datetime.

    ``time.localtime()`` fills ``tm_gmtoff`` and ``tm_zone``; records built
    by hand may not.

    Raises:
        TimezoneError: If the record has no offset.
    """
    if st.tm_gmtoff is None:
        raise TimezoneError("struct_time has no tm_gmtoff")
    offset = _dt.timedelta(seconds=st.tm_gmtoff)
    tz = _dt.timezone(offset, st.tm_zone) if st.tm_zone else _dt.timezone(offset)
    return _dt.datetime(*st[:6], tzinfo=tz)


def local_from_struct_time(st: time.struct_time) -> _dt.datetime:
    """Read the calendar fields of a struct_time into a naive datetime.

    Examples:
        >>> st = time.struct_time((2017, 7, 4, 13, 20, 10, 1, 185, 0))
        >>> local_from_struct_time(st)
        datetime.datetime(2017, 7, 4, 13, 20, 10)
    """
    return _dt.datetime(
        st.tm_year,
        st.tm_mon,
        st.tm_mday,
        st.tm_hour,
        st.tm_min,
        min(st.tm_sec, 59),  # leap second
    )


def local_datetime_via_string(seconds: float, zone: ZoneLike | None = None) -> _dt.datetime:
    """Convert a timestamp by formatting it as text and parsing it back.

    The text form is YYYY-MM-DDTHH:MM:SS, so sub-second precision is lost.
    """
    from almanac.format.iso import parse_local_date_time

    instant = _dt.datetime.fromtimestamp(seconds, _resolve_zone(zone))
    return parse_local_date_time(instant.strftime("%Y-%m-%dT%H:%M:%S"))


__all__ = [
    "local_date_from_timestamp",
    "local_date_from_millis",
    "date_from_sql",
    "date_to_sql",
    "datetime_from_sql_timestamp",
    "datetime_to_sql_timestamp",
    "zoned_from_struct_time",
    "local_from_struct_time",
    "local_datetime_via_string",
]
