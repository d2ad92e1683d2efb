"""Region-based time zones backed by the host zone database.

All offset and daylight-saving rules come from ``zoneinfo``. This module
only looks zones up, moves values between them, and scans the whole
database for zones matching an offset.

There are two kinds of zone:
    1. Fixed offsets relative to UTC, like -05:00 (``datetime.timezone``)
    2. Geographical regions, like America/Chicago (``zoneinfo.ZoneInfo``)

Examples:
    >>> from datetime import datetime
    >>> nyc = at_zone(datetime(2017, 7, 4, 13, 20, 10), "America/New_York")
    >>> nyc.isoformat()
    '2017-07-04T13:20:10-04:00'
    >>> with_zone_same_instant(nyc, "Europe/London").isoformat()
    '2017-07-04T18:20:10+01:00'
"""

from __future__ import annotations

import datetime as _dt
import logging
import os
from pathlib import Path
from typing import NamedTuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from almanac._internal.constants import SECONDS_PER_HOUR
from almanac._internal.validation import validate_range
from almanac.errors import TimezoneError

logger = logging.getLogger(__name__)

ZoneLike = Union[str, _dt.tzinfo]

# Environment variable and link consulted for the system zone
TZ_ENVIRON = "TZ"
TZ_DEFAULT = Path("/etc/localtime")


class OffsetRow(NamedTuple):
    """One line of the unusual-offsets report."""

    offset: _dt.timedelta
    zone_id: str
    local: _dt.datetime


def available_zone_ids() -> list[str]:
    """Return every region id known to the host database, sorted."""
    return sorted(available_timezones())


def zone_of(zone: ZoneLike) -> _dt.tzinfo:
    """Resolve a region id to a ``ZoneInfo``.

    ``tzinfo`` instances are returned unchanged.

    Raises:
        TimezoneError: If the id is not in the zone database.
    """
    if isinstance(zone, _dt.tzinfo):
        return zone
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimezoneError(f"Unknown time zone id: {zone!r}") from exc


def zone_id(zone: _dt.tzinfo) -> str:
    """Return the region id of a zone, or its offset text for fixed zones.

    Examples:
        >>> zone_id(ZoneInfo("Asia/Kolkata"))
        'Asia/Kolkata'
        >>> zone_id(_dt.timezone(_dt.timedelta(hours=-5)))
        '-05:00'
    """
    key = getattr(zone, "key", None)
    if key:
        return key
    offset = zone.utcoffset(None)
    if offset is None:
        raise TimezoneError(f"Zone {zone!r} has no fixed offset")
    return format_offset(offset)


def system_default_zone() -> _dt.tzinfo:
    """Return the zone the host is configured for.

    The ``TZ`` environment variable is tried first, then the target of the
    ``/etc/localtime`` link. When neither names a region, the fixed offset
    the host currently reports is returned.
    """
    name = os.environ.get(TZ_ENVIRON, "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("TZ=%r is not a region id", name)

    if TZ_DEFAULT.is_symlink():
        target = str(TZ_DEFAULT.resolve())
        marker = "/zoneinfo/"
        if marker in target:
            key = target.split(marker, 1)[1]
            try:
                return ZoneInfo(key)
            except (ZoneInfoNotFoundError, ValueError):
                logger.debug("%s points at unknown zone %r", TZ_DEFAULT, key)

    local = _dt.datetime.now().astimezone().tzinfo
    if local is None:
        raise TimezoneError("cannot determine the system time zone")
    return local


def at_zone(local: _dt.datetime, zone: ZoneLike) -> _dt.datetime:
    """Attach a zone to a naive local date-time.

    Raises:
        TimezoneError: If ``local`` is already aware.
    """
    if local.tzinfo is not None:
        raise TimezoneError("at_zone expects a naive date-time")
    return local.replace(tzinfo=zone_of(zone))


def with_zone_same_instant(value: _dt.datetime, zone: ZoneLike) -> _dt.datetime:
    """Return the same instant seen in another zone."""
    if value.tzinfo is None:
        raise TimezoneError("with_zone_same_instant expects an aware date-time")
    return value.astimezone(zone_of(zone))


def with_zone_same_local(value: _dt.datetime, zone: ZoneLike) -> _dt.datetime:
    """Return the same wall-clock time in another zone."""
    return value.replace(tzinfo=zone_of(zone))


def offset_at(zone: ZoneLike, instant: _dt.datetime | None = None) -> _dt.timedelta:
    """Return the UTC offset of ``zone`` at an instant (default: now)."""
    if instant is None:
        instant = _dt.datetime.now(_dt.timezone.utc)
    elif instant.tzinfo is None:
        raise TimezoneError("offset_at expects an aware instant")
    offset = instant.astimezone(zone_of(zone)).utcoffset()
    if offset is None:
        raise TimezoneError(f"{zone!r} has no UTC offset")
    return offset


def offset_of(hours: int, minutes: int = 0) -> _dt.timedelta:
    """Build an offset from hours and minutes; minutes take the hours' sign.

    Raises:
        ValidationError: If hours or minutes are out of range.

    Examples:
        >>> offset_of(5, 45)
        datetime.timedelta(seconds=20700)
        >>> offset_of(-9, 30)
        datetime.timedelta(days=-1, seconds=51300)
    """
    validate_range("hours", hours, -18, 18)
    validate_range("minutes", minutes, 0, 59)
    sign = -1 if hours < 0 else 1
    return _dt.timedelta(hours=hours, minutes=sign * minutes)


def format_offset(offset: _dt.timedelta) -> str:
    """Format an offset as ``+HH:MM`` (``+HH:MM:SS`` with seconds).

    Examples:
        >>> format_offset(_dt.timedelta(hours=-9, minutes=-30))
        '-09:30'
    """
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def _iter_zones():
    for key in available_zone_ids():
        try:
            yield key, ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("skipping unloadable zone %r", key)


def region_names_for_offset(
    offset: _dt.timedelta, at: _dt.datetime | None = None
) -> list[str]:
    """Return the sorted region ids whose offset equals ``offset``.

    Each zone is evaluated at the local date-time ``at`` (default: now),
    so the answer depends on daylight-saving time at that moment.

    Examples:
        >>> from datetime import datetime
        >>> names = region_names_for_offset(offset_of(5, 45), datetime(2017, 1, 1))
        >>> "Asia/Kathmandu" in names
        True
    """
    if at is None:
        at = _dt.datetime.now()
    local = at.replace(tzinfo=None)
    return [
        key
        for key, zone in _iter_zones()
        if local.replace(tzinfo=zone).utcoffset() == offset
    ]


def region_names_for_hours_minutes(
    hours: int, minutes: int, at: _dt.datetime | None = None
) -> list[str]:
    """Return region ids for an offset given as hours and minutes."""
    return region_names_for_offset(offset_of(hours, minutes), at)


def region_names_for_zone(zone: ZoneLike, at: _dt.datetime | None = None) -> list[str]:
    """Return region ids sharing the offset ``zone`` has at ``at``."""
    if at is None:
        at = _dt.datetime.now()
    local = at.replace(tzinfo=None)
    offset = local.replace(tzinfo=zone_of(zone)).utcoffset()
    if offset is None:
        raise TimezoneError(f"{zone!r} has no UTC offset")
    return region_names_for_offset(offset, local)


def unusual_offsets(instant: _dt.datetime | None = None) -> list[OffsetRow]:
    """Return the zones whose offset is not a whole number of hours.

    Rows are sorted by offset, then by zone id. Each row carries the
    instant converted to that zone.
    """
    if instant is None:
        instant = _dt.datetime.now(_dt.timezone.utc)
    elif instant.tzinfo is None:
        raise TimezoneError("unusual_offsets expects an aware instant")

    rows = []
    for key, zone in _iter_zones():
        local = instant.astimezone(zone)
        offset = local.utcoffset()
        if offset is None:
            raise TimezoneError(f"{key} has no UTC offset")
        if int(offset.total_seconds()) % SECONDS_PER_HOUR != 0:
            rows.append(OffsetRow(offset, key, local))
    rows.sort(key=lambda row: (row.offset, row.zone_id))
    return rows


__all__ = [
    "OffsetRow",
    "ZoneLike",
    "available_zone_ids",
    "zone_of",
    "zone_id",
    "system_default_zone",
    "at_zone",
    "with_zone_same_instant",
    "with_zone_same_local",
    "offset_at",
    "offset_of",
    "format_offset",
    "region_names_for_offset",
    "region_names_for_hours_minutes",
    "region_names_for_zone",
    "unusual_offsets",
]
