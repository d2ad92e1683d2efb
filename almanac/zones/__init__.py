"""Time zone lookup, conversion and offset scans.

Examples:
    >>> from almanac.zones import region_names_for_hours_minutes
    >>> "Asia/Kathmandu" in region_names_for_hours_minutes(5, 45)
    True
"""

from __future__ import annotations

from almanac.zones.regions import (
    OffsetRow,
    at_zone,
    available_zone_ids,
    format_offset,
    offset_at,
    offset_of,
    region_names_for_hours_minutes,
    region_names_for_offset,
    region_names_for_zone,
    system_default_zone,
    unusual_offsets,
    with_zone_same_instant,
    with_zone_same_local,
    zone_id,
    zone_of,
)

__all__: list[str] = [
    "OffsetRow",
    "at_zone",
    "available_zone_ids",
    "format_offset",
    "offset_at",
    "offset_of",
    "region_names_for_hours_minutes",
    "region_names_for_offset",
    "region_names_for_zone",
    "system_default_zone",
    "unusual_offsets",
    "with_zone_same_instant",
    "with_zone_same_local",
    "zone_id",
    "zone_of",
]
