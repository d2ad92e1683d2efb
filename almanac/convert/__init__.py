"""Temporal conversion utilities.

This module converts legacy date carriers (POSIX timestamps,
``time.struct_time`` records and SQL text) to ``date`` and ``datetime``.

Examples:
    >>> from almanac.convert import date_from_sql, date_to_sql
    >>> date_to_sql(date_from_sql("2017-02-02"))
    '2017-02-02'
"""

from __future__ import annotations

from almanac.convert.legacy import (
    date_from_sql,
    date_to_sql,
    datetime_from_sql_timestamp,
    datetime_to_sql_timestamp,
    local_date_from_millis,
    local_date_from_timestamp,
    local_datetime_via_string,
    local_from_struct_time,
    zoned_from_struct_time,
)

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
