"""Printable walk-throughs of the calendrical API.

Each function takes the active ``Settings`` and prints to stdout. Lines
of the form ``<expected> == <actual>`` compare a known answer with the
computed one.
"""

from __future__ import annotations

import datetime as _dt
import logging
import time

from almanac.arithmetic import (
    THURSDAY,
    days_between,
    days_until_pirate_day,
    first_day_of_next_month,
    next_day,
    payday,
    period_until,
    previous_or_same,
    query,
    with_adjuster,
)
from almanac.config import Settings
from almanac.convert import (
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
from almanac.core import Period
from almanac.format import (
    FormatStyle,
    format_local_date,
    format_local_date_time,
    format_local_time,
    format_localized_date,
    format_localized_time,
    format_pattern,
    format_zoned_date_time,
)
from almanac.units import ChronoField, ChronoUnit, Month
from almanac.zones import (
    at_zone,
    available_zone_ids,
    format_offset,
    region_names_for_hours_minutes,
    region_names_for_zone,
    system_default_zone,
    unusual_offsets,
    with_zone_same_instant,
    zone_id,
)

logger = logging.getLogger(__name__)

MOON_LANDING = _dt.datetime(1969, 7, 20, 20, 18)
ELECTION_DAY = _dt.date(2020, 11, 3)


def _check(expected: object, actual: object) -> None:
    print(f"{expected} == {actual}")


def local_example(settings: Settings) -> None:
    """Local dates and times, periods and unit arithmetic."""
    walk = _dt.datetime.combine(MOON_LANDING.date(), _dt.time(20, 2, 56, 150_000))
    print(f"Moon landing: {format_local_date(MOON_LANDING)} {format_local_time(MOON_LANDING.time())}")
    print(f"First step:   {format_local_date_time(walk)}")

    start_date = _dt.date(2017, 2, 2)
    _check("2017-02-05", format_pattern(start_date + _dt.timedelta(days=3), "yyyy-MM-dd"))
    _check("11:30:00.001", format_local_time(ChronoUnit.MILLIS.add_to(_dt.datetime(2017, 2, 2, 11, 30), 1)))

    period = Period.of(2, 3, 4)
    start = _dt.datetime(2017, 2, 2, 11, 30)
    _check("2019-05-06T11:30:00", format_local_date_time(period.add_to(start)))
    _check("2017-02-03T23:30:00", format_local_date_time(ChronoUnit.HALF_DAYS.add_to(start, 3)))
    _check("2014-10-29T11:30:00", format_local_date_time(period.subtract_from(start)))
    _check("1817-02-02T11:30:00", format_local_date_time(ChronoUnit.CENTURIES.add_to(start, -2)))
    _check("5017-02-02T11:30:00", format_local_date_time(ChronoUnit.MILLENNIA.add_to(start, 3)))


def instant_example(settings: Settings) -> None:
    """The current instant, the current year and a month number."""
    now = _dt.datetime.now(_dt.timezone.utc)
    print(f"Now:  {now.isoformat()}")
    print(f"Year: {now.year}")
    print(f"Month.JANUARY: {Month.JANUARY.value}")


def zones_example(settings: Settings) -> None:
    """Attach a zone, then view the same instant elsewhere."""
    print(f"{len(available_zone_ids())} region ids available")
    nyc = at_zone(_dt.datetime(2017, 7, 4, 13, 20, 10), "America/New_York")
    london = with_zone_same_instant(nyc, "Europe/London")
    _check("2017-07-04T13:20:10-04:00[America/New_York]", format_zoned_date_time(nyc))
    _check("2017-07-04T18:20:10+01:00[Europe/London]", format_zoned_date_time(london))


def field_example(settings: Settings) -> None:
    """Setting a field resolves to the previous valid date."""
    start = _dt.datetime(2017, 1, 31, 11, 30)
    end = ChronoField.MONTH_OF_YEAR.adjust_into(start, 2)
    _check("2017-02-28T11:30:00", format_local_date_time(end))


def adjusters_example(settings: Settings) -> None:
    """Built-in temporal adjusters."""
    start = _dt.datetime(2017, 2, 2, 11, 30)
    _check("2017-03-01T11:30:00", format_local_date_time(with_adjuster(start, first_day_of_next_month)))
    _check("2017-02-09T11:30:00", format_local_date_time(with_adjuster(start, next_day(THURSDAY))))
    _check("2017-02-02T11:30:00", format_local_date_time(with_adjuster(start, previous_or_same(THURSDAY))))


def payday_example(settings: Settings) -> None:
    """Pay-day adjustment of every day of July 2017."""
    for day in range(1, 15):
        print(f"{with_adjuster(_dt.date(2017, 7, day), payday).day} == 14")
    for day in range(15, 32):
        print(f"{with_adjuster(_dt.date(2017, 7, day), payday).day} == 31")


def pirate_day_example(settings: Settings) -> None:
    """Days until Talk Like a Pirate Day from dates around it."""
    for day in range(10, 19):
        print(query(_dt.date(2017, 9, day), days_until_pirate_day) <= 9)
    for day in range(20, 31):
        days = query(_dt.date(2017, 9, day), days_until_pirate_day)
        print(354 <= days < 365)


def formatting_example(settings: Settings) -> None:
    """Localized styles and custom patterns."""
    day = _dt.date(2017, 3, 13)
    for label, style in (
        ("Full", FormatStyle.FULL),
        ("Long", FormatStyle.LONG),
        ("Medium", FormatStyle.MEDIUM),
        ("Short", FormatStyle.SHORT),
    ):
        print(f"{label:<7}: {format_localized_date(day, style, settings.locale)}")
    for label, locale in (
        ("France", "fr_FR"),
        ("India", "hin_IN"),
        ("Brazil", "pt_BR"),
        ("Japan", "ja_JP"),
        ("Serbian", "sr_Latn_RS"),
    ):
        print(f"{label:<7}: {format_localized_date(day, FormatStyle.FULL, locale)}")

    moon = at_zone(MOON_LANDING, "UTC")
    print(format_zoned_date_time(moon))
    print(format_pattern(moon, "uuuu/MMMM/dd hh:mm:ss a zzz GG"))
    print(format_pattern(moon, "uuuu/MMMM/dd hh:mm:ss a VV xxxxx"))


def unusual_offsets_example(settings: Settings) -> None:
    """Zones whose offset is not a whole number of hours."""
    current = _dt.datetime.now(system_default_zone())
    print(f"Current time is {current.isoformat()}")
    print()
    print(f"{'Offset':>10} {'ZoneId':>25} {'Time':>10}")
    for row in unusual_offsets(current):
        local_time = format_localized_time(row.local, FormatStyle.SHORT, settings.locale)
        print(f"{format_offset(row.offset):>10} {row.zone_id:>25} {local_time:>10}")


def region_names_example(settings: Settings) -> None:
    """Region ids sharing an offset."""
    names = region_names_for_hours_minutes(0, 0)
    for name in ("GMT", "Etc/GMT", "Etc/UTC", "UTC", "Etc/Zulu"):
        print(f"{name}: {name in names}")

    names = region_names_for_hours_minutes(5, 45)
    for name in ("Asia/Kathmandu", "Asia/Katmandu"):
        print(f"{name}: {name in names}")

    names = region_names_for_zone("America/Chicago")
    for name in ("America/Chicago", "US/Central", "Canada/Central"):
        print(f"{name}: {name in names}")
    print(f"Etc/GMT+5 or Etc/GMT+6: {'Etc/GMT+5' in names or 'Etc/GMT+6' in names}")

    zone = system_default_zone()
    key = zone_id(zone)
    print(f"System default {key}: {key in region_names_for_zone(zone)}")


def months_example(settings: Settings) -> None:
    """Facts about months."""
    _check(29, Month.FEBRUARY.length(True))
    _check(214, Month.AUGUST.first_day_of_year(True))
    _check(Month.JANUARY.name, Month.of(1).name)
    _check(Month.MARCH.name, Month.JANUARY.plus(2).name)
    _check(Month.FEBRUARY.name, Month.MARCH.minus(1).name)


def election_example(settings: Settings) -> None:
    """Time until election day as days and as a period."""
    today = _dt.date.today()
    print(f"{days_between(today, ELECTION_DAY)} day(s) to go...")
    until = period_until(today, ELECTION_DAY)
    print(f"{until.years} year(s), {until.months} month(s), and {until.days} day(s)")


def conversions_example(settings: Settings) -> None:
    """Legacy timestamps, struct_time and SQL text."""
    seconds = time.time()
    print(f"timestamp -> date:        {local_date_from_timestamp(seconds)}")
    print(f"millis -> date:           {local_date_from_millis(int(seconds * 1000))}")
    print(f"timestamp via string:     {format_local_date_time(local_datetime_via_string(seconds))}")
    print(f"localtime -> zoned:       {zoned_from_struct_time(time.localtime(seconds)).isoformat()}")
    print(f"localtime -> local:       {format_local_date_time(local_from_struct_time(time.localtime(seconds)))}")
    _check("2017-02-02", date_to_sql(date_from_sql("2017-02-02")))
    stamp = datetime_from_sql_timestamp("2017-02-02 11:30:00.0")
    _check("2017-02-02 11:30:00.0", datetime_to_sql_timestamp(stamp))


__all__ = [
    "local_example",
    "instant_example",
    "zones_example",
    "field_example",
    "adjusters_example",
    "payday_example",
    "pirate_day_example",
    "formatting_example",
    "unusual_offsets_example",
    "region_names_example",
    "months_example",
    "election_example",
    "conversions_example",
]
