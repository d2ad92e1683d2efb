"""Tests for zone lookup, conversion and offset scans."""

from __future__ import annotations

import datetime as _dt
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from almanac import TimezoneError, ValidationError
from almanac.zones import (
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

# Winter in the northern hemisphere, so Chicago is on standard time
WINTER = datetime(2017, 1, 15, 12, 0)


class _NoOffset(_dt.tzinfo):
    def utcoffset(self, dt):
        return None

    def dst(self, dt):
        return None

    def tzname(self, dt):
        return None


# =============================================================================
# Lookup Tests
# =============================================================================


class TestZoneLookup:
    """Tests for resolving zone ids."""

    def test_available_ids_sorted(self):
        """Test the id list is sorted and has the common regions."""
        ids = available_zone_ids()
        assert ids == sorted(ids)
        assert "America/New_York" in ids
        assert "Europe/London" in ids

    def test_zone_of(self):
        """Test known ids resolve and tzinfo passes through."""
        assert zone_of("Asia/Tokyo") == ZoneInfo("Asia/Tokyo")
        assert zone_of(timezone.utc) is timezone.utc

    def test_zone_of_unknown(self):
        """Test unknown ids raise TimezoneError."""
        with pytest.raises(TimezoneError):
            zone_of("Mars/Olympus_Mons")

    def test_zone_id(self):
        """Test region keys and fixed-offset text."""
        assert zone_id(ZoneInfo("Asia/Kolkata")) == "Asia/Kolkata"
        assert zone_id(timezone(timedelta(hours=-5))) == "-05:00"

    def test_system_default_from_tz(self, monkeypatch):
        """Test the TZ environment variable wins."""
        monkeypatch.setenv("TZ", "Asia/Tokyo")
        assert system_default_zone() == ZoneInfo("Asia/Tokyo")

    def test_system_default_without_region(self, monkeypatch):
        """Test a non-region TZ still yields a usable zone."""
        monkeypatch.setenv("TZ", "Not/A_Zone")
        zone = system_default_zone()
        assert isinstance(zone, _dt.tzinfo)
        assert datetime.now(zone).utcoffset() is not None


# =============================================================================
# Conversion Tests
# =============================================================================


class TestZoneConversion:
    """Tests for moving values between zones."""

    def test_new_york_to_london(self):
        """Test the same instant seen in two zones."""
        nyc = at_zone(datetime(2017, 7, 4, 13, 20, 10), "America/New_York")
        assert nyc.utcoffset() == timedelta(hours=-4)
        london = with_zone_same_instant(nyc, "Europe/London")
        assert london.replace(tzinfo=None) == datetime(2017, 7, 4, 18, 20, 10)
        assert london.utcoffset() == timedelta(hours=1)
        assert london == nyc

    def test_same_local(self):
        """Test keeping the wall-clock time changes the instant."""
        nyc = at_zone(datetime(2017, 7, 4, 13, 20, 10), "America/New_York")
        london = with_zone_same_local(nyc, "Europe/London")
        assert london.hour == 13
        assert london != nyc

    def test_at_zone_rejects_aware(self):
        """Test at_zone expects a naive value."""
        with pytest.raises(TimezoneError):
            at_zone(datetime(2017, 1, 1, tzinfo=timezone.utc), "UTC")

    def test_same_instant_rejects_naive(self):
        """Test with_zone_same_instant expects an aware value."""
        with pytest.raises(TimezoneError):
            with_zone_same_instant(datetime(2017, 1, 1), "UTC")

    def test_offset_at(self):
        """Test offsets follow daylight-saving time."""
        summer = datetime(2017, 7, 4, tzinfo=timezone.utc)
        winter = datetime(2017, 1, 4, tzinfo=timezone.utc)
        assert offset_at("America/Chicago", summer) == timedelta(hours=-5)
        assert offset_at("America/Chicago", winter) == timedelta(hours=-6)


# =============================================================================
# Offset Tests
# =============================================================================


class TestOffsets:
    """Tests for building and formatting offsets."""

    def test_offset_of(self):
        """Test minutes take the sign of the hours."""
        assert offset_of(5, 45) == timedelta(hours=5, minutes=45)
        assert offset_of(-9, 30) == timedelta(hours=-9, minutes=-30)
        assert offset_of(0) == timedelta(0)

    @pytest.mark.parametrize("hours, minutes", [(19, 0), (-19, 0), (5, 60), (5, -1)])
    def test_offset_of_out_of_range(self, hours, minutes):
        """Test out-of-range components raise."""
        with pytest.raises(ValidationError):
            offset_of(hours, minutes)

    def test_format_offset(self):
        """Test offset text."""
        assert format_offset(timedelta(hours=5, minutes=45)) == "+05:45"
        assert format_offset(timedelta(hours=-9, minutes=-30)) == "-09:30"
        assert format_offset(timedelta(0)) == "+00:00"
        assert format_offset(timedelta(seconds=-(3600 + 61))) == "-01:01:01"


# =============================================================================
# Region Name Tests
# =============================================================================


class TestRegionNames:
    """Tests for finding regions by offset."""

    def test_gmt(self):
        """Test zero offset includes the UTC aliases."""
        names = region_names_for_hours_minutes(0, 0, WINTER)
        for name in ("GMT", "Etc/GMT", "Etc/UTC", "UTC", "Etc/Zulu"):
            assert name in names
        assert names == sorted(names)

    def test_nepal(self):
        """Test +05:45 finds both spellings of Kathmandu."""
        names = region_names_for_hours_minutes(5, 45, WINTER)
        assert "Asia/Kathmandu" in names
        assert "Asia/Katmandu" in names

    def test_chicago(self):
        """Test regions sharing Chicago's winter offset."""
        names = region_names_for_zone("America/Chicago", WINTER)
        assert "America/Chicago" in names
        assert "US/Central" in names
        assert "Canada/Central" in names
        assert "Etc/GMT+6" in names

    def test_zone_is_in_its_own_list(self):
        """Test a region always appears among regions with its offset."""
        names = region_names_for_zone("Europe/Paris", WINTER)
        assert "Europe/Paris" in names

    def test_offset_nobody_uses(self):
        """Test an unused offset finds nothing."""
        assert region_names_for_offset(timedelta(hours=17, minutes=17), WINTER) == []

    def test_zone_without_offset(self):
        """Test a zone that reports no offset raises TimezoneError."""
        with pytest.raises(TimezoneError, match="no UTC offset"):
            region_names_for_zone(_NoOffset(), WINTER)


class TestUnusualOffsets:
    """Tests for the unusual-offsets scan."""

    def test_rows(self):
        """Test rows have non-hour offsets and are sorted."""
        instant = datetime(2017, 1, 15, 12, 0, tzinfo=timezone.utc)
        rows = unusual_offsets(instant)
        assert rows
        assert all(int(row.offset.total_seconds()) % 3600 != 0 for row in rows)
        keys = [(row.offset, row.zone_id) for row in rows]
        assert keys == sorted(keys)
        by_id = {row.zone_id: row for row in rows}
        assert by_id["Asia/Kathmandu"].offset == timedelta(hours=5, minutes=45)
        assert by_id["Asia/Kolkata"].local == instant
        assert "Europe/London" not in by_id

    def test_rejects_naive(self):
        """Test a naive instant is rejected."""
        with pytest.raises(TimezoneError):
            unusual_offsets(datetime(2017, 1, 1))
