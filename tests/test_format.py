"""Tests for ISO, pattern and localized formatting."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

import pytest

from almanac import ParseError
from almanac.format import (
    FormatStyle,
    Pattern,
    available_locales,
    format_instant,
    format_local_date,
    format_local_date_time,
    format_local_time,
    format_localized_date,
    format_localized_date_time,
    format_localized_time,
    format_offset_date_time,
    format_pattern,
    format_zoned_date_time,
    of_pattern,
    parse_local_date_time,
)

MOON_LANDING = datetime(1969, 7, 20, 20, 18, tzinfo=ZoneInfo("UTC"))
ELECTION_EVE = date(2017, 3, 13)


class _NoOffset(tzinfo):
    def utcoffset(self, dt):
        return None

    def dst(self, dt):
        return None

    def tzname(self, dt):
        return None


# =============================================================================
# ISO 8601 Tests
# =============================================================================


class TestIsoFormat:
    """Tests for ISO 8601 output."""

    def test_local_date(self):
        """Test dates are zero padded."""
        assert format_local_date(date(2017, 2, 5)) == "2017-02-05"

    def test_local_time_fraction(self):
        """Test fractions drop trailing zeros and seconds always print."""
        assert format_local_time(time(11, 30)) == "11:30:00"
        assert format_local_time(time(11, 30, 0, 1000)) == "11:30:00.001"
        assert format_local_time(time(20, 2, 56, 150_000)) == "20:02:56.15"

    def test_local_date_time(self):
        """Test the date-time separator."""
        assert format_local_date_time(datetime(2019, 5, 6, 11, 30)) == "2019-05-06T11:30:00"

    def test_zoned_moon_landing(self):
        """Test a region zone prints Z and the id."""
        assert format_zoned_date_time(MOON_LANDING) == "1969-07-20T20:18:00Z[UTC]"

    def test_zoned_with_offset(self):
        """Test a non-zero offset and region id."""
        nyc = datetime(2017, 7, 4, 13, 20, 10, tzinfo=ZoneInfo("America/New_York"))
        assert format_zoned_date_time(nyc) == "2017-07-04T13:20:10-04:00[America/New_York]"

    def test_fixed_offset_has_no_id(self):
        """Test fixed offsets print no bracketed id."""
        value = datetime(2017, 7, 4, 13, 20, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert format_zoned_date_time(value) == "2017-07-04T13:20:00+05:30"
        assert format_offset_date_time(value) == "2017-07-04T13:20:00+05:30"

    def test_instant(self):
        """Test instants are converted to UTC."""
        value = datetime(2017, 7, 4, 13, 20, tzinfo=ZoneInfo("America/New_York"))
        assert format_instant(value) == "2017-07-04T17:20:00Z"

    def test_naive_rejected(self):
        """Test offset output needs an aware value."""
        with pytest.raises(ValueError):
            format_offset_date_time(datetime(2017, 1, 1))
        with pytest.raises(ValueError):
            format_instant(datetime(2017, 1, 1))


class TestIsoParse:
    """Tests for parse_local_date_time."""

    def test_parse(self):
        """Test a basic local date-time."""
        assert parse_local_date_time("2017-02-02T11:30:00") == datetime(2017, 2, 2, 11, 30)

    def test_parse_round_trip(self):
        """Test parsing the formatted text of a value."""
        value = datetime(1969, 7, 20, 20, 2, 56, 150_000)
        assert parse_local_date_time(format_local_date_time(value)) == value

    @pytest.mark.parametrize(
        "text", ["2017-02-02", "not a date", "2017-02-30T11:30:00", "2017-02-02T11:30:00+01:00"]
    )
    def test_parse_invalid(self, text):
        """Test invalid text raises ParseError."""
        with pytest.raises(ParseError):
            parse_local_date_time(text)


# =============================================================================
# Pattern Tests
# =============================================================================


class TestPattern:
    """Tests for pattern formatting."""

    def test_moon_landing_zone_name(self):
        """Test the zone-name and era pattern."""
        result = format_pattern(MOON_LANDING, "uuuu/MMMM/dd hh:mm:ss a zzz GG")
        assert result == "1969/July/20 08:18:00 PM UTC AD"

    def test_moon_landing_zone_id(self):
        """Test the zone-id and offset pattern."""
        result = format_pattern(MOON_LANDING, "uuuu/MMMM/dd hh:mm:ss a VV xxxxx")
        assert result == "1969/July/20 08:18:00 PM UTC +00:00"

    def test_date_pattern(self):
        """Test a numeric date pattern."""
        assert format_pattern(date(2017, 2, 5), "yyyy-MM-dd") == "2017-02-05"
        assert format_pattern(date(2017, 2, 5), "d/M/yy") == "5/2/17"

    def test_text_fields(self):
        """Test month and weekday text widths."""
        value = date(2017, 3, 13)
        assert format_pattern(value, "EEE MMM") == "Mon Mar"
        assert format_pattern(value, "EEEE MMMM") == "Monday March"
        assert format_pattern(value, "D e") == "72 1"

    def test_hours(self):
        """Test the four hour letters."""
        value = datetime(2017, 1, 1, 0, 5)
        assert format_pattern(value, "H h K k") == "0 12 0 24"

    def test_fraction(self):
        """Test S and n."""
        value = datetime(2017, 1, 1, 0, 0, 0, 123_456)
        assert format_pattern(value, "SSS") == "123"
        assert format_pattern(value, "n") == "123456000"

    def test_quoted_literals(self):
        """Test quoted text and doubled quotes."""
        value = datetime(2017, 1, 1, 9, 5)
        assert format_pattern(value, "HH 'o''clock' mm") == "09 o'clock 05"
        assert format_pattern(value, "''HH''") == "'09'"

    def test_quoted_quote(self):
        """Test a quoted literal holding one escaped quote."""
        assert format_pattern(date(2017, 1, 1), "''''") == "'"
        assert format_pattern(date(2017, 1, 1), "'''' yyyy") == "' 2017"

    def test_offset_letters(self):
        """Test the offset letters for a non-zero offset."""
        value = datetime(2017, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=45)))
        assert format_pattern(value, "x") == "+0545"
        assert format_pattern(value, "xx") == "+0545"
        assert format_pattern(value, "xxx") == "+05:45"
        assert format_pattern(value, "Z") == "+0545"
        assert format_pattern(value, "ZZZZ") == "GMT+05:45"

    def test_zero_offset_letters(self):
        """Test X prints Z for zero and x does not."""
        assert format_pattern(MOON_LANDING, "X") == "Z"
        assert format_pattern(MOON_LANDING, "x") == "+00"
        assert format_pattern(MOON_LANDING, "ZZZZZ") == "Z"

    def test_unknown_letter(self):
        """Test reserved letters raise ValueError."""
        with pytest.raises(ValueError, match="Unknown pattern letter: b"):
            Pattern("yyyy bb")

    def test_unterminated_literal(self):
        """Test an open quote raises ValueError."""
        with pytest.raises(ValueError):
            Pattern("yyyy 'oops")

    def test_missing_field(self):
        """Test a time letter on a date raises ValueError."""
        with pytest.raises(ValueError):
            format_pattern(date(2017, 1, 1), "HH:mm")
        with pytest.raises(ValueError):
            format_pattern(datetime(2017, 1, 1), "VV")

    def test_zone_without_offset(self):
        """Test offset letters raise when the zone gives no offset."""
        value = datetime(2017, 1, 1, tzinfo=_NoOffset())
        with pytest.raises(ValueError, match="resolvable offset"):
            format_pattern(value, "xxx")

    def test_vv_count(self):
        """Test V must appear twice."""
        with pytest.raises(ValueError):
            format_pattern(MOON_LANDING, "V")

    def test_pattern_object(self):
        """Test the compiled pattern API."""
        p = of_pattern("EEEE d MMMM y", "fr_FR")
        assert p.pattern == "EEEE d MMMM y"
        assert p.locale == "fr_FR"
        assert p.format(ELECTION_EVE) == "lundi 13 mars 2017"
        assert p.with_locale(None).format(ELECTION_EVE) == "Monday 13 March 2017"


# =============================================================================
# Localized Tests
# =============================================================================


class TestLocalized:
    """Tests for localized styles."""

    @pytest.mark.parametrize(
        "style, expected",
        [
            (FormatStyle.FULL, "Monday, March 13, 2017"),
            (FormatStyle.LONG, "March 13, 2017"),
            (FormatStyle.MEDIUM, "Mar 13, 2017"),
            (FormatStyle.SHORT, "3/13/17"),
        ],
    )
    def test_en_us(self, style, expected):
        """Test the four US English styles."""
        assert format_localized_date(ELECTION_EVE, style) == expected

    @pytest.mark.parametrize(
        "locale, expected",
        [
            ("fr_FR", "lundi 13 mars 2017"),
            ("sr_Latn_RS", "ponedeljak, 13. mart 2017."),
            ("pt_BR", "segunda-feira, 13 de março de 2017"),
            ("ja_JP", "2017年3月13日月曜日"),
        ],
    )
    def test_full_other_locales(self, locale, expected):
        """Test FULL dates in the bundled locales."""
        assert format_localized_date(ELECTION_EVE, FormatStyle.FULL, locale) == expected

    def test_unknown_locale_falls_back(self):
        """Test an unsupported locale formats as US English."""
        result = format_localized_date(ELECTION_EVE, FormatStyle.FULL, "hin_IN")
        assert result == "Monday, March 13, 2017"

    def test_tag_normalization(self):
        """Test dashes and case in locale tags."""
        assert format_localized_date(ELECTION_EVE, FormatStyle.SHORT, "fr-fr") == "13/03/2017"

    def test_short_time(self):
        """Test SHORT times."""
        value = time(17, 42)
        assert format_localized_time(value, FormatStyle.SHORT) == "5:42 PM"
        assert format_localized_time(value, FormatStyle.SHORT, "fr_FR") == "17:42"

    def test_full_time_needs_zone(self):
        """Test FULL times include the zone id."""
        value = datetime(2017, 3, 13, 17, 42, tzinfo=ZoneInfo("Europe/Paris"))
        assert format_localized_time(value, FormatStyle.FULL) == "5:42:00 PM Europe/Paris"
        with pytest.raises(ValueError):
            format_localized_time(time(17, 42), FormatStyle.FULL)

    def test_date_time(self):
        """Test a combined date and time."""
        value = datetime(2017, 3, 13, 17, 42)
        result = format_localized_date_time(value, FormatStyle.MEDIUM)
        assert result == "Mar 13, 2017, 5:42:00 PM"

    def test_available_locales(self):
        """Test the bundled locale tags."""
        assert available_locales() == ["en_US", "fr_FR", "ja_JP", "pt_BR", "sr_Latn_RS"]
