"""Pattern-letter formatting for dates, times and date-times.

A pattern is a string of letters where each run of the same letter
prints one field; the run length selects the width or text form.

Supported Letters:
    G - era (AD)                     u, y - year (yy is two digits)
    M, L - month (M, MM, MMM, MMMM)  d - day of month
    D - day of year                  E - day of week (EEE, EEEE)
    e - ISO day of week number       a - AM/PM marker
    h - hour 1-12                    K - hour 0-11
    k - hour 1-24                    H - hour 0-23
    m - minute                       s - second
    S - fraction of second           n - nano of second
    V - zone id (VV)                 z - zone name
    x, X, Z - zone offset

Text in single quotes is copied literally and ``''`` prints one quote.
Any other ASCII letter is reserved and rejected.

Examples:
    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> moon = datetime(1969, 7, 20, 20, 18, tzinfo=ZoneInfo("UTC"))
    >>> format_pattern(moon, "uuuu/MMMM/dd hh:mm:ss a zzz GG")
    '1969/July/20 08:18:00 PM UTC AD'
    >>> format_pattern(moon, "uuuu/MMMM/dd hh:mm:ss a VV xxxxx")
    '1969/July/20 08:18:00 PM UTC +00:00'
"""

from __future__ import annotations

import datetime as _dt
from typing import Union

from almanac.format._locales import LocaleData, get_locale

TemporalType = Union[_dt.date, _dt.time, _dt.datetime]

_DATE_LETTERS = frozenset("GuyMLdDEe")
_TIME_LETTERS = frozenset("ahKkHmsSn")
_ZONE_LETTERS = frozenset("VzxXZ")
_SUPPORTED = _DATE_LETTERS | _TIME_LETTERS | _ZONE_LETTERS


def _tokenize(pattern: str) -> list[tuple[str, object]]:
    """Split a pattern into ("field", (letter, count)) and ("text", str) tokens.

    Raises:
        ValueError: On reserved letters or an unterminated quote.
    """
    tokens: list[tuple[str, object]] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "'":
            end = i + 1
            literal = []
            while True:
                if end >= len(pattern):
                    raise ValueError(f"Pattern ends with an incomplete string literal: {pattern!r}")
                if pattern[end] == "'":
                    if end + 1 < len(pattern) and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            # '' outside a literal is a single quote
            tokens.append(("text", "".join(literal) if end > i + 1 else "'"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            count = 1
            while i + count < len(pattern) and pattern[i + count] == ch:
                count += 1
            if ch not in _SUPPORTED:
                raise ValueError(f"Unknown pattern letter: {ch}")
            tokens.append(("field", (ch, count)))
            i += count
        else:
            tokens.append(("text", ch))
            i += 1
    return tokens


class Pattern:
    """A compiled formatting pattern bound to a locale.

    Examples:
        >>> from datetime import date
        >>> Pattern("yyyy-MM-dd").format(date(2017, 2, 5))
        '2017-02-05'
        >>> Pattern("EEEE d MMMM y", "fr_FR").format(date(2017, 3, 13))
        'lundi 13 mars 2017'
    """

    __slots__ = ("_pattern", "_tokens", "_locale")

    def __init__(self, pattern: str, locale: str | None = None) -> None:
        """Compile ``pattern``.

        Raises:
            ValueError: If the pattern uses a reserved letter.
        """
        self._pattern = pattern
        self._tokens = _tokenize(pattern)
        self._locale: LocaleData = get_locale(locale)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def locale(self) -> str:
        return self._locale.tag

    def with_locale(self, locale: str | None) -> Pattern:
        """Return the same pattern bound to another locale."""
        return Pattern(self._pattern, locale)

    def format(self, value: TemporalType) -> str:
        """Format ``value`` with this pattern.

        Raises:
            ValueError: If the pattern needs a field the value lacks.
        """
        out = []
        for kind, payload in self._tokens:
            if kind == "text":
                out.append(payload)
            else:
                letter, count = payload  # type: ignore[misc]
                out.append(_format_field(value, letter, count, self._locale))
        return "".join(out)

    def __repr__(self) -> str:
        return f"Pattern({self._pattern!r}, {self._locale.tag!r})"


def of_pattern(pattern: str, locale: str | None = None) -> Pattern:
    """Compile a pattern; shorthand for ``Pattern(pattern, locale)``."""
    return Pattern(pattern, locale)


def format_pattern(value: TemporalType, pattern: str, locale: str | None = None) -> str:
    """Format ``value`` with a one-off pattern."""
    return Pattern(pattern, locale).format(value)


def _pad(number: int, count: int) -> str:
    return f"{number:0{count}d}"


def _require(value: TemporalType, letter: str) -> None:
    if letter in _DATE_LETTERS and not isinstance(value, _dt.date):
        raise ValueError(f"pattern letter {letter} requires a date, got {type(value).__name__}")
    if letter in _TIME_LETTERS and not isinstance(value, (_dt.time, _dt.datetime)):
        raise ValueError(f"pattern letter {letter} requires a time, got {type(value).__name__}")
    if letter in _ZONE_LETTERS and getattr(value, "tzinfo", None) is None:
        raise ValueError(f"pattern letter {letter} requires a zone, got a naive {type(value).__name__}")


def _format_field(value: TemporalType, letter: str, count: int, locale: LocaleData) -> str:
    _require(value, letter)

    if letter == "G":
        if count == 4:
            return "Anno Domini"
        if count == 5:
            return "A"
        return "AD"

    if letter in "uy":
        year = value.year  # type: ignore[union-attr]
        if count == 2:
            return _pad(year % 100, 2)
        return _pad(year, count)

    if letter in "ML":
        month = value.month  # type: ignore[union-attr]
        if count <= 2:
            return _pad(month, count)
        if count == 3:
            return locale.months_short[month - 1]
        if count == 4:
            return locale.months[month - 1]
        return locale.months[month - 1][0]

    if letter == "d":
        return _pad(value.day, count)  # type: ignore[union-attr]

    if letter == "D":
        return _pad(value.timetuple().tm_yday, count)  # type: ignore[union-attr]

    if letter in "Ee":
        weekday = value.isoweekday()  # type: ignore[union-attr]
        if letter == "e" and count <= 2:
            return _pad(weekday, count)
        if count <= 3:
            return locale.weekdays_short[weekday - 1]
        if count == 4:
            return locale.weekdays[weekday - 1]
        return locale.weekdays[weekday - 1][0]

    if letter == "a":
        return locale.am_pm[0 if value.hour < 12 else 1]  # type: ignore[union-attr]

    if letter == "h":
        return _pad(value.hour % 12 or 12, count)  # type: ignore[union-attr]
    if letter == "K":
        return _pad(value.hour % 12, count)  # type: ignore[union-attr]
    if letter == "k":
        return _pad(value.hour or 24, count)  # type: ignore[union-attr]
    if letter == "H":
        return _pad(value.hour, count)  # type: ignore[union-attr]
    if letter == "m":
        return _pad(value.minute, count)  # type: ignore[union-attr]
    if letter == "s":
        return _pad(value.second, count)  # type: ignore[union-attr]

    if letter == "S":
        nanos = f"{value.microsecond * 1000:09d}"  # type: ignore[union-attr]
        return nanos[:count] if count <= 9 else nanos + "0" * (count - 9)
    if letter == "n":
        return _pad(value.microsecond * 1000, count)  # type: ignore[union-attr]

    return _format_zone(value, letter, count)


def _format_zone(value: TemporalType, letter: str, count: int) -> str:
    from almanac.zones.regions import zone_id

    tzinfo = value.tzinfo
    offset = value.utcoffset()
    if tzinfo is None or offset is None:
        raise ValueError(f"pattern letter {letter} requires a resolvable offset")

    if letter == "V":
        if count != 2:
            raise ValueError("Pattern letter count must be 2: V")
        return zone_id(tzinfo)

    if letter == "z":
        if count == 4:
            return zone_id(tzinfo)
        name = value.tzname()
        return name if name else zone_id(tzinfo)

    total = int(offset.total_seconds())
    if letter == "X" and total == 0:
        return "Z"
    if letter == "x" or letter == "X":
        if count > 5:
            raise ValueError(f"Too many pattern letters: {letter}")
        return _offset_text(total, count)

    # Z
    if count <= 3:
        return _offset_text(total, 2)
    if count == 4:
        return "GMT" if total == 0 else "GMT" + _offset_text(total, 3)
    if count == 5:
        return "Z" if total == 0 else _offset_text(total, 5)
    raise ValueError("Too many pattern letters: Z")


def _offset_text(total: int, count: int) -> str:
    """Render an offset in one of the five x/X widths.

    1: +HH[MM]  2: +HHMM  3: +HH:MM  4: +HHMM[SS]  5: +HH:MM[:SS]
    """
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    if count == 1:
        return f"{sign}{hours:02d}" + (f"{minutes:02d}" if minutes else "")
    if count == 2:
        return f"{sign}{hours:02d}{minutes:02d}"
    if count == 3:
        return f"{sign}{hours:02d}:{minutes:02d}"
    if count == 4:
        return f"{sign}{hours:02d}{minutes:02d}" + (f"{seconds:02d}" if seconds else "")
    return f"{sign}{hours:02d}:{minutes:02d}" + (f":{seconds:02d}" if seconds else "")


__all__ = ["Pattern", "of_pattern", "format_pattern"]
