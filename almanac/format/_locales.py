"""Locale data for pattern and localized formatting.

Names and patterns follow the CLDR data for each locale. Unknown
locales resolve to en_US.

This module is not part of the public API.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocaleData:
    """Names and style patterns for one locale."""

    tag: str
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays: tuple[str, ...]  # Monday first
    weekdays_short: tuple[str, ...]
    am_pm: tuple[str, str] = ("AM", "PM")
    date_patterns: dict[str, str] = field(default_factory=dict)
    time_patterns: dict[str, str] = field(default_factory=dict)
    date_time_separator: str = " "


DEFAULT_LOCALE = "en_US"

_LOCALES: dict[str, LocaleData] = {
    "en_US": LocaleData(
        tag="en_US",
        months=(
            "January", "February", "March", "April", "May", "June", "July",
            "August", "September", "October", "November", "December",
        ),
        months_short=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        weekdays=(
            "Monday", "Tuesday", "Wednesday", "Thursday",
            "Friday", "Saturday", "Sunday",
        ),
        weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
        date_patterns={
            "FULL": "EEEE, MMMM d, y",
            "LONG": "MMMM d, y",
            "MEDIUM": "MMM d, y",
            "SHORT": "M/d/yy",
        },
        time_patterns={
            "FULL": "h:mm:ss a zzzz",
            "LONG": "h:mm:ss a z",
            "MEDIUM": "h:mm:ss a",
            "SHORT": "h:mm a",
        },
        date_time_separator=", ",
    ),
    "fr_FR": LocaleData(
        tag="fr_FR",
        months=(
            "janvier", "février", "mars", "avril", "mai", "juin", "juillet",
            "août", "septembre", "octobre", "novembre", "décembre",
        ),
        months_short=(
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ),
        weekdays=(
            "lundi", "mardi", "mercredi", "jeudi",
            "vendredi", "samedi", "dimanche",
        ),
        weekdays_short=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
        date_patterns={
            "FULL": "EEEE d MMMM y",
            "LONG": "d MMMM y",
            "MEDIUM": "d MMM y",
            "SHORT": "dd/MM/y",
        },
        time_patterns={
            "FULL": "HH:mm:ss zzzz",
            "LONG": "HH:mm:ss z",
            "MEDIUM": "HH:mm:ss",
            "SHORT": "HH:mm",
        },
    ),
    "pt_BR": LocaleData(
        tag="pt_BR",
        months=(
            "janeiro", "fevereiro", "março", "abril", "maio", "junho", "julho",
            "agosto", "setembro", "outubro", "novembro", "dezembro",
        ),
        months_short=(
            "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
            "jul.", "ago.", "set.", "out.", "nov.", "dez.",
        ),
        weekdays=(
            "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
            "sexta-feira", "sábado", "domingo",
        ),
        weekdays_short=("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom."),
        date_patterns={
            "FULL": "EEEE, d 'de' MMMM 'de' y",
            "LONG": "d 'de' MMMM 'de' y",
            "MEDIUM": "d 'de' MMM 'de' y",
            "SHORT": "dd/MM/y",
        },
        time_patterns={
            "FULL": "HH:mm:ss zzzz",
            "LONG": "HH:mm:ss z",
            "MEDIUM": "HH:mm:ss",
            "SHORT": "HH:mm",
        },
    ),
    "ja_JP": LocaleData(
        tag="ja_JP",
        months=tuple(f"{n}月" for n in range(1, 13)),
        months_short=tuple(f"{n}月" for n in range(1, 13)),
        weekdays=("月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日"),
        weekdays_short=("月", "火", "水", "木", "金", "土", "日"),
        am_pm=("午前", "午後"),
        date_patterns={
            "FULL": "y年M月d日EEEE",
            "LONG": "y年M月d日",
            "MEDIUM": "y/MM/dd",
            "SHORT": "y/MM/dd",
        },
        time_patterns={
            "FULL": "H時mm分ss秒 zzzz",
            "LONG": "H:mm:ss z",
            "MEDIUM": "H:mm:ss",
            "SHORT": "H:mm",
        },
    ),
    "sr_Latn_RS": LocaleData(
        tag="sr_Latn_RS",
        months=(
            "januar", "februar", "mart", "april", "maj", "jun", "jul",
            "avgust", "septembar", "oktobar", "novembar", "decembar",
        ),
        months_short=(
            "jan", "feb", "mar", "apr", "maj", "jun",
            "jul", "avg", "sep", "okt", "nov", "dec",
        ),
        weekdays=(
            "ponedeljak", "utorak", "sreda", "četvrtak",
            "petak", "subota", "nedelja",
        ),
        weekdays_short=("pon", "uto", "sre", "čet", "pet", "sub", "ned"),
        date_patterns={
            "FULL": "EEEE, d. MMMM y.",
            "LONG": "d. MMMM y.",
            "MEDIUM": "d. M. y.",
            "SHORT": "d.M.yy.",
        },
        time_patterns={
            "FULL": "HH:mm:ss zzzz",
            "LONG": "HH:mm:ss z",
            "MEDIUM": "HH:mm:ss",
            "SHORT": "HH:mm",
        },
        date_time_separator=", ",
    ),
}


def normalize_tag(tag: str) -> str:
    """Normalize a locale tag: "pt-br" -> "pt_BR", "sr-latn-rs" -> "sr_Latn_RS"."""
    parts = tag.replace("-", "_").split("_")
    result = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4:
            result.append(part.title())
        else:
            result.append(part.upper())
    return "_".join(result)


def get_locale(tag: str | None) -> LocaleData:
    """Return locale data for ``tag``, falling back to en_US."""
    if not tag:
        return _LOCALES[DEFAULT_LOCALE]
    return _LOCALES.get(normalize_tag(tag), _LOCALES[DEFAULT_LOCALE])


def available_locales() -> list[str]:
    """Return the tags with bundled data."""
    return sorted(_LOCALES)


__all__ = [
    "LocaleData",
    "DEFAULT_LOCALE",
    "normalize_tag",
    "get_locale",
    "available_locales",
]
