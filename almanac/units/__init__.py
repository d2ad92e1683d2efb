"""Temporal units and fields for Almanac."""

from __future__ import annotations

from almanac.units.chronofield import ChronoField
from almanac.units.chronounit import ChronoUnit
from almanac.units.month import Month

__all__: list[str] = ["ChronoField", "ChronoUnit", "Month"]
