"""Core value types for Almanac."""

from __future__ import annotations

from almanac.core.period import Period

__all__: list[str] = ["Period"]
