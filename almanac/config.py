"""Runtime settings for Almanac.

Settings come from environment variables; the console program can
override each of them with a flag.

Environment:
    ALMANAC_WORKERS: worker count for thread and process pools
        (default: the CPU count)
    ALMANAC_LOG_LEVEL: logging level name (default: WARNING)
    ALMANAC_LOCALE: locale tag for localized output (default: en_US)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from almanac.errors import ValidationError

ENV_WORKERS = "ALMANAC_WORKERS"
ENV_LOG_LEVEL = "ALMANAC_LOG_LEVEL"
ENV_LOCALE = "ALMANAC_LOCALE"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOCALE = "en_US"


def default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class Settings:
    """Worker count, log level and locale used by the examples."""

    workers: int = field(default_factory=default_workers)
    log_level: str = DEFAULT_LOG_LEVEL
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValidationError(f"workers must be at least 1, got {self.workers}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValidationError(f"unknown log level: {self.log_level!r}")

    @property
    def level(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from ``environ`` (default: ``os.environ``).

        Raises:
            ValidationError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        workers_text = environ.get(ENV_WORKERS)
        if workers_text:
            try:
                workers = int(workers_text)
            except ValueError as exc:
                raise ValidationError(
                    f"{ENV_WORKERS} must be an integer, got {workers_text!r}"
                ) from exc
        else:
            workers = default_workers()

        return cls(
            workers=workers,
            log_level=environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
            locale=environ.get(ENV_LOCALE) or DEFAULT_LOCALE,
        )

    def override(self, **changes: object) -> Settings:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


__all__ = [
    "Settings",
    "default_workers",
    "ENV_WORKERS",
    "ENV_LOG_LEVEL",
    "ENV_LOCALE",
]
