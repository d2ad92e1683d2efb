"""Tests for Settings."""

from __future__ import annotations

import logging
import os

import pytest

from almanac import Settings, ValidationError


class TestSettings:
    """Tests for loading and overriding settings."""

    def test_defaults(self):
        """Test an empty environment gives the defaults."""
        settings = Settings.from_env({})
        assert settings.workers == (os.cpu_count() or 1)
        assert settings.log_level == "WARNING"
        assert settings.level == logging.WARNING
        assert settings.locale == "en_US"

    def test_from_env(self):
        """Test every variable is read."""
        settings = Settings.from_env(
            {"ALMANAC_WORKERS": "3", "ALMANAC_LOG_LEVEL": "debug", "ALMANAC_LOCALE": "fr_FR"}
        )
        assert settings.workers == 3
        assert settings.level == logging.DEBUG
        assert settings.locale == "fr_FR"

    def test_reads_os_environ(self, monkeypatch):
        """Test os.environ is the default source."""
        monkeypatch.setenv("ALMANAC_WORKERS", "5")
        assert Settings.from_env().workers == 5

    @pytest.mark.parametrize(
        "environ",
        [
            {"ALMANAC_WORKERS": "many"},
            {"ALMANAC_WORKERS": "0"},
            {"ALMANAC_LOG_LEVEL": "LOUD"},
        ],
    )
    def test_invalid(self, environ):
        """Test invalid values raise ValidationError."""
        with pytest.raises(ValidationError):
            Settings.from_env(environ)

    def test_override(self):
        """Test None leaves a value unchanged."""
        base = Settings(workers=2)
        changed = base.override(workers=None, locale="ja_JP")
        assert changed.workers == 2
        assert changed.locale == "ja_JP"
        with pytest.raises(ValidationError):
            base.override(workers=-1)
