"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def settings():
    """Settings with fixed values, independent of the environment."""
    from almanac.config import Settings

    return Settings(workers=2, log_level="WARNING", locale="en_US")
