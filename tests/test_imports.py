"""Tests for Almanac package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_almanac() -> None:
    """Import almanac package succeeds."""
    import almanac

    assert hasattr(almanac, "__version__")
    assert almanac.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import almanac.core submodule succeeds."""
    from almanac import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import almanac.units submodule succeeds."""
    from almanac import units

    assert hasattr(units, "__all__")


def test_import_arithmetic_module() -> None:
    """Import almanac.arithmetic submodule succeeds."""
    from almanac import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_zones_module() -> None:
    """Import almanac.zones submodule succeeds."""
    from almanac import zones

    assert hasattr(zones, "__all__")


def test_import_format_module() -> None:
    """Import almanac.format submodule succeeds."""
    from almanac import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import almanac.convert submodule succeeds."""
    from almanac import convert

    assert hasattr(convert, "__all__")


def test_import_concurrency_module() -> None:
    """Import almanac.concurrency submodule succeeds."""
    from almanac import concurrency

    assert hasattr(concurrency, "__all__")


def test_import_internal_module() -> None:
    """Import almanac._internal submodule succeeds."""
    from almanac import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """All exceptions derive from AlmanacError."""
    from almanac import (
        AlmanacError,
        ParseError,
        ProductLookupError,
        TimezoneError,
        ValidationError,
    )

    for exc in (ParseError, ProductLookupError, TimezoneError, ValidationError):
        assert issubclass(exc, AlmanacError)


def test_public_names_resolve() -> None:
    """Every name in a subpackage __all__ is an attribute of it."""
    import importlib

    for name in ("core", "units", "arithmetic", "zones", "format", "convert", "concurrency"):
        module = importlib.import_module(f"almanac.{name}")
        for attr in module.__all__:
            assert hasattr(module, attr), f"almanac.{name}.{attr}"
