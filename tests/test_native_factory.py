"""Tests for native locator selection."""

from __future__ import annotations

import pytest

from sunshine.errors import NativeLocationUnavailableError
from sunshine.locate import factory
from sunshine.locate.factory import create_native_locator, resolve_native_mode
from sunshine.locate.native import CoreLocationLocator, UnavailableNativeLocator


def test_unavailable_locator_fails_immediately() -> None:
    """The stub always raises the unavailable error."""
    with pytest.raises(NativeLocationUnavailableError):
        UnavailableNativeLocator().locate()


def test_auto_mode_off_macos_selects_stub() -> None:
    """Non-macOS platforms never get the CoreLocation implementation."""
    assert isinstance(create_native_locator("auto", platform="linux"), UnavailableNativeLocator)


def test_auto_mode_on_macos_without_bindings_selects_stub(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing pyobjc bindings fall back to the stub."""
    monkeypatch.setattr(factory, "_corelocation_importable", lambda: False)

    assert isinstance(create_native_locator("auto", platform="darwin"), UnavailableNativeLocator)


def test_auto_mode_on_macos_with_bindings_selects_corelocation(monkeypatch: pytest.MonkeyPatch) -> None:
    """macOS with bindings uses CoreLocation."""
    monkeypatch.setattr(factory, "_corelocation_importable", lambda: True)

    assert isinstance(create_native_locator("auto", platform="darwin"), CoreLocationLocator)


def test_explicit_modes() -> None:
    """`none` and `corelocation` bypass platform detection."""
    assert isinstance(create_native_locator("none", platform="darwin"), UnavailableNativeLocator)
    assert isinstance(create_native_locator(" CoreLocation ", platform="linux"), CoreLocationLocator)


def test_unknown_mode_is_rejected() -> None:
    """Mode validation happens before any locator is built."""
    with pytest.raises(ValueError, match="native locator mode"):
        resolve_native_mode("gps")
