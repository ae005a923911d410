"""Locator interfaces used by the resolution chain."""

from __future__ import annotations

from typing import Protocol

from sunshine.contracts import Coordinate


class Locator(Protocol):
    """Interface for strategies that find the current machine's location without input."""

    def locate(self) -> Coordinate:
        """Return the current location or raise a SunshineError."""


class NativeLocator(Locator, Protocol):
    """Platform location service. Implementations raise NativeLocation* errors."""


class Geocoder(Protocol):
    """Interface for free-text place name lookup."""

    def geocode(self, name: str) -> Coordinate:
        """Return the coordinate for a place name or raise a SunshineError."""
