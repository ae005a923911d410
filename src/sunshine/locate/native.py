"""Native platform location service.

Only macOS has one (CoreLocation, through the optional
``pyobjc-framework-CoreLocation`` binding). Every other platform gets
:class:`UnavailableNativeLocator`, which fails immediately.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from sunshine.contracts import Coordinate
from sunshine.errors import NativeLocationError, NativeLocationUnavailableError
from sunshine.locate.interfaces import NativeLocator

logger = logging.getLogger(__name__)


class CoreLocationUnavailable(RuntimeError):
    pass


def import_corelocation() -> tuple[Any, Any]:
    """Import the CoreLocation and Foundation bindings."""
    try:
        import CoreLocation  # type: ignore
        import Foundation  # type: ignore
    except ImportError as exc:  # pragma: no cover
        raise CoreLocationUnavailable(
            "pyobjc CoreLocation bindings are not installed. "
            "Install with: pip install -e '.[corelocation]'"
        ) from exc
    return CoreLocation, Foundation


class UnavailableNativeLocator(NativeLocator):
    """Stand-in for platforms without a native location service."""

    def locate(self) -> Coordinate:
        raise NativeLocationUnavailableError()


class CoreLocationLocator(NativeLocator):
    """Query CoreLocation, pumping the run loop until a fix arrives or the wait expires."""

    def __init__(self, max_wait_sec: float = 10.0, poll_sec: float = 0.1) -> None:
        self._max_wait_sec = max_wait_sec
        self._poll_sec = poll_sec

    def locate(self) -> Coordinate:  # pragma: no cover - requires macOS
        try:
            core_location, foundation = import_corelocation()
        except CoreLocationUnavailable as exc:
            raise NativeLocationError(str(exc)) from exc

        manager_cls = core_location.CLLocationManager
        if not manager_cls.locationServicesEnabled():
            raise NativeLocationError("location services are disabled")

        manager = manager_cls.alloc().init()
        try:
            manager.startUpdatingLocation()
            location = manager.location()
            deadline = time.monotonic() + self._max_wait_sec
            while location is None and time.monotonic() < deadline:
                until = foundation.NSDate.dateWithTimeIntervalSinceNow_(self._poll_sec)
                foundation.NSRunLoop.currentRunLoop().runUntilDate_(until)
                location = manager.location()
        except Exception as exc:
            raise NativeLocationError(str(exc)) from exc
        finally:
            manager.stopUpdatingLocation()

        if location is None:
            raise NativeLocationError(f"no location fix within {self._max_wait_sec:g}s")

        coordinate = location.coordinate()
        logger.debug("CoreLocation fix: %s, %s", coordinate.latitude, coordinate.longitude)
        return Coordinate(latitude=float(coordinate.latitude), longitude=float(coordinate.longitude))
