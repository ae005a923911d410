"""Native locator factory with lazy CoreLocation imports."""

from __future__ import annotations

import logging
import sys

from sunshine.locate.interfaces import NativeLocator
from sunshine.locate.native import (
    CoreLocationLocator,
    CoreLocationUnavailable,
    UnavailableNativeLocator,
    import_corelocation,
)

logger = logging.getLogger(__name__)

NATIVE_MODES = ("auto", "corelocation", "none")


def resolve_native_mode(mode: str) -> str:
    """Normalize and validate a native locator mode."""
    resolved = mode.strip().lower()
    if resolved not in NATIVE_MODES:
        raise ValueError(f"native locator mode must be one of: {', '.join(NATIVE_MODES)}")
    return resolved


def _corelocation_importable() -> bool:
    try:
        import_corelocation()
    except CoreLocationUnavailable:
        return False
    return True


def create_native_locator(mode: str = "auto", platform: str | None = None) -> NativeLocator:
    """Create the native locator for the selected mode.

    ``auto`` picks CoreLocation on macOS when its bindings import, otherwise the
    unavailable stub. ``corelocation`` forces the real implementation, which then
    reports a NativeLocationError if the bindings are missing.
    """
    resolved = resolve_native_mode(mode)
    if resolved == "none":
        return UnavailableNativeLocator()
    if resolved == "corelocation":
        return CoreLocationLocator()

    current = platform or sys.platform
    if current == "darwin" and _corelocation_importable():
        return CoreLocationLocator()
    logger.debug("No native location service on %s", current)
    return UnavailableNativeLocator()
