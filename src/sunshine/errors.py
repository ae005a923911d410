"""Error hierarchy for location resolution and cache persistence.

Every failure raised by the package is a subclass of :class:`SunshineError`.
Underlying library exceptions are attached as ``__cause__`` via ``raise ... from``.
"""

from __future__ import annotations

from pathlib import Path


class SunshineError(Exception):
    """Base class for all sunshine failures."""


class MalformedLocationError(SunshineError):
    """Descriptor has an unknown sigil, a missing payload or bad coordinates."""

    def __init__(self, descriptor: str) -> None:
        super().__init__(f"malformed location string: {descriptor!r}")
        self.descriptor = descriptor


class UnknownLocationNameError(SunshineError):
    """Geocoding API returned no candidates for a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown location name: {name!r}")
        self.name = name


class NativeLocationUnavailableError(SunshineError):
    """No native location service exists on this platform."""

    def __init__(self) -> None:
        super().__init__("native location service unavailable")


class NativeLocationError(SunshineError):
    """Native location service was queried and failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"native location failure: {reason}")


class ApiError(SunshineError):
    """Transport-level failure while calling an HTTP API."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"api connection error for {url}: {reason}")
        self.url = url


class JsonError(SunshineError):
    """API response body does not match the expected shape."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"api deserialization error for {url}: {reason}")
        self.url = url


class CacheDirectoryUnavailableError(SunshineError):
    """Platform cache directory could not be determined or created."""

    def __init__(self, directory: Path | None) -> None:
        where = str(directory) if directory is not None else "<undetermined>"
        super().__init__(f"cache directory unavailable: {where}")
        self.directory = directory


class CacheLoadError(SunshineError):
    """Cache file could not be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"could not read location cache: {path}")
        self.path = path


class CacheDeserializationError(SunshineError):
    """Cache file content is not a valid cache document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"corrupt location cache {path}: {reason}")
        self.path = path


class CacheSerializationError(SunshineError):
    """Cache contents could not be encoded as JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not encode location cache {path}: {reason}")
        self.path = path


class CacheWriteError(SunshineError):
    """Cache file could not be written."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"could not write location cache: {path}")
        self.path = path
