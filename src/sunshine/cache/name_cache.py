"""Persistent name → coordinate cache for geocoding lookups.

The whole cache lives in one JSON document::

    {"data": {"<name>": {"lat": <float>, "long": <float>}, ...}}

It is read fully on load and rewritten fully on every save. There is no file
locking: two processes that miss on the same name both call the geocoder and
the last ``save()`` wins, discarding the other's entries. Entries never expire.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_cache_dir

from sunshine.contracts import Coordinate
from sunshine.errors import (
    CacheDeserializationError,
    CacheDirectoryUnavailableError,
    CacheLoadError,
    CacheSerializationError,
    CacheWriteError,
)

logger = logging.getLogger(__name__)

CACHE_FILENAME = "location_cache.json"


@dataclass(frozen=True, slots=True)
class AppIdentifier:
    """Application identity used to derive the per-user cache directory."""

    qualifier: str
    organization: str
    application: str

    def cache_dir(self) -> Path:
        """Return the platform-standard cache directory for this application."""
        if sys.platform == "darwin":
            # macOS keys application directories by reverse-DNS bundle id.
            bundle_id = f"{self.qualifier}.{self.organization}.{self.application}"
            return Path(user_cache_dir(bundle_id, appauthor=False))
        return Path(user_cache_dir(self.application, self.organization))


DEFAULT_APP = AppIdentifier("hr", "halcyon", "sunshine")


@dataclass(frozen=True, slots=True)
class CacheLocation:
    """Where the cache file lives; ``directory`` overrides the platform default."""

    app: AppIdentifier = DEFAULT_APP
    directory: Path | None = None

    def file_path(self) -> Path:
        """Return the cache file path, creating its directory if needed."""
        try:
            directory = self.directory if self.directory is not None else self.app.cache_dir()
        except (OSError, RuntimeError) as exc:
            raise CacheDirectoryUnavailableError(None) from exc
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheDirectoryUnavailableError(directory) from exc
        return directory / CACHE_FILENAME


def _decode_document(raw: str) -> dict[str, Coordinate]:
    payload = json.loads(raw)
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise ValueError('expected an object with a "data" object')
    entries: dict[str, Coordinate] = {}
    for name, entry in payload["data"].items():
        if not isinstance(entry, dict):
            raise ValueError(f"entry {name!r} must be an object")
        entries[name] = Coordinate.from_dict(entry)
    return entries


class LocationCache:
    """In-memory view of the cache file with explicit load/save."""

    def __init__(self, path: Path, entries: dict[str, Coordinate] | None = None) -> None:
        self._path = path
        self._entries: dict[str, Coordinate] = dict(entries or {})

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def create(cls, location: CacheLocation) -> "LocationCache":
        """Build an empty, unsaved cache bound to the cache file path."""
        return cls(location.file_path())

    @classmethod
    def load(cls, location: CacheLocation) -> "LocationCache":
        """Read and decode the cache file.

        Raises:
            CacheDirectoryUnavailableError: cache directory cannot be created.
            CacheLoadError: the file cannot be read.
            CacheDeserializationError: the file is not a valid cache document.
        """
        path = location.file_path()
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise CacheLoadError(path) from exc
        try:
            entries = _decode_document(raw.decode("utf-8"))
        except (ValueError, KeyError, TypeError, OverflowError) as exc:
            raise CacheDeserializationError(path, str(exc)) from exc
        logger.debug("Loaded %d cached locations from %s", len(entries), path)
        return cls(path, entries)

    @classmethod
    def open(cls, location: CacheLocation) -> "LocationCache":
        """Load the cache, falling back to a fresh empty one if it is missing or corrupt."""
        try:
            return cls.load(location)
        except (CacheLoadError, CacheDeserializationError) as exc:
            logger.debug("Starting with an empty location cache: %s", exc)
            return cls.create(location)

    def get(self, name: str) -> Coordinate | None:
        """Return the cached coordinate for ``name``, or None."""
        return self._entries.get(name)

    def set(self, name: str, coordinate: Coordinate) -> None:
        """Insert or overwrite ``name`` in memory."""
        self._entries[name] = coordinate

    def to_dict(self) -> dict[str, dict[str, dict[str, float]]]:
        """Serialize all entries to the cache document layout."""
        return {"data": {name: coord.to_dict() for name, coord in self._entries.items()}}

    def save(self) -> None:
        """Overwrite the cache file with the full in-memory map."""
        try:
            body = json.dumps(self.to_dict(), allow_nan=False)
        except ValueError as exc:
            raise CacheSerializationError(self._path, str(exc)) from exc
        try:
            self._path.write_text(body, encoding="utf-8")
        except OSError as exc:
            raise CacheWriteError(self._path) from exc

    def fetch(self, name: str, resolver: Callable[[], Coordinate]) -> Coordinate:
        """Return the cached coordinate, resolving and persisting it on a miss.

        ``resolver`` is called only on a miss; its errors propagate unchanged and
        nothing is cached. A failed save raises :class:`CacheWriteError`, but the
        entry stays set in memory.
        """
        cached = self.get(name)
        if cached is not None:
            logger.debug("Location cache hit for %r", name)
            return cached

        logger.debug("Location cache miss for %r", name)
        coordinate = resolver()
        self.set(name, coordinate)
        try:
            self.save()
        except (CacheSerializationError, CacheWriteError) as exc:
            raise CacheWriteError(self._path) from exc
        return coordinate
