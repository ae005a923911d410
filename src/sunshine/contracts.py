"""Core data contracts for sunshine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """WGS84 point. Equality is exact float equality."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the cache file entry layout."""
        return {"lat": float(self.latitude), "long": float(self.longitude)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinate":
        """Deserialize a cache file entry produced by :meth:`to_dict`."""
        lat = data["lat"]
        long = data["long"]
        if isinstance(lat, bool) or not isinstance(lat, (int, float)):
            raise TypeError("lat must be numeric")
        if isinstance(long, bool) or not isinstance(long, (int, float)):
            raise TypeError("long must be numeric")
        return cls(latitude=float(lat), longitude=float(long))


class TimeOfDay(StrEnum):
    """Day/night classification of an instant at a location."""

    DAY = "day"
    NIGHT = "night"


@dataclass(frozen=True, slots=True)
class Measurements:
    """Sunrise/sunset for one day plus the classification of the query instant.

    ``sunrise``/``sunset`` are ``None`` when the sun does not cross the horizon
    that day (polar day or polar night).
    """

    coordinate: Coordinate
    sunrise: datetime | None
    sunset: datetime | None
    time_of_day: TimeOfDay
