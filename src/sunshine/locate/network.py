"""HTTP-backed locators: IP geolocation and name geocoding."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from sunshine.contracts import Coordinate
from sunshine.errors import ApiError, JsonError, UnknownLocationNameError
from sunshine.locate.coords import parse_coordinates

logger = logging.getLogger(__name__)

DEFAULT_IP_API_URL = "https://freegeoip.app"
DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org"


class IpApiLocation(BaseModel):
    """Subset of the IP geolocation response used here; extra fields are ignored."""

    latitude: float
    longitude: float


class NominatimPlace(BaseModel):
    """One geocoding candidate; coordinates arrive as strings."""

    lat: str
    lon: str


_CANDIDATES = TypeAdapter(list[Any])


def _get(session: requests.Session, url: str, **kwargs: Any) -> requests.Response:
    logger.debug("GET %s", url)
    try:
        response = session.get(url, **kwargs)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ApiError(url, str(exc)) from exc
    return response


class IpLocator:
    """Approximate location of this machine from its public IP address."""

    def __init__(self, base_url: str = DEFAULT_IP_API_URL, session: requests.Session | None = None) -> None:
        self._url = f"{base_url.rstrip('/')}/json/"
        self._session = session or requests.Session()

    def locate(self) -> Coordinate:
        response = _get(self._session, self._url)
        try:
            location = IpApiLocation.model_validate_json(response.text)
        except ValidationError as exc:
            raise JsonError(self._url, str(exc)) from exc
        return Coordinate(latitude=location.latitude, longitude=location.longitude)


class NominatimGeocoder:
    """Free-text place search; the first candidate is trusted as-is."""

    def __init__(
        self,
        user_agent: str,
        base_url: str = DEFAULT_GEOCODER_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/search"
        self._user_agent = user_agent
        self._session = session or requests.Session()

    def geocode(self, name: str) -> Coordinate:
        """Return the coordinate of the first search result for ``name``.

        Raises:
            ApiError: transport failure or HTTP error status.
            JsonError: body is not an array, or its first element lacks string lat/lon.
            UnknownLocationNameError: the result array is empty.
            MalformedLocationError: the first candidate's lat/lon are not numeric.
        """
        response = _get(
            self._session,
            self._url,
            params={"q": name, "format": "json"},
            headers={"User-Agent": self._user_agent},
        )
        try:
            candidates = _CANDIDATES.validate_json(response.text)
            if not candidates:
                raise UnknownLocationNameError(name)
            first = NominatimPlace.model_validate(candidates[0])
        except ValidationError as exc:
            raise JsonError(self._url, str(exc)) from exc

        return parse_coordinates(f"{first.lat} {first.lon}")
