"""Tests for the HTTP-backed locators."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from sunshine.contracts import Coordinate
from sunshine.errors import ApiError, JsonError, MalformedLocationError, UnknownLocationNameError
from sunshine.locate.network import IpLocator, NominatimGeocoder

FREEGEOIP_BODY = """{
    "ip":"0.0.0.0",
    "country_code":"HR", "country_name":"Croatia",
    "region_code":"21", "region_name":"City of Zagreb", "city":"Zagreb",
    "zip_code":"10000", "time_zone":"Europe/Zagreb",
    "latitude":45.8293, "longitude":15.9793, "metro_code":0}"""

AMSTERDAM_BODY = """[{
    "lat":"52.37454030000001", "lon":"4.897975505617977",
    "display_name":"Amsterdam, North Holland, Netherlands, The Netherlands"},
    {"lat":"52.3727598", "lon":"4.8936041",
    "display_name":"Amsterdam, North Holland, Netherlands, The Netherlands"}]"""


class DummyResp:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class DummySession:
    def __init__(self, response: DummyResp | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> DummyResp:
        self.calls.append((url, kwargs))
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def test_ip_locator_parses_coordinates_and_ignores_extra_fields() -> None:
    """IP geolocation reads latitude/longitude from the JSON object."""
    session = DummySession(DummyResp(FREEGEOIP_BODY))
    locator = IpLocator(base_url="http://geo.test", session=session)

    assert locator.locate() == Coordinate(45.8293, 15.9793)
    assert session.calls == [("http://geo.test/json/", {})]


def test_ip_locator_wraps_transport_failure() -> None:
    """Connection errors become ApiError with the original as cause."""
    failure = requests.ConnectionError("unreachable")
    locator = IpLocator(base_url="http://geo.test", session=DummySession(error=failure))

    with pytest.raises(ApiError) as excinfo:
        locator.locate()

    assert excinfo.value.__cause__ is failure


def test_ip_locator_rejects_http_error_status() -> None:
    """A non-success status is a transport-level failure."""
    locator = IpLocator(base_url="http://geo.test", session=DummySession(DummyResp("", status_code=503)))

    with pytest.raises(ApiError):
        locator.locate()


@pytest.mark.parametrize("body", ["not json", "[]", '{"latitude": 45.8}', '{"latitude": "north", "longitude": 1}'])
def test_ip_locator_rejects_unexpected_body(body: str) -> None:
    """Bodies without numeric latitude/longitude become JsonError."""
    locator = IpLocator(base_url="http://geo.test", session=DummySession(DummyResp(body)))

    with pytest.raises(JsonError):
        locator.locate()


def test_geocoder_uses_first_candidate_and_sends_query() -> None:
    """Only the first candidate is used; query and client identifier are sent."""
    session = DummySession(DummyResp(AMSTERDAM_BODY))
    geocoder = NominatimGeocoder(user_agent="sunshine-tests", base_url="http://nominatim.test/", session=session)

    location = geocoder.geocode("Amsterdam")

    assert location == Coordinate(52.37454030000001, 4.897975505617977)
    url, kwargs = session.calls[0]
    assert url == "http://nominatim.test/search"
    assert kwargs["params"] == {"q": "Amsterdam", "format": "json"}
    assert kwargs["headers"] == {"User-Agent": "sunshine-tests"}


def test_geocoder_ignores_malformed_second_candidate() -> None:
    """Later candidates are never inspected."""
    body = '[{"lat": "1.5", "lon": "2.5"}, {"unexpected": true}]'
    geocoder = NominatimGeocoder(user_agent="t", session=DummySession(DummyResp(body)))

    assert geocoder.geocode("Somewhere") == Coordinate(1.5, 2.5)


def test_geocoder_empty_result_is_unknown_name() -> None:
    """An empty candidate list is UnknownLocationNameError, not a crash."""
    geocoder = NominatimGeocoder(user_agent="t", session=DummySession(DummyResp("[]")))

    with pytest.raises(UnknownLocationNameError):
        geocoder.geocode("Atlantis")


@pytest.mark.parametrize("body", ["{}", "oops", '[{"lat": 1.5, "lon": 2.5}]', '[{"lat": "1.5"}]'])
def test_geocoder_rejects_unexpected_body(body: str) -> None:
    """Non-array bodies or first candidates without string lat/lon become JsonError."""
    geocoder = NominatimGeocoder(user_agent="t", session=DummySession(DummyResp(body)))

    with pytest.raises(JsonError):
        geocoder.geocode("Somewhere")


def test_geocoder_non_numeric_strings_are_malformed() -> None:
    """Candidate coordinates go through the coordinate parser."""
    geocoder = NominatimGeocoder(
        user_agent="t", session=DummySession(DummyResp('[{"lat": "north", "lon": "east"}]'))
    )

    with pytest.raises(MalformedLocationError):
        geocoder.geocode("Somewhere")
