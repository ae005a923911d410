"""Resolution chain: descriptor string → coordinate."""

from __future__ import annotations

import logging
from collections.abc import Callable

import requests

from sunshine.cache.name_cache import DEFAULT_APP, CacheLocation, LocationCache
from sunshine.config import SunshineConfig
from sunshine.contracts import Coordinate
from sunshine.errors import SunshineError
from sunshine.locate.descriptor import (
    AutoLookup,
    Descriptor,
    ExplicitCoordinates,
    NamedPlace,
    NetworkLookup,
    parse_descriptor,
)
from sunshine.locate.factory import create_native_locator
from sunshine.locate.interfaces import Geocoder, Locator, NativeLocator
from sunshine.locate.network import IpLocator, NominatimGeocoder

logger = logging.getLogger(__name__)


class LocationResolver:
    """Dispatch descriptors to locators, with ordered fallback for ``!``.

    The ``!`` chain tries the native locator, then the IP locator, then the
    embedded fallback descriptor, and returns the first success. Failures of the
    first two steps are logged and skipped; the fallback's failure propagates.
    """

    def __init__(
        self,
        native: NativeLocator,
        network: Locator,
        geocoder: Geocoder,
        open_cache: Callable[[], LocationCache],
    ) -> None:
        self._native = native
        self._network = network
        self._geocoder = geocoder
        self._open_cache = open_cache

    @property
    def native(self) -> NativeLocator:
        return self._native

    @property
    def network(self) -> Locator:
        return self._network

    @property
    def geocoder(self) -> Geocoder:
        return self._geocoder

    def resolve(self, descriptor: str) -> Coordinate:
        """Parse and resolve a descriptor string."""
        return self.resolve_descriptor(parse_descriptor(descriptor))

    def resolve_descriptor(self, descriptor: Descriptor) -> Coordinate:
        if isinstance(descriptor, ExplicitCoordinates):
            return descriptor.coordinate
        if isinstance(descriptor, NamedPlace):
            return self._resolve_name(descriptor.name)
        if isinstance(descriptor, NetworkLookup):
            return self._network.locate()
        if isinstance(descriptor, AutoLookup):
            return self._resolve_auto(descriptor)
        raise TypeError(f"unsupported descriptor: {descriptor!r}")

    def _resolve_name(self, name: str) -> Coordinate:
        cache = self._open_cache()
        return cache.fetch(name, lambda: self._geocoder.geocode(name))

    def _resolve_auto(self, descriptor: AutoLookup) -> Coordinate:
        for label, locator in (("native", self._native), ("network", self._network)):
            try:
                return locator.locate()
            except SunshineError as exc:
                logger.info("%s location failed, trying next strategy: %s", label, exc)
        return self.resolve(descriptor.fallback)


def create_resolver(config: SunshineConfig, session: requests.Session | None = None) -> LocationResolver:
    """Wire a resolver from configuration, sharing one HTTP session."""
    http = session or requests.Session()
    cache_location = CacheLocation(app=DEFAULT_APP, directory=config.cache_dir)
    return LocationResolver(
        native=create_native_locator(config.native_mode),
        network=IpLocator(base_url=config.ip_api_url, session=http),
        geocoder=NominatimGeocoder(
            user_agent=config.user_agent,
            base_url=config.geocoder_url,
            session=http,
        ),
        open_cache=lambda: LocationCache.open(cache_location),
    )
