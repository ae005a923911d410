"""Location descriptor grammar.

A descriptor is a one-character sigil followed by a strategy payload::

    @<lat> <long>     explicit coordinates
    #<name>           named place (geocoded, cached)
    !<descriptor>     automatic: native, then IP, then the embedded descriptor
    .                 IP-based lookup

``!`` nests, so ``!!@0 0`` is valid. The fallback after ``!`` is kept as raw
text and parsed only once the native and IP strategies have failed. Any payload
after ``.`` is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sunshine.contracts import Coordinate
from sunshine.errors import MalformedLocationError
from sunshine.locate.coords import parse_coordinates

COORDINATES_SIGIL = "@"
NAME_SIGIL = "#"
AUTO_SIGIL = "!"
NETWORK_SIGIL = "."


@dataclass(frozen=True, slots=True)
class ExplicitCoordinates:
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class NamedPlace:
    name: str


@dataclass(frozen=True, slots=True)
class NetworkLookup:
    pass


@dataclass(frozen=True, slots=True)
class AutoLookup:
    fallback: str


Descriptor = Union[ExplicitCoordinates, NamedPlace, NetworkLookup, AutoLookup]


def parse_descriptor(text: str) -> Descriptor:
    """Parse the sigil and payload of a descriptor string.

    Raises:
        MalformedLocationError: on an empty string, an unknown sigil, a missing
            mandatory payload or an unparsable coordinate payload.
    """
    if not text:
        raise MalformedLocationError(text)

    sigil, payload = text[0], text[1:]
    if sigil == COORDINATES_SIGIL:
        try:
            return ExplicitCoordinates(parse_coordinates(payload))
        except MalformedLocationError as exc:
            raise MalformedLocationError(text) from exc
    if sigil == NAME_SIGIL:
        if not payload:
            raise MalformedLocationError(text)
        return NamedPlace(payload)
    if sigil == AUTO_SIGIL:
        if not payload:
            raise MalformedLocationError(text)
        return AutoLookup(payload)
    if sigil == NETWORK_SIGIL:
        return NetworkLookup()
    raise MalformedLocationError(text)
