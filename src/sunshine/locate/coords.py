"""Parsing of raw ``"lat long"`` coordinate payloads."""

from __future__ import annotations

from sunshine.contracts import Coordinate
from sunshine.errors import MalformedLocationError


def _parse_float(token: str, payload: str) -> float:
    # float() tolerates surrounding whitespace and digit underscores; tokens here must not.
    if not token or token != token.strip() or "_" in token:
        raise MalformedLocationError(payload)
    try:
        return float(token)
    except ValueError as exc:
        raise MalformedLocationError(payload) from exc


def parse_coordinates(payload: str) -> Coordinate:
    """Parse ``"<lat> <long>"`` into a :class:`Coordinate`.

    The payload is split on single spaces and must yield exactly two numeric
    tokens. Values are not range-checked.
    """
    tokens = payload.split(" ")
    if len(tokens) != 2:
        raise MalformedLocationError(payload)
    return Coordinate(
        latitude=_parse_float(tokens[0], payload),
        longitude=_parse_float(tokens[1], payload),
    )
