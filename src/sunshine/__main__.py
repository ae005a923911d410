"""Command-line entrypoint for sunshine."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from datetime import datetime

from sunshine.astro.daylight import measure
from sunshine.config import config_from_env
from sunshine.contracts import Measurements
from sunshine.errors import SunshineError
from sunshine.locate.resolver import LocationResolver, create_resolver
from sunshine.logging_config import configure_logging
from sunshine.version import __version__


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunshine",
        description="Print sunrise and sunset times, or whether it is day or night, for a location.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "location",
        help=(
            'Location descriptor: "@<lat> <long>" for coordinates, "#<name>" for a place name, '
            '"." for IP geolocation, or "!<descriptor>" to try the system location, then IP '
            "geolocation, then <descriptor>."
        ),
    )
    parser.add_argument(
        "-s",
        "--simple",
        action="store_true",
        help='Print "day" or "night" instead of sunrise and sunset times.',
    )
    parser.add_argument(
        "-f",
        "--format",
        default="%c",
        help="strftime format for sunrise and sunset times (default: %%c).",
    )
    return parser


def _format_time(value: datetime | None, fmt: str) -> str:
    return value.strftime(fmt) if value is not None else "never"


def render(measurements: Measurements, simple: bool, fmt: str) -> list[str]:
    """Return the output lines for one measurement."""
    if simple:
        return [measurements.time_of_day.value]
    return [
        f"sunrise: {_format_time(measurements.sunrise, fmt)}",
        f"sunset: {_format_time(measurements.sunset, fmt)}",
    ]


def main(
    argv: Sequence[str] | None = None,
    resolver_factory: Callable[[], LocationResolver] | None = None,
    now: datetime | None = None,
) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_env()
    except ValueError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)

    resolver = resolver_factory() if resolver_factory is not None else create_resolver(config)
    try:
        coordinate = resolver.resolve(args.location)
    except SunshineError as exc:
        print(exc, file=sys.stderr)
        return 1

    current = now if now is not None else datetime.now().astimezone()
    for line in render(measure(coordinate, current), args.simple, args.format):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
