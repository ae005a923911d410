"""Sunrise/sunset and day/night classification backed by astral."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from astral import Observer
from astral.sun import elevation, sunrise, sunset

from sunshine.contracts import Coordinate, Measurements, TimeOfDay


def _observer(coordinate: Coordinate) -> Observer:
    return Observer(latitude=coordinate.latitude, longitude=coordinate.longitude)


def sun_times(coordinate: Coordinate, day: date, tz: tzinfo) -> tuple[datetime, datetime] | None:
    """Return ``(sunrise, sunset)`` for ``day`` in ``tz``.

    Returns None when the sun stays above or below the horizon all day.
    """
    observer = _observer(coordinate)
    try:
        rise = sunrise(observer, date=day, tzinfo=tz)
        fall = sunset(observer, date=day, tzinfo=tz)
    except ValueError:
        return None
    return rise, fall


def measure(coordinate: Coordinate, now: datetime) -> Measurements:
    """Compute today's sunrise/sunset at ``coordinate`` and classify ``now``.

    Args:
        coordinate: Location to measure.
        now: Timezone-aware query instant; its date and tzinfo select the day.

    Returns:
        Measurements with ``time_of_day`` DAY when sunrise < now < sunset. On a
        polar day or night the sign of the solar elevation decides instead.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware.")

    times = sun_times(coordinate, now.date(), now.tzinfo)
    if times is None:
        above = elevation(_observer(coordinate), now) > 0.0
        return Measurements(
            coordinate=coordinate,
            sunrise=None,
            sunset=None,
            time_of_day=TimeOfDay.DAY if above else TimeOfDay.NIGHT,
        )

    rise, fall = times
    time_of_day = TimeOfDay.DAY if rise < now < fall else TimeOfDay.NIGHT
    return Measurements(coordinate=coordinate, sunrise=rise, sunset=fall, time_of_day=time_of_day)
