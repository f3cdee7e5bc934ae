"""Sunrise and sunset calculations using astropy.

This module provides:
- Sun position (altitude, azimuth) at a given instant
- The time the sun's centre crosses the horizon on a given local day

Sunrise and sunset are defined the usual way, as the moment the sun's
centre sits 0.833° below the geometric horizon (standard atmospheric
refraction plus the solar semi-diameter).

All calculations use the astropy library for precision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

import numpy as np
from astropy import units as u
from astropy.coordinates import AltAz, EarthLocation, get_sun
from astropy.time import Time

from sunrise_report.models.event import EventKind, EventTime
from sunrise_report.models.location import Coordinates

logger = logging.getLogger(__name__)

# Sun centre altitude at apparent sunrise/sunset
HORIZON_ALTITUDE_DEG = -0.833

SAMPLE_INTERVAL = timedelta(minutes=15)
CROSSING_TOLERANCE = timedelta(seconds=1)


class EventCalculator(Protocol):
    """Anything that can turn a date and a place into a sunrise or sunset."""

    def compute_event(
        self, date: datetime, coords: Coordinates, kind: EventKind
    ) -> EventTime: ...


@dataclass
class SunPosition:
    """Sun position at a specific time and location."""

    altitude_deg: float  # Degrees above horizon (negative = below)
    azimuth_deg: float  # Degrees from north (0=N, 90=E, 180=S, 270=W)
    time: datetime
    is_day: bool  # Sun centre above the apparent horizon


def _coords_to_earth_location(coords: Coordinates) -> EarthLocation:
    """Convert our Coordinates to astropy EarthLocation."""
    return EarthLocation(lat=coords.latitude * u.deg, lon=coords.longitude * u.deg)


def _datetime_to_astropy_time(dt: datetime) -> Time:
    """Convert datetime to astropy Time."""
    return Time(dt)


def _sun_altaz(location: EarthLocation, obs_time: Time):
    """The sun in the local horizontal frame for a scalar or array Time."""
    return get_sun(obs_time).transform_to(AltAz(obstime=obs_time, location=location))


def _sun_altitudes(location: EarthLocation, obs_time: Time) -> np.ndarray:
    """Sun altitude in degrees for a scalar or array Time."""
    return np.atleast_1d(_sun_altaz(location, obs_time).alt.deg)


def get_sun_position(coords: Coordinates, time: datetime) -> SunPosition:
    """Calculate sun position at a given time and location.

    Args:
        coords: Geographic coordinates
        time: Time to calculate position for (should be timezone-aware)

    Returns:
        SunPosition with altitude and azimuth in degrees
    """
    sun_altaz = _sun_altaz(
        _coords_to_earth_location(coords), _datetime_to_astropy_time(time)
    )
    altitude = float(sun_altaz.alt.deg)

    return SunPosition(
        altitude_deg=altitude,
        azimuth_deg=float(sun_altaz.az.deg),
        time=time,
        is_day=altitude > HORIZON_ALTITUDE_DEG,
    )


def _find_altitude_crossing(
    coords: Coordinates,
    start_time: datetime,
    end_time: datetime,
    target_altitude: float,
    rising: bool,
    tolerance: timedelta = CROSSING_TOLERANCE,
) -> datetime | None:
    """Find when the sun first crosses a specific altitude.

    The window is sampled in one vectorized astropy call at
    SAMPLE_INTERVAL steps to find a bracket, then the bracket is narrowed by
    binary search on get_sun_position.

    Args:
        coords: Geographic coordinates
        start_time: Start of search window
        end_time: End of search window
        target_altitude: Target altitude in degrees
        rising: True if looking for rising crossing, False for setting
        tolerance: Precision of result

    Returns:
        Time of crossing (same tzinfo as start_time), or None if not found
    """
    location = _coords_to_earth_location(coords)

    steps = int((end_time - start_time) / SAMPLE_INTERVAL)
    sample_times = [start_time + i * SAMPLE_INTERVAL for i in range(steps + 1)]
    offsets = np.arange(steps + 1) * SAMPLE_INTERVAL.total_seconds()
    altitudes = _sun_altitudes(
        location, _datetime_to_astropy_time(start_time) + offsets * u.s
    )

    def get_altitude(dt: datetime) -> float:
        return get_sun_position(coords, dt).altitude_deg

    for i in range(1, len(sample_times)):
        prev_alt, curr_alt = altitudes[i - 1], altitudes[i]

        if rising:
            crossed = prev_alt < target_altitude <= curr_alt
        else:
            crossed = prev_alt > target_altitude >= curr_alt
        if not crossed:
            continue

        low_time = sample_times[i - 1]
        high_time = sample_times[i]

        while (high_time - low_time) > tolerance:
            mid_time = low_time + (high_time - low_time) / 2
            mid_alt = get_altitude(mid_time)

            if rising:
                if mid_alt < target_altitude:
                    low_time = mid_time
                else:
                    high_time = mid_time
            else:
                if mid_alt > target_altitude:
                    low_time = mid_time
                else:
                    high_time = mid_time

        return low_time + (high_time - low_time) / 2

    return None


def get_event_time(coords: Coordinates, date: datetime, kind: EventKind) -> EventTime:
    """Calculate sunrise or sunset for the local day containing `date`.

    Args:
        coords: Geographic coordinates
        date: Timezone-aware timestamp; its calendar day and UTC offset
            define the search window and the zone of the result
        kind: Which event to find

    Returns:
        EventTime truncated to whole seconds, with timestamp None when the
        sun does not cross the horizon that day
    """
    start = date.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)

    crossing = _find_altitude_crossing(
        coords,
        start,
        end,
        HORIZON_ALTITUDE_DEG,
        rising=kind is EventKind.SUNRISE,
    )
    if crossing is None:
        logger.info(f"No {kind.value} at {coords} on {start.date().isoformat()}")
        return EventTime(kind=kind, timestamp=None)

    return EventTime(kind=kind, timestamp=crossing.replace(microsecond=0))


class AstronomyCalculator:
    """Event calculator backed by astropy.

    Example:
        ```python
        calc = AstronomyCalculator()
        nyc = Coordinates(latitude=40.7128, longitude=-74.0060)

        sunrise = calc.compute_event(noon_today, nyc, EventKind.SUNRISE)
        ```
    """

    def compute_event(
        self, date: datetime, coords: Coordinates, kind: EventKind
    ) -> EventTime:
        """Compute one solar event for a date and location."""
        logger.debug(f"Computing {kind.value} for {coords} on {date.isoformat()}")
        return get_event_time(coords, date, kind)
