"""Astronomical calculations for sunrise and sunset times."""

from sunrise_report.astronomy.calculator import (
    AstronomyCalculator,
    EventCalculator,
    SunPosition,
    get_event_time,
    get_sun_position,
)

__all__ = [
    "AstronomyCalculator",
    "EventCalculator",
    "SunPosition",
    "get_event_time",
    "get_sun_position",
]
