"""Offset adjustment of sunrise and sunset.

The offset narrows the reported day symmetrically: it is added to sunrise
and subtracted from sunset. A negative offset widens the day instead, and
an offset of zero leaves both times untouched.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sunrise_report.errors import ComputationError, NoEventError
from sunrise_report.models.event import AdjustedEvents, EventKind, EventTime

logger = logging.getLogger(__name__)


def adjust_event(event: EventTime, offset_minutes: int) -> datetime:
    """Shift one event by the daylight offset.

    Raises:
        NoEventError: If the event does not occur
        ComputationError: If the shifted time leaves the datetime range
    """
    if event.timestamp is None:
        raise NoEventError(event.kind)

    if offset_minutes == 0:
        return event.timestamp

    try:
        delta = timedelta(minutes=offset_minutes)
        if event.kind is EventKind.SUNRISE:
            return event.timestamp + delta
        return event.timestamp - delta
    except OverflowError as e:
        raise ComputationError(event.kind, offset_minutes) from e


def adjust_events(
    sunrise: EventTime, sunset: EventTime, offset_minutes: int
) -> AdjustedEvents:
    """Apply the offset to both events: sunrise later, sunset earlier."""
    adjusted = AdjustedEvents(
        sunrise=adjust_event(sunrise, offset_minutes),
        sunset=adjust_event(sunset, offset_minutes),
        offset_minutes=offset_minutes,
    )
    if offset_minutes:
        logger.debug(
            f"Applied {offset_minutes:+d} min offset: "
            f"sunrise {adjusted.sunrise.isoformat()}, sunset {adjusted.sunset.isoformat()}"
        )
    return adjusted
