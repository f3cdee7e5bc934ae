"""Input assembly: turn raw user values into a validated report request.

The calculation date is a timezone-aware timestamp at local noon. Anchoring
at noon keeps the calendar day stable whatever UTC offset the calculator
works in, and capturing the offset once per run keeps a run that straddles
midnight from mixing two different days.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Protocol

from sunrise_report.config import get_settings
from sunrise_report.errors import ConfigurationError
from sunrise_report.models.location import Coordinates

logger = logging.getLogger(__name__)

NOON = time(12, 0, 0)

# Signed fixed UTC offsets: "+03:00", "-0500" ("Z" and "UTC" are handled separately)
UTC_OFFSET_PATTERN = re.compile(
    r"^(?P<sign>[-+])(?P<hours>\d{2}):?(?P<minutes>\d{2})$"
)


def anchor_to_noon(day: date, tz: tzinfo) -> datetime:
    """Return noon of `day` in `tz`."""
    return datetime.combine(day, NOON, tzinfo=tz)


def local_utc_offset(day: date | None = None) -> timezone:
    """The process's local UTC offset, at noon of `day` or right now."""
    if day is None:
        offset = datetime.now().astimezone().utcoffset()
    else:
        offset = datetime.combine(day, NOON).astimezone().utcoffset()
    return timezone(offset)


class DateProvider(Protocol):
    """Source of the calculation date when none is given explicitly."""

    def today(self) -> datetime: ...


class LocalDateProvider:
    """Today at local noon.

    The clock and the local UTC offset are read once, when the provider is
    created; later calls to `today()` return the same value.
    """

    def __init__(self, utc_offset: timezone | None = None):
        if utc_offset is None:
            now = datetime.now().astimezone()
            utc_offset = timezone(now.utcoffset())
        else:
            now = datetime.now(utc_offset)
        self._today = anchor_to_noon(now.date(), utc_offset)

    def today(self) -> datetime:
        return self._today


class FixedDateProvider:
    """A provider that always returns noon of a given day."""

    def __init__(self, day: date, utc_offset: timezone | None = None):
        self._today = anchor_to_noon(day, utc_offset or local_utc_offset(day))

    def today(self) -> datetime:
        return self._today


def parse_date(value: str | date) -> date:
    """Parse a `YYYY-MM-DD` calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid date: '{value}'. Expected format: YYYY-MM-DD (e.g., '2022-01-24')"
        ) from e


def parse_utc_offset(value: str | timezone) -> timezone:
    """Parse a fixed UTC offset such as '-05:00', '+0330' or 'Z'."""
    if isinstance(value, timezone):
        return value

    text = value.strip()
    if text.upper() in ("Z", "UTC"):
        return timezone.utc

    match = UTC_OFFSET_PATTERN.match(text)
    if not match:
        raise ConfigurationError(
            f"Invalid time zone offset: '{value}'. "
            "Expected format: '+HH:MM' or '-HH:MM' (e.g., '-05:00')"
        )

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    if hours > 23 or minutes > 59:
        raise ConfigurationError(f"Time zone offset out of range: '{value}'")

    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if match.group("sign") == "-" else delta)


def check_search_window(noon: datetime) -> None:
    """Reject days whose local midnight-to-midnight window leaves the datetime range."""
    start = noon.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        start.astimezone(timezone.utc)
        (start + timedelta(days=1)).astimezone(timezone.utc)
    except OverflowError as e:
        raise ConfigurationError(
            f"The day of {noon.isoformat()} is outside the supported date range"
        ) from e


@dataclass(frozen=True)
class ReportRequest:
    """Everything the pipeline needs for one run."""

    coordinates: Coordinates
    date: datetime  # Noon on the target day, timezone-aware
    offset_minutes: int = 0


def build_request(
    latitude: float | None,
    longitude: float | None,
    *,
    date: str | date | None = None,
    time_offset: int | None = None,
    utc_offset: str | timezone | None = None,
    date_provider: DateProvider | None = None,
) -> ReportRequest:
    """Validate raw inputs and package them into a ReportRequest.

    Args:
        latitude: Latitude in decimal degrees, or None for the configured default
        longitude: Longitude in decimal degrees, or None for the configured default
        date: Explicit calendar date; defaults to today
        time_offset: Signed minutes, or None for the configured default
        utc_offset: Fixed UTC offset for the date; defaults to the local one
        date_provider: Supplies "today" when no explicit date is given

    Raises:
        ConfigurationError: If only one of latitude/longitude is given, if
            either is out of range, or if date/offset values are malformed
            or put the day's search window outside the datetime range
    """
    if (latitude is None) != (longitude is None):
        missing = "longitude" if longitude is None else "latitude"
        raise ConfigurationError(
            f"Latitude and longitude must be given together: {missing} is missing"
        )

    settings = get_settings()
    if latitude is None:
        latitude, longitude = settings.latitude, settings.longitude
    if time_offset is None:
        time_offset = settings.time_offset

    if isinstance(time_offset, bool) or not isinstance(time_offset, int):
        raise ConfigurationError(
            f"Time offset must be a whole number of minutes, got {time_offset!r}"
        )

    coordinates = Coordinates.create(latitude, longitude)
    tz = parse_utc_offset(utc_offset) if utc_offset is not None else None

    if date is not None:
        date_provider = FixedDateProvider(parse_date(date), tz)
    elif date_provider is None:
        date_provider = LocalDateProvider(tz)

    calculation_date = date_provider.today()
    check_search_window(calculation_date)

    request = ReportRequest(
        coordinates=coordinates,
        date=calculation_date,
        offset_minutes=time_offset,
    )
    logger.debug(f"Assembled request: {request}")
    return request
