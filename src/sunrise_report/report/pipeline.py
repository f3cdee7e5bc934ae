"""The report pipeline: calculate, adjust, format."""

from __future__ import annotations

import logging

from sunrise_report.astronomy.calculator import EventCalculator
from sunrise_report.errors import NoEventError
from sunrise_report.models.event import EventKind, EventTime
from sunrise_report.models.report import ReportResult
from sunrise_report.report.adjuster import adjust_events
from sunrise_report.report.formatter import build_result, format_time_of_day
from sunrise_report.report.request import ReportRequest

logger = logging.getLogger(__name__)


def _require(event: EventTime, request: ReportRequest) -> None:
    if event.timestamp is None:
        raise NoEventError(event.kind, request.date)


def run_report(request: ReportRequest, calculator: EventCalculator) -> ReportResult:
    """Produce the report for one request.

    The calculator is called exactly once per event kind, before either
    result is checked.

    Raises:
        NoEventError: If sunrise or sunset does not occur that day
        ComputationError: If the offset pushes a time out of range
    """
    sunrise = calculator.compute_event(
        request.date, request.coordinates, EventKind.SUNRISE
    )
    sunset = calculator.compute_event(
        request.date, request.coordinates, EventKind.SUNSET
    )
    _require(sunrise, request)
    _require(sunset, request)

    logger.info(
        f"sunrise: {format_time_of_day(sunrise.timestamp)} "
        f"sunset: {format_time_of_day(sunset.timestamp)}"
    )

    adjusted = adjust_events(sunrise, sunset, request.offset_minutes)
    return build_result(adjusted)
