"""Format adjusted event times into the report document."""

from __future__ import annotations

from datetime import datetime

from sunrise_report.models.event import AdjustedEvents
from sunrise_report.models.report import ReportResult


def format_time_of_day(dt: datetime) -> str:
    """Wall-clock time of day as zero-padded 24-hour HH:MM:SS.

    Fractional seconds are dropped; no date or zone suffix is kept.
    """
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def build_result(adjusted: AdjustedEvents) -> ReportResult:
    """Build the day_start/day_end report from adjusted events."""
    return ReportResult(
        day_start=format_time_of_day(adjusted.sunrise),
        day_end=format_time_of_day(adjusted.sunset),
    )
