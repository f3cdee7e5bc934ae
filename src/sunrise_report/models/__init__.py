"""Domain models for the sunrise report."""

from sunrise_report.models.location import Coordinates
from sunrise_report.models.event import AdjustedEvents, EventKind, EventTime
from sunrise_report.models.report import ReportResult

__all__ = [
    # Location
    "Coordinates",
    # Event
    "EventKind",
    "EventTime",
    "AdjustedEvents",
    # Report
    "ReportResult",
]
