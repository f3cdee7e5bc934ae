"""Report pipeline: input assembly, offset adjustment, formatting and output."""

from sunrise_report.report.adjuster import adjust_event, adjust_events
from sunrise_report.report.formatter import build_result, format_time_of_day
from sunrise_report.report.pipeline import run_report
from sunrise_report.report.request import (
    DateProvider,
    FixedDateProvider,
    LocalDateProvider,
    ReportRequest,
    build_request,
)
from sunrise_report.report.sink import write_report

__all__ = [
    "DateProvider",
    "FixedDateProvider",
    "LocalDateProvider",
    "ReportRequest",
    "adjust_event",
    "adjust_events",
    "build_request",
    "build_result",
    "format_time_of_day",
    "run_report",
    "write_report",
]
