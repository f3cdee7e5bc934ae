"""Exceptions raised by the sunrise report pipeline."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sunrise_report.models.event import EventKind


class SunriseReportError(Exception):
    """Base exception for all report failures."""


class ConfigurationError(SunriseReportError):
    """Invalid input: coordinates out of range, missing flag, bad date."""


class NoEventError(SunriseReportError):
    """Raised when an event does not occur for the date and location.

    This happens at high latitudes around the solstices (polar day or
    polar night). The report never substitutes a placeholder time.
    """

    def __init__(self, kind: EventKind, date: datetime | None = None):
        when = f" on {date.date().isoformat()}" if date is not None else ""
        super().__init__(f"No {kind.value} occurs{when} at the requested location")
        self.kind = kind
        self.date = date


class ComputationError(SunriseReportError):
    """Raised when applying the offset overflows the timestamp range."""

    def __init__(self, kind: EventKind, offset_minutes: int):
        super().__init__(
            f"Applying a time offset of {offset_minutes} minutes to "
            f"{kind.value} overflows the supported date range"
        )
        self.kind = kind
        self.offset_minutes = offset_minutes


class OutputError(SunriseReportError):
    """Raised when the report cannot be written to its sink."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path
