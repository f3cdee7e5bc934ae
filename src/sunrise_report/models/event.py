"""Solar event models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EventKind(str, Enum):
    """The solar events the report covers."""

    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class EventTime:
    """Result of an event calculation.

    `timestamp` is None when the event does not occur on the requested date
    at the requested location (polar day or polar night).
    """

    kind: EventKind
    timestamp: datetime | None

    @property
    def occurs(self) -> bool:
        return self.timestamp is not None


@dataclass(frozen=True)
class AdjustedEvents:
    """Sunrise and sunset after the daylight offset was applied."""

    sunrise: datetime
    sunset: datetime
    offset_minutes: int = 0
