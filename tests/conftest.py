"""Pytest fixtures for sunrise report tests.

This module provides test fixtures that ensure:
1. No astronomy data is downloaded during tests
2. Settings come from defaults, not the developer's environment
3. Pipeline tests run against a deterministic stub calculator
"""

import logging
import os
from datetime import date, datetime, timedelta, timezone

import pytest
from astropy.utils import iers

# Use the bundled IERS tables; never reach out to the network
iers.conf.auto_download = False

for _name in list(os.environ):
    if _name.upper().startswith("SUNRISE_REPORT_"):
        del os.environ[_name]

from sunrise_report.models.event import EventKind, EventTime
from sunrise_report.models.location import Coordinates
from sunrise_report.report.request import FixedDateProvider

NYC_OFFSET = timezone(timedelta(hours=-5))


class StubCalculator:
    """Event calculator returning preset timestamps and recording calls."""

    def __init__(self, sunrise: datetime | None, sunset: datetime | None):
        self.events = {EventKind.SUNRISE: sunrise, EventKind.SUNSET: sunset}
        self.calls: list[tuple[datetime, Coordinates, EventKind]] = []

    def compute_event(
        self, date: datetime, coords: Coordinates, kind: EventKind
    ) -> EventTime:
        self.calls.append((date, coords, kind))
        return EventTime(kind=kind, timestamp=self.events[kind])


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from sunrise_report.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging.basicConfig calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """New York City coordinates."""
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def nyc_date() -> datetime:
    """Noon on 2022-01-24 in New York (EST, UTC-5)."""
    return datetime(2022, 1, 24, 12, 0, 0, tzinfo=NYC_OFFSET)


@pytest.fixture
def nyc_sunrise() -> datetime:
    return datetime(2022, 1, 24, 7, 12, 36, tzinfo=NYC_OFFSET)


@pytest.fixture
def nyc_sunset() -> datetime:
    return datetime(2022, 1, 24, 17, 3, 42, tzinfo=NYC_OFFSET)


@pytest.fixture
def stub_calculator(nyc_sunrise: datetime, nyc_sunset: datetime) -> StubCalculator:
    """Calculator reporting the known New York sunrise/sunset for 2022-01-24."""
    return StubCalculator(nyc_sunrise, nyc_sunset)


@pytest.fixture
def polar_night_calculator() -> StubCalculator:
    """Calculator for a day when the sun never rises."""
    return StubCalculator(None, None)


@pytest.fixture
def fixed_date_provider() -> FixedDateProvider:
    """Date provider pinned to 2022-01-24 in New York."""
    return FixedDateProvider(date(2022, 1, 24), NYC_OFFSET)
