"""Application configuration.

Defaults are loaded from environment variables using pydantic-settings and
can be overridden per invocation from the command line.

## Optional Environment Variables

- SUNRISE_REPORT_LATITUDE: Default latitude (default: 40.7128, New York City)
- SUNRISE_REPORT_LONGITUDE: Default longitude (default: -74.0060)
- SUNRISE_REPORT_TIME_OFFSET: Default offset in minutes (default: 0)
- SUNRISE_REPORT_LOG_LEVEL: Log level when no -v flag is given (default: WARNING)
- SUNRISE_REPORT_LOG_FORMAT: logging format string for stderr diagnostics

## Example .env file

```
SUNRISE_REPORT_LATITUDE=37.8044
SUNRISE_REPORT_LONGITUDE=-122.2712
SUNRISE_REPORT_TIME_OFFSET=30
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUNRISE_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Location defaults, New York City
    latitude: float = Field(default=40.7128, description="Default latitude")
    longitude: float = Field(default=-74.0060, description="Default longitude")

    # Minutes added to sunrise and subtracted from sunset
    time_offset: int = Field(default=0, description="Default time offset in minutes")

    # Diagnostics
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: str = "%(levelname)s: %(name)s: %(message)s"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
