"""Location models for the sunrise report."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sunrise_report.errors import ConfigurationError


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude).

    Latitude:
        - Negative (-) = south of equator
        - Positive (+) = north of equator
        - Range: -90 to +90

    Longitude:
        - Negative (-) = west of prime meridian
        - Positive (+) = east of prime meridian
        - Range: -180 to +180

    Both components must be finite.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in decimal degrees"
    )
    longitude: float = Field(
        ..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in decimal degrees"
    )

    @classmethod
    def create(cls, latitude: float, longitude: float) -> Self:
        """Build validated coordinates, raising ConfigurationError on bad input.

        Examples:
            Coordinates.create(40.7128, -74.0060) -> New York City
            Coordinates.create(-33.8688, 151.2093) -> Sydney
        """
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid coordinates ({latitude}, {longitude}): {problems}"
            ) from e

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
