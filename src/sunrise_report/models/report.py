"""Report output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$"


class ReportResult(BaseModel):
    """The JSON document emitted by the tool.

    Field names and their order are part of the output contract:
    `{"day_start":"HH:MM:SS","day_end":"HH:MM:SS"}`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    day_start: str = Field(
        ..., pattern=TIME_OF_DAY_PATTERN, description="Adjusted sunrise time of day"
    )
    day_end: str = Field(
        ..., pattern=TIME_OF_DAY_PATTERN, description="Adjusted sunset time of day"
    )

    def to_json(self) -> str:
        """Serialize as compact JSON with a fixed key order."""
        return self.model_dump_json()
