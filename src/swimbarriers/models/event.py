"""Pool and swimming style reference models."""

from enum import StrEnum

from pydantic import BaseModel, field_validator


class Stroke(StrEnum):
    """Swimming strokes."""

    FREESTYLE = "freestyle"
    BACKSTROKE = "backstroke"
    BUTTERFLY = "butterfly"
    BREASTSTROKE = "breaststroke"
    IM = "im"  # Individual Medley


class PoolCategory(StrEnum):
    """Pool length categories a race can be swum in."""

    SHORT_COURSE = "25m"
    LONG_COURSE = "50m"


# Display order for strokes within a pool
STROKE_ORDER: list[Stroke] = [
    Stroke.FREESTYLE,
    Stroke.BACKSTROKE,
    Stroke.BREASTSTROKE,
    Stroke.BUTTERFLY,
    Stroke.IM,
]

VALID_DISTANCES = {25, 50, 100, 200, 400, 800, 1500}


class PoolType(BaseModel):
    """A pool length, e.g. ``25m`` (short course)."""

    id: str | None = None
    name: PoolCategory
    length_meters: int

    def __str__(self) -> str:
        return self.name.value


class SwimmingStyle(BaseModel):
    """A stroke and distance combination, e.g. 50m freestyle."""

    id: str | None = None
    name: str  # Label used on race records, e.g. "50m Serbest"
    distance_meters: int
    stroke_type: Stroke

    @field_validator("distance_meters")
    @classmethod
    def validate_distance(cls, v: int) -> int:
        if v not in VALID_DISTANCES:
            raise ValueError(
                f"Invalid distance: {v}. Valid distances: {sorted(VALID_DISTANCES)}"
            )
        return v

    def __str__(self) -> str:
        return self.name

    @property
    def sort_key(self) -> tuple[int, int]:
        """Order by stroke, then distance ascending."""
        return (STROKE_ORDER.index(self.stroke_type), self.distance_meters)
