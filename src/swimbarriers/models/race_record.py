"""Race record model for recorded race times."""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from swimbarriers.models.duration import format_time
from swimbarriers.models.event import PoolCategory


class RaceRecord(BaseModel):
    """One timed swim entered by a coach or admin.

    Races are dated by month and year only. A swimmer has many records
    per (pool, style) category, one per race over time.
    """

    id: str | None = None
    swimmer_id: str
    pool_type: PoolCategory
    swimming_style: str  # Swimming style name, e.g. "50m Serbest"
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900)

    # The time (stored as milliseconds)
    total_milliseconds: int = Field(ge=0)

    created_at: datetime | None = None

    @computed_field
    @property
    def time_formatted(self) -> str:
        """Format time as MM:SS:cc."""
        return format_time(self.total_milliseconds)

    @property
    def period_index(self) -> int:
        """Months since year 0, used to order races chronologically."""
        return self.year * 12 + self.month

    def meets_barrier(self, barrier_milliseconds: int) -> bool:
        """Check if this time equals or beats a barrier time."""
        return self.total_milliseconds <= barrier_milliseconds
