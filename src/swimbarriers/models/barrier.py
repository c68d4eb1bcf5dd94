"""Barrier (qualification time) models.

A barrier is the time a swimmer must equal or beat to qualify at a tier,
published per age, gender, pool length and swimming style.

Examples:
- 12 year old girls, 25m pool, 50m freestyle, B1: 00:38:50
- 12 year old girls, 25m pool, 50m freestyle, A1: 00:33:90
"""

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

from swimbarriers.models.duration import format_time
from swimbarriers.models.swimmer import Gender


class BarrierTier(StrEnum):
    """Barrier tiers, from easiest to hardest."""

    B1 = "B1"
    B2 = "B2"
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    SEM = "SEM"  # Age-independent tier


# Canonical order, easiest to hardest. Tier labels outside this list sort last.
TIER_ORDER: list[str] = [tier.value for tier in BarrierTier]


def tier_rank(tier: str) -> int:
    """Position of a tier in the canonical order; unknown tiers rank last."""
    try:
        return TIER_ORDER.index(tier)
    except ValueError:
        return len(TIER_ORDER)


def next_tier(tier: str) -> str | None:
    """The tier immediately after ``tier``, or None for the last or unknown tiers."""
    if tier not in TIER_ORDER:
        return None
    index = TIER_ORDER.index(tier)
    if index + 1 >= len(TIER_ORDER):
        return None
    return TIER_ORDER[index + 1]


class BarrierCategory(StrEnum):
    """Whether a barrier type is published per age or applies to all ages."""

    AGE_GROUP = "12 Yaş"
    OPEN = "SEM"


class BarrierType(BaseModel):
    """A named barrier tier as stored in the catalog."""

    id: str | None = None
    name: str  # Tier label, e.g. "B1"
    category: BarrierCategory = BarrierCategory.AGE_GROUP


class BarrierValue(BaseModel):
    """One catalog entry: the time required for a tier.

    ``tier`` and the ``*_name`` fields are resolved from joined rows when
    the entry is loaded, so callers never deal with nested join data.
    """

    id: str | None = None

    # Required references
    barrier_type_id: str
    swimming_style_id: str
    pool_type_id: str

    # Resolved labels
    tier: str
    pool_type_name: str | None = None
    swimming_style_name: str | None = None

    # Who the barrier applies to
    age: int = Field(ge=0)
    gender: Gender

    # The time (stored as milliseconds)
    time_milliseconds: int = Field(ge=0)

    @computed_field
    @property
    def time_formatted(self) -> str:
        """Format time as MM:SS:cc."""
        return format_time(self.time_milliseconds)

    def is_passed_by(self, swimmer_time: int) -> bool:
        """Check if a swim equals or beats this barrier."""
        return swimmer_time <= self.time_milliseconds

    def __str__(self) -> str:
        style = f" {self.swimming_style_name}" if self.swimming_style_name else ""
        pool = f" ({self.pool_type_name})" if self.pool_type_name else ""
        return f"{self.tier} {self.age} {self.gender.value}{style}{pool}: {self.time_formatted}"


class BarrierEvaluation(BaseModel):
    """Whether a swimmer's best time passes one barrier."""

    barrier_name: str
    achieved: bool
    swimmer_time: int
    barrier_time: int

    @computed_field
    @property
    def difference(self) -> int:
        """Swimmer time minus barrier time in ms (negative or zero = passed)."""
        return self.swimmer_time - self.barrier_time


class BarrierProgress(BaseModel):
    """The hardest barrier passed and the one to aim for next."""

    best_passed: BarrierValue | None = None
    next_target: BarrierValue | None = None

    def time_to_next(self, swimmer_time: int) -> int | None:
        """Milliseconds to drop to reach the next target, if there is one."""
        if self.next_target is None:
            return None
        return swimmer_time - self.next_target.time_milliseconds


class BarrierSummaryRow(BaseModel):
    """A swimmer's barrier standing in one (pool, style) category."""

    pool_type: str
    swimming_style: str
    best_time: int | None = None
    best_barrier_name: str | None = None
    best_barrier_time: int | None = None
    all_passed_barriers: list[str] = []
    next_barrier_name: str | None = None
    next_barrier_time: int | None = None

    @computed_field
    @property
    def time_to_next(self) -> int | None:
        """Milliseconds still to drop to reach the next barrier."""
        if self.best_time is None or self.next_barrier_time is None:
            return None
        return self.best_time - self.next_barrier_time

    @computed_field
    @property
    def best_time_formatted(self) -> str | None:
        if self.best_time is None:
            return None
        return format_time(self.best_time)

    @computed_field
    @property
    def next_barrier_time_formatted(self) -> str | None:
        if self.next_barrier_time is None:
            return None
        return format_time(self.next_barrier_time)
