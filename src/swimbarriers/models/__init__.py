"""Pydantic models for race records and barriers."""

from swimbarriers.models.barrier import (
    TIER_ORDER,
    BarrierCategory,
    BarrierEvaluation,
    BarrierProgress,
    BarrierSummaryRow,
    BarrierTier,
    BarrierType,
    BarrierValue,
    next_tier,
    tier_rank,
)
from swimbarriers.models.duration import (
    TIME_INPUT_PATTERN,
    DisplayTime,
    TimeFormatError,
    format_time,
    from_milliseconds,
    parse_time,
    to_milliseconds,
    validate_time_input,
)
from swimbarriers.models.event import (
    STROKE_ORDER,
    VALID_DISTANCES,
    PoolCategory,
    PoolType,
    Stroke,
    SwimmingStyle,
)
from swimbarriers.models.race_record import RaceRecord
from swimbarriers.models.swimmer import Gender, Swimmer

__all__ = [
    # Barrier
    "BarrierCategory",
    "BarrierEvaluation",
    "BarrierProgress",
    "BarrierSummaryRow",
    "BarrierTier",
    "BarrierType",
    "BarrierValue",
    "TIER_ORDER",
    "next_tier",
    "tier_rank",
    # Duration
    "DisplayTime",
    "TIME_INPUT_PATTERN",
    "TimeFormatError",
    "format_time",
    "from_milliseconds",
    "parse_time",
    "to_milliseconds",
    "validate_time_input",
    # Event
    "PoolCategory",
    "PoolType",
    "STROKE_ORDER",
    "Stroke",
    "SwimmingStyle",
    "VALID_DISTANCES",
    # Race record
    "RaceRecord",
    # Swimmer
    "Gender",
    "Swimmer",
]
