"""Barrier evaluation: which barriers a swimmer has passed and what comes next.

Everything here is a pure function over already loaded models. Barriers
are nested: a faster (smaller) barrier time is harder, and passing it
implies passing every slower one, so the swimmer's standing is the
passed barrier with the smallest time.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from pydantic import BaseModel

from swimbarriers import get_logger
from swimbarriers.models.barrier import (
    TIER_ORDER,
    BarrierEvaluation,
    BarrierProgress,
    BarrierSummaryRow,
    BarrierValue,
    next_tier,
    tier_rank,
)
from swimbarriers.models.race_record import RaceRecord
from swimbarriers.models.swimmer import Gender

logger = get_logger(__name__)

T = TypeVar("T")

# Tier suggested as the first target when no barrier has been passed
FIRST_TIER = TIER_ORDER[0]


def applicable_barriers(
    age: int,
    gender: Gender,
    pool_type_id: str,
    swimming_style_id: str,
    barriers: Iterable[BarrierValue],
) -> list[BarrierValue]:
    """Select the barriers that apply to a swimmer in one category.

    Gender, pool, style and age must all match exactly. There is no
    "any age" wildcard. Returns an empty list when nothing matches, in no
    particular order.
    """
    return [
        barrier
        for barrier in barriers
        if _applies_to(barrier, age, gender)
        and barrier.pool_type_id == pool_type_id
        and barrier.swimming_style_id == swimming_style_id
    ]


def applicable_barriers_by_name(
    age: int,
    gender: Gender,
    pool_type_name: str,
    swimming_style_name: str,
    barriers: Iterable[BarrierValue],
) -> list[BarrierValue]:
    """Same selection as ``applicable_barriers``, keyed on resolved names.

    For catalogs loaded from files, where entries carry ``pool_type_name``
    and ``swimming_style_name`` rather than database ids. Entries without
    names never match.
    """
    return [
        barrier
        for barrier in barriers
        if _applies_to(barrier, age, gender)
        and barrier.pool_type_name == pool_type_name
        and barrier.swimming_style_name == swimming_style_name
    ]


def _applies_to(barrier: BarrierValue, age: int, gender: Gender) -> bool:
    return barrier.gender == gender and barrier.age == age


def sort_by_tier(items: Iterable[T], tier_of: Callable[[T], str]) -> list[T]:
    """Sort items into canonical tier order; unknown tiers go last, in input order."""
    return sorted(items, key=lambda item: tier_rank(tier_of(item)))


def evaluate_barriers(
    swimmer_time: int, barriers: Iterable[BarrierValue]
) -> list[BarrierEvaluation]:
    """Evaluate a best time against each barrier.

    A time equal to the barrier passes. Returns one result per barrier,
    passed or not, in canonical tier order.
    """
    results = [
        BarrierEvaluation(
            barrier_name=barrier.tier,
            achieved=barrier.is_passed_by(swimmer_time),
            swimmer_time=swimmer_time,
            barrier_time=barrier.time_milliseconds,
        )
        for barrier in barriers
    ]
    logger.debug(
        "barriers_evaluated",
        swimmer_time=swimmer_time,
        evaluated=len(results),
        achieved=sum(result.achieved for result in results),
    )
    return sort_by_tier(results, lambda result: result.barrier_name)


def _find_tier(barriers: Sequence[BarrierValue], tier: str | None) -> BarrierValue | None:
    if tier is None:
        return None
    return next((barrier for barrier in barriers if barrier.tier == tier), None)


def passed_barriers(
    swimmer_time: int, barriers: Iterable[BarrierValue]
) -> list[BarrierValue]:
    """Barriers the time equals or beats, hardest (smallest time) first."""
    passed = [barrier for barrier in barriers if barrier.is_passed_by(swimmer_time)]
    return sorted(passed, key=lambda barrier: barrier.time_milliseconds)


def best_achieved_and_next_target(
    swimmer_time: int, barriers: Iterable[BarrierValue]
) -> BarrierProgress:
    """Find the hardest barrier passed and the next one to aim for.

    Only call this when the swimmer has a recorded time in the category.

    Args:
        swimmer_time: Swimmer's best time in ms
        barriers: Barriers applicable to the swimmer in this category

    Returns:
        BarrierProgress where ``best_passed`` is the passed barrier with the
        smallest time and ``next_target`` is the barrier of the following
        tier. With nothing passed, the target is the first tier. Either is
        None when the matching barrier is not in ``barriers``.
    """
    barriers = list(barriers)
    passed = passed_barriers(swimmer_time, barriers)

    if not passed:
        return BarrierProgress(next_target=_find_tier(barriers, FIRST_TIER))

    best = passed[0]
    return BarrierProgress(
        best_passed=best,
        next_target=_find_tier(barriers, next_tier(best.tier)),
    )


# =============================================================================
# SWIMMER SUMMARY
# =============================================================================


def best_times_by_category(records: Iterable[RaceRecord]) -> dict[tuple[str, str], int]:
    """Best (smallest) time per (pool, style) for a swimmer's race records."""
    best_times: dict[tuple[str, str], int] = {}
    for record in records:
        key = (record.pool_type.value, record.swimming_style)
        current = best_times.get(key)
        if current is None or record.total_milliseconds < current:
            best_times[key] = record.total_milliseconds
    return best_times


def summarize_category(
    pool_type: str,
    swimming_style: str,
    best_time: int | None,
    barriers: Sequence[BarrierValue],
) -> BarrierSummaryRow:
    """Summarize a swimmer's standing in one category.

    Without a recorded time, the first tier is shown as the target.
    """
    row = BarrierSummaryRow(
        pool_type=pool_type,
        swimming_style=swimming_style,
        best_time=best_time,
    )

    if best_time is None:
        target = _find_tier(barriers, FIRST_TIER)
    else:
        progress = best_achieved_and_next_target(best_time, barriers)
        target = progress.next_target
        if progress.best_passed is not None:
            row.best_barrier_name = progress.best_passed.tier
            row.best_barrier_time = progress.best_passed.time_milliseconds
            row.all_passed_barriers = [
                barrier.tier for barrier in passed_barriers(best_time, barriers)
            ]

    if target is not None:
        row.next_barrier_name = target.tier
        row.next_barrier_time = target.time_milliseconds

    return row


def build_barrier_summary(
    records: Iterable[RaceRecord], barriers: Iterable[BarrierValue]
) -> list[BarrierSummaryRow]:
    """One summary row per category the swimmer has barriers for.

    ``barriers`` should already be limited to the swimmer's age and gender
    and carry resolved pool and style names; entries without them are
    skipped. Rows are sorted by pool, then style.
    """
    best_times = best_times_by_category(records)

    by_category: dict[tuple[str, str], list[BarrierValue]] = {}
    for barrier in barriers:
        if not barrier.pool_type_name or not barrier.swimming_style_name:
            continue
        key = (barrier.pool_type_name, barrier.swimming_style_name)
        by_category.setdefault(key, []).append(barrier)

    rows = [
        summarize_category(pool, style, best_times.get((pool, style)), category_barriers)
        for (pool, style), category_barriers in by_category.items()
    ]
    rows.sort(key=lambda row: (row.pool_type, row.swimming_style))

    logger.debug(
        "barrier_summary_built",
        categories=len(rows),
        with_times=sum(row.best_time is not None for row in rows),
    )
    return rows


# =============================================================================
# BARRIER CHART
# =============================================================================


class BarrierChartRow(BaseModel):
    """Female and male barrier for one tier, side by side."""

    tier: str
    female: BarrierValue | None = None
    male: BarrierValue | None = None


def barrier_chart(
    barriers: Iterable[BarrierValue],
    age: int,
    swimming_style_id: str,
    pool_type_id: str | None = None,
) -> list[BarrierChartRow]:
    """Lay out the barriers for one age and style, one row per tier.

    Every canonical tier gets a row, with None where no barrier is defined.
    When ``pool_type_id`` is omitted the first barrier found per tier and
    gender is used, whatever its pool.
    """
    selected = [
        barrier
        for barrier in barriers
        if barrier.age == age
        and barrier.swimming_style_id == swimming_style_id
        and (pool_type_id is None or barrier.pool_type_id == pool_type_id)
    ]

    rows = []
    for tier in TIER_ORDER:
        tier_barriers = [barrier for barrier in selected if barrier.tier == tier]
        rows.append(
            BarrierChartRow(
                tier=tier,
                female=next((b for b in tier_barriers if b.gender == Gender.FEMALE), None),
                male=next((b for b in tier_barriers if b.gender == Gender.MALE), None),
            )
        )
    return rows
