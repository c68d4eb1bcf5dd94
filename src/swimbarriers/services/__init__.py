"""Service layer: barrier evaluation and progress charts."""

from swimbarriers.services.barrier_calculation import (
    FIRST_TIER,
    BarrierChartRow,
    applicable_barriers,
    applicable_barriers_by_name,
    barrier_chart,
    best_achieved_and_next_target,
    best_times_by_category,
    build_barrier_summary,
    evaluate_barriers,
    passed_barriers,
    sort_by_tier,
    summarize_category,
)
from swimbarriers.services.chart_data import (
    SeriesPoint,
    prepare_series,
    progress_series,
    with_deltas,
)

__all__ = [
    "applicable_barriers",
    "applicable_barriers_by_name",
    "barrier_chart",
    "BarrierChartRow",
    "best_achieved_and_next_target",
    "best_times_by_category",
    "build_barrier_summary",
    "evaluate_barriers",
    "FIRST_TIER",
    "passed_barriers",
    "prepare_series",
    "progress_series",
    "SeriesPoint",
    "sort_by_tier",
    "summarize_category",
    "with_deltas",
]
