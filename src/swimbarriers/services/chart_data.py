"""Progress chart data for a swimmer's races in one category."""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from swimbarriers.models.duration import format_time
from swimbarriers.models.race_record import RaceRecord


class SeriesPoint(BaseModel):
    """One race on a progress chart.

    ``difference`` is the change from the previous race in ms (negative =
    faster). The first point of a series has no difference.
    """

    label: str  # "month/year", e.g. "3/2024"
    time: int
    formatted_time: str
    difference: int | None = None


def prepare_series(records: Iterable[RaceRecord]) -> list[SeriesPoint]:
    """Turn race records into chart points, oldest race first.

    Every record becomes exactly one point. Races in the same month keep
    their input order.
    """
    ordered = sorted(records, key=lambda record: record.period_index)
    return [
        SeriesPoint(
            label=f"{record.month}/{record.year}",
            time=record.total_milliseconds,
            formatted_time=format_time(record.total_milliseconds),
        )
        for record in ordered
    ]


def with_deltas(points: Sequence[SeriesPoint]) -> list[SeriesPoint]:
    """Annotate each point with its change from the previous point.

    Expects points already in chronological order (see ``prepare_series``).
    Returns new points; the input is left untouched.
    """
    annotated: list[SeriesPoint] = []
    previous: SeriesPoint | None = None

    for point in points:
        difference = None if previous is None else point.time - previous.time
        annotated.append(point.model_copy(update={"difference": difference}))
        previous = point

    return annotated


def progress_series(records: Iterable[RaceRecord]) -> list[SeriesPoint]:
    """Chronological chart points with race-to-race differences."""
    return with_deltas(prepare_series(records))
