"""Swimmer API endpoints: profiles, barrier standing and progress.

The barrier endpoints load race records and the barrier catalog, then
hand plain models to the barrier calculation service.
"""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field, computed_field

from swimbarriers import bind_context, get_logger
from swimbarriers.api.dependencies import (
    BarrierValueDAODep,
    PoolTypeDAODep,
    RaceRecordDAODep,
    SwimmerDAODep,
    SwimmingStyleDAODep,
)
from swimbarriers.dao.swimmer_dao import SwimmerDAO
from swimbarriers.models.barrier import BarrierEvaluation, BarrierSummaryRow, BarrierValue
from swimbarriers.models.duration import format_time
from swimbarriers.models.event import PoolCategory
from swimbarriers.models.swimmer import Gender, Swimmer
from swimbarriers.services.barrier_calculation import (
    applicable_barriers,
    best_achieved_and_next_target,
    build_barrier_summary,
    evaluate_barriers,
)
from swimbarriers.services.chart_data import SeriesPoint, progress_series

logger = get_logger(__name__)

router = APIRouter(prefix="/swimmers", tags=["swimmers"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================


class SwimmerCreate(BaseModel):
    """Request body for adding a swimmer."""

    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    age: int = Field(ge=0)
    gender: Gender


class SwimmerUpdate(BaseModel):
    """Request body for updating a swimmer (partial)."""

    name: str | None = Field(default=None, min_length=1)
    surname: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, ge=0)
    gender: Gender | None = None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================


class BarrierEvaluationResponse(BaseModel):
    """Evaluation of a swimmer's best time in one category."""

    swimmer_id: str
    pool_type: PoolCategory
    swimming_style: str
    has_races: bool
    best_time: int | None = None
    evaluations: list[BarrierEvaluation] = []
    best_passed: BarrierValue | None = None
    next_target: BarrierValue | None = None
    time_to_next: int | None = None  # ms still to drop to reach next_target

    @computed_field
    @property
    def best_time_formatted(self) -> str | None:
        if self.best_time is None:
            return None
        return format_time(self.best_time)


class ProgressResponse(BaseModel):
    """A swimmer's races in one category as chart points."""

    swimmer_id: str
    pool_type: PoolCategory
    swimming_style: str
    points: list[SeriesPoint]


def _get_swimmer_or_404(swimmer_id: str, dao: SwimmerDAO) -> Swimmer:
    swimmer = dao.get_by_id(swimmer_id)
    if not swimmer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Swimmer not found")
    return swimmer


# =============================================================================
# CREATE
# =============================================================================


@router.post("", response_model=Swimmer, status_code=status.HTTP_201_CREATED)
def create_swimmer(data: SwimmerCreate, dao: SwimmerDAODep) -> Swimmer:
    """Add a swimmer to the club."""
    try:
        result = dao.create(Swimmer(**data.model_dump()))
        logger.info(
            "swimmer_created",
            swimmer_id=result.id,
            age=data.age,
            gender=data.gender.value,
        )
        return result

    except ValueError as e:
        logger.warning("swimmer_create_validation_failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error("swimmer_create_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create swimmer: {e}",
        ) from e


# =============================================================================
# READ
# =============================================================================


@router.get("", response_model=list[Swimmer])
def list_swimmers(dao: SwimmerDAODep) -> list[Swimmer]:
    """List all swimmers, most recently added first."""
    return dao.find_all()


@router.get("/{swimmer_id}", response_model=Swimmer)
def get_swimmer(swimmer_id: str, dao: SwimmerDAODep) -> Swimmer:
    """Get a swimmer by ID."""
    return _get_swimmer_or_404(swimmer_id, dao)


# =============================================================================
# UPDATE
# =============================================================================


@router.patch("/{swimmer_id}", response_model=Swimmer)
def update_swimmer(swimmer_id: str, data: SwimmerUpdate, dao: SwimmerDAODep) -> Swimmer:
    """Update a swimmer. Only provided fields are changed."""
    _get_swimmer_or_404(swimmer_id, dao)

    updates = data.model_dump(exclude_unset=True)
    if updates.get("gender") is not None:
        updates["gender"] = updates["gender"].value

    try:
        result = dao.partial_update(swimmer_id, updates)
    except Exception as e:
        logger.error("swimmer_update_error", swimmer_id=swimmer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update swimmer: {e}",
        ) from e

    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Swimmer not found")

    logger.info("swimmer_updated", swimmer_id=swimmer_id, updated_fields=list(updates.keys()))
    return result


# =============================================================================
# DELETE
# =============================================================================


@router.delete("/{swimmer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_swimmer(swimmer_id: str, dao: SwimmerDAODep) -> None:
    """Remove a swimmer. Their race records go with them (cascading delete)."""
    _get_swimmer_or_404(swimmer_id, dao)

    if not dao.delete(swimmer_id):
        # Row level security hides rows the caller may not delete
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Swimmer could not be deleted. You may not have permission.",
        )

    logger.info("swimmer_deleted", swimmer_id=swimmer_id)


# =============================================================================
# BARRIERS
# =============================================================================


@router.get("/{swimmer_id}/barriers", response_model=list[BarrierSummaryRow])
def get_barrier_summary(
    swimmer_id: str,
    swimmer_dao: SwimmerDAODep,
    race_dao: RaceRecordDAODep,
    barrier_dao: BarrierValueDAODep,
) -> list[BarrierSummaryRow]:
    """Best passed and next barrier for every category the swimmer has barriers in."""
    swimmer = _get_swimmer_or_404(swimmer_id, swimmer_dao)
    bind_context(swimmer_id=swimmer_id)

    records = race_dao.find_by_swimmer(swimmer_id)
    barriers = barrier_dao.find_for_swimmer(swimmer.age, swimmer.gender)
    rows = build_barrier_summary(records, barriers)

    logger.info(
        "barrier_summary_served",
        races=len(records),
        barriers=len(barriers),
        categories=len(rows),
    )
    return rows


@router.get("/{swimmer_id}/evaluation", response_model=BarrierEvaluationResponse)
def get_barrier_evaluation(
    swimmer_id: str,
    swimmer_dao: SwimmerDAODep,
    race_dao: RaceRecordDAODep,
    barrier_dao: BarrierValueDAODep,
    pool_type_dao: PoolTypeDAODep,
    style_dao: SwimmingStyleDAODep,
    pool_type: PoolCategory = Query(..., description="Pool length, 25m or 50m"),
    swimming_style: str = Query(..., description="Swimming style name"),
) -> BarrierEvaluationResponse:
    """Evaluate the swimmer's best time in one category against every tier.

    Returns ``has_races=false`` (not an error) when the swimmer has no race
    in the category.
    """
    swimmer = _get_swimmer_or_404(swimmer_id, swimmer_dao)
    bind_context(swimmer_id=swimmer_id)

    response = BarrierEvaluationResponse(
        swimmer_id=swimmer_id,
        pool_type=pool_type,
        swimming_style=swimming_style,
        has_races=False,
    )

    best_race = race_dao.find_best_time(swimmer_id, pool_type, swimming_style)
    if best_race is None:
        return response

    pool = pool_type_dao.find_by_name(pool_type)
    style = style_dao.find_by_name(swimming_style)
    if pool is None or style is None:
        logger.warning(
            "barrier_evaluation_unknown_category",
            pool_type=pool_type.value,
            swimming_style=swimming_style,
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown pool type or swimming style: {pool_type.value} {swimming_style}",
        )

    best_time = best_race.total_milliseconds
    barriers = applicable_barriers(
        swimmer.age,
        swimmer.gender,
        pool.id,
        style.id,
        barrier_dao.find_for_swimmer(swimmer.age, swimmer.gender),
    )
    progress = best_achieved_and_next_target(best_time, barriers)

    response.has_races = True
    response.best_time = best_time
    response.evaluations = evaluate_barriers(best_time, barriers)
    response.best_passed = progress.best_passed
    response.next_target = progress.next_target
    response.time_to_next = progress.time_to_next(best_time)

    logger.info(
        "barrier_evaluation_served",
        best_time=best_time,
        barriers=len(barriers),
        best_passed=progress.best_passed.tier if progress.best_passed else None,
        next_target=progress.next_target.tier if progress.next_target else None,
    )
    return response


@router.get("/{swimmer_id}/progress", response_model=ProgressResponse)
def get_progress(
    swimmer_id: str,
    swimmer_dao: SwimmerDAODep,
    race_dao: RaceRecordDAODep,
    pool_type: PoolCategory = Query(..., description="Pool length, 25m or 50m"),
    swimming_style: str = Query(..., description="Swimming style name"),
) -> ProgressResponse:
    """Chart points for the swimmer's races in one category, oldest first."""
    _get_swimmer_or_404(swimmer_id, swimmer_dao)

    records = race_dao.find_by_swimmer_and_style(swimmer_id, pool_type, swimming_style)
    return ProgressResponse(
        swimmer_id=swimmer_id,
        pool_type=pool_type,
        swimming_style=swimming_style,
        points=progress_series(records),
    )
