"""Barrier catalog API endpoints.

Barrier times can be sent as ``MM:SS:cc`` text (``time``) or as raw
milliseconds (``time_milliseconds``).
"""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from swimbarriers import get_logger
from swimbarriers.api.dependencies import BarrierValueDAODep
from swimbarriers.api.schemas import resolve_milliseconds
from swimbarriers.models.barrier import BarrierValue
from swimbarriers.models.swimmer import Gender
from swimbarriers.services.barrier_calculation import BarrierChartRow, barrier_chart

logger = get_logger(__name__)

router = APIRouter(prefix="/barriers", tags=["barriers"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================


class BarrierValueCreate(BaseModel):
    """Request body for adding a barrier to the catalog."""

    barrier_type_id: str
    swimming_style_id: str
    pool_type_id: str
    age: int = Field(ge=0)
    gender: Gender
    time: str | None = Field(default=None, description="Barrier time as MM:SS:cc")
    time_milliseconds: int | None = Field(default=None, ge=0)


class BarrierValueUpdate(BaseModel):
    """Request body for updating a barrier (partial)."""

    barrier_type_id: str | None = None
    swimming_style_id: str | None = None
    pool_type_id: str | None = None
    age: int | None = Field(default=None, ge=0)
    gender: Gender | None = None
    time: str | None = Field(default=None, description="Barrier time as MM:SS:cc")
    time_milliseconds: int | None = Field(default=None, ge=0)


# =============================================================================
# READ
# =============================================================================


@router.get("", response_model=list[BarrierValue])
def list_barriers(
    dao: BarrierValueDAODep,
    age: int | None = Query(None, ge=0, description="Filter by age"),
    gender: Gender | None = Query(None, description="Filter by gender"),
    pool_type_id: str | None = Query(None, description="Filter by pool type"),
    swimming_style_id: str | None = Query(None, description="Filter by swimming style"),
    limit: int = Query(500, ge=1, le=2000),
) -> list[BarrierValue]:
    """Search the barrier catalog."""
    return dao.search(
        age=age,
        gender=gender,
        pool_type_id=pool_type_id,
        swimming_style_id=swimming_style_id,
        limit=limit,
    )


@router.get("/chart", response_model=list[BarrierChartRow])
def get_barrier_chart(
    dao: BarrierValueDAODep,
    age: int = Query(..., ge=0, description="Age to chart"),
    swimming_style_id: str = Query(..., description="Swimming style to chart"),
    pool_type_id: str | None = Query(None, description="Limit to one pool type"),
) -> list[BarrierChartRow]:
    """Female and male barrier per tier for one age and style."""
    barriers = dao.search(age=age, swimming_style_id=swimming_style_id)
    return barrier_chart(barriers, age, swimming_style_id, pool_type_id)


@router.get("/{barrier_id}", response_model=BarrierValue)
def get_barrier(barrier_id: str, dao: BarrierValueDAODep) -> BarrierValue:
    """Get a barrier by ID."""
    result = dao.get_by_id(barrier_id)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Barrier not found")
    return result


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================


@router.post("", response_model=BarrierValue, status_code=status.HTTP_201_CREATED)
def create_barrier(data: BarrierValueCreate, dao: BarrierValueDAODep) -> BarrierValue:
    """Add a barrier to the catalog."""
    try:
        time_milliseconds = resolve_milliseconds(data.time, data.time_milliseconds)
        if time_milliseconds is None:
            raise ValueError("A barrier time is required")

        barrier = BarrierValue(
            barrier_type_id=data.barrier_type_id,
            swimming_style_id=data.swimming_style_id,
            pool_type_id=data.pool_type_id,
            tier="",  # Resolved from barrier_type_id on read
            age=data.age,
            gender=data.gender,
            time_milliseconds=time_milliseconds,
        )
        result = dao.create(barrier)

        logger.info(
            "barrier_created",
            barrier_id=result.id,
            tier=result.tier,
            age=data.age,
            gender=data.gender.value,
            time_milliseconds=time_milliseconds,
        )
        return result

    except ValueError as e:
        logger.warning("barrier_create_validation_failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error("barrier_create_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create barrier: {e}",
        ) from e


@router.patch("/{barrier_id}", response_model=BarrierValue)
def update_barrier(
    barrier_id: str, data: BarrierValueUpdate, dao: BarrierValueDAODep
) -> BarrierValue:
    """Update a barrier. Only provided fields are changed."""
    existing = dao.get_by_id(barrier_id)
    if not existing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Barrier not found")

    try:
        updates = data.model_dump(exclude_unset=True, exclude={"time", "time_milliseconds"})
        time_milliseconds = resolve_milliseconds(data.time, data.time_milliseconds)
        if time_milliseconds is not None:
            updates["time_milliseconds"] = time_milliseconds
        if updates.get("gender") is not None:
            updates["gender"] = updates["gender"].value

        result = dao.partial_update(barrier_id, updates)
        if not result:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Barrier not found")

        logger.info("barrier_updated", barrier_id=barrier_id, updated_fields=list(updates.keys()))
        return result

    except ValueError as e:
        logger.warning("barrier_update_validation_failed", barrier_id=barrier_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.error("barrier_update_error", barrier_id=barrier_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update barrier: {e}",
        ) from e


@router.delete("/{barrier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_barrier(barrier_id: str, dao: BarrierValueDAODep) -> None:
    """Remove a barrier from the catalog."""
    existing = dao.get_by_id(barrier_id)
    if not existing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Barrier not found")

    if not dao.delete(barrier_id):
        # Row level security hides rows the caller may not delete
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Barrier could not be deleted. You may not have permission.",
        )

    logger.info("barrier_deleted", barrier_id=barrier_id, tier=existing.tier)
