"""Race record API endpoints.

Times can be sent either as ``MM:SS:cc`` text (``time``) or as raw
milliseconds (``total_milliseconds``).
"""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from swimbarriers import get_logger
from swimbarriers.api.dependencies import RaceRecordDAODep
from swimbarriers.api.schemas import resolve_milliseconds
from swimbarriers.models.event import PoolCategory
from swimbarriers.models.race_record import RaceRecord

logger = get_logger(__name__)

router = APIRouter(prefix="/races", tags=["races"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================


class RaceRecordCreate(BaseModel):
    """Request body for recording a race."""

    swimmer_id: str
    pool_type: PoolCategory
    swimming_style: str
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900)
    time: str | None = Field(default=None, description="Race time as MM:SS:cc")
    total_milliseconds: int | None = Field(default=None, ge=0)


class RaceRecordUpdate(BaseModel):
    """Request body for updating a race (partial)."""

    pool_type: PoolCategory | None = None
    swimming_style: str | None = None
    month: int | None = Field(default=None, ge=1, le=12)
    year: int | None = Field(default=None, ge=1900)
    time: str | None = Field(default=None, description="Race time as MM:SS:cc")
    total_milliseconds: int | None = Field(default=None, ge=0)


# =============================================================================
# CREATE
# =============================================================================


@router.post("", response_model=RaceRecord, status_code=status.HTTP_201_CREATED)
def create_race(data: RaceRecordCreate, dao: RaceRecordDAODep) -> RaceRecord:
    """Record a new race time."""
    try:
        total_milliseconds = resolve_milliseconds(data.time, data.total_milliseconds)
        if total_milliseconds is None:
            raise ValueError("A race time is required")

        record = RaceRecord(
            swimmer_id=data.swimmer_id,
            pool_type=data.pool_type,
            swimming_style=data.swimming_style,
            month=data.month,
            year=data.year,
            total_milliseconds=total_milliseconds,
        )
        result = dao.create(record)

        logger.info(
            "race_record_created",
            race_id=result.id,
            swimmer_id=data.swimmer_id,
            pool_type=data.pool_type.value,
            swimming_style=data.swimming_style,
            total_milliseconds=total_milliseconds,
        )
        return result

    except ValueError as e:
        logger.warning("race_record_create_validation_failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error("race_record_create_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create race record: {e}",
        ) from e


# =============================================================================
# READ
# =============================================================================


@router.get("", response_model=list[RaceRecord])
def list_races(
    dao: RaceRecordDAODep,
    swimmer_id: str = Query(..., description="Swimmer whose races to list"),
) -> list[RaceRecord]:
    """List a swimmer's races, most recent first."""
    return dao.find_by_swimmer(swimmer_id)


@router.get("/{race_id}", response_model=RaceRecord)
def get_race(race_id: str, dao: RaceRecordDAODep) -> RaceRecord:
    """Get a specific race by ID."""
    result = dao.get_by_id(race_id)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Race record not found")
    return result


# =============================================================================
# UPDATE
# =============================================================================


@router.patch("/{race_id}", response_model=RaceRecord)
def update_race(race_id: str, data: RaceRecordUpdate, dao: RaceRecordDAODep) -> RaceRecord:
    """Update a race. Only provided fields are changed."""
    existing = dao.get_by_id(race_id)
    if not existing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Race record not found")

    try:
        updates = data.model_dump(exclude_unset=True, exclude={"time", "total_milliseconds"})
        total_milliseconds = resolve_milliseconds(data.time, data.total_milliseconds)
        if total_milliseconds is not None:
            updates["total_milliseconds"] = total_milliseconds
        if updates.get("pool_type") is not None:
            updates["pool_type"] = updates["pool_type"].value

        result = dao.partial_update(race_id, updates)
        if not result:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Race record not found"
            )

        logger.info("race_record_updated", race_id=race_id, updated_fields=list(updates.keys()))
        return result

    except ValueError as e:
        logger.warning("race_record_update_validation_failed", race_id=race_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except HTTPException:
        raise
    except Exception as e:
        logger.error("race_record_update_error", race_id=race_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update race record: {e}",
        ) from e


# =============================================================================
# DELETE
# =============================================================================


@router.delete("/{race_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_race(race_id: str, dao: RaceRecordDAODep) -> None:
    """Delete a race."""
    existing = dao.get_by_id(race_id)
    if not existing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Race record not found")

    if not dao.delete(race_id):
        # Row level security hides rows the caller may not delete
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Race record could not be deleted. You may not have permission.",
        )

    logger.info("race_record_deleted", race_id=race_id, swimmer_id=existing.swimmer_id)
