"""Reference data endpoints: pool types, swimming styles, barrier types."""

from fastapi import APIRouter

from swimbarriers.api.dependencies import BarrierTypeDAODep, PoolTypeDAODep, SwimmingStyleDAODep
from swimbarriers.models.barrier import BarrierType
from swimbarriers.models.event import PoolType, SwimmingStyle

router = APIRouter(tags=["reference"])


@router.get("/pool-types", response_model=list[PoolType])
def list_pool_types(dao: PoolTypeDAODep) -> list[PoolType]:
    """All pool types, shortest first."""
    return dao.find_all()


@router.get("/swimming-styles", response_model=list[SwimmingStyle])
def list_swimming_styles(dao: SwimmingStyleDAODep) -> list[SwimmingStyle]:
    """All swimming styles, by stroke then distance."""
    return dao.find_all()


@router.get("/barrier-types", response_model=list[BarrierType])
def list_barrier_types(dao: BarrierTypeDAODep) -> list[BarrierType]:
    """All barrier types."""
    return dao.find_all()
