"""FastAPI dependencies for dependency injection.

Usage in routes:
    from swimbarriers.api.dependencies import RaceRecordDAODep

    @router.get("/races")
    def list_races(swimmer_id: str, dao: RaceRecordDAODep):
        return dao.find_by_swimmer(swimmer_id)

Tests replace ``get_supabase`` or the individual DAO getters through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client, create_client

from swimbarriers.config import Settings, get_settings
from swimbarriers.dao.barrier_value_dao import BarrierValueDAO
from swimbarriers.dao.race_record_dao import RaceRecordDAO
from swimbarriers.dao.reference_dao import BarrierTypeDAO, PoolTypeDAO, SwimmingStyleDAO
from swimbarriers.dao.swimmer_dao import SwimmerDAO


def get_settings_dep() -> Settings:
    """Get application settings (dependency wrapper)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


@lru_cache
def get_supabase_client(supabase_url: str, supabase_key: str) -> Client:
    """Create cached Supabase client."""
    return create_client(supabase_url, supabase_key)


def get_supabase(settings: SettingsDep) -> Client:
    """Get Supabase client for database operations."""
    return get_supabase_client(settings.supabase_url, settings.database_key())


SupabaseDep = Annotated[Client, Depends(get_supabase)]


def get_swimmer_dao(client: SupabaseDep) -> SwimmerDAO:
    return SwimmerDAO(client)


def get_race_record_dao(client: SupabaseDep) -> RaceRecordDAO:
    return RaceRecordDAO(client)


def get_barrier_value_dao(client: SupabaseDep) -> BarrierValueDAO:
    return BarrierValueDAO(client)


def get_pool_type_dao(client: SupabaseDep) -> PoolTypeDAO:
    return PoolTypeDAO(client)


def get_swimming_style_dao(client: SupabaseDep) -> SwimmingStyleDAO:
    return SwimmingStyleDAO(client)


def get_barrier_type_dao(client: SupabaseDep) -> BarrierTypeDAO:
    return BarrierTypeDAO(client)


SwimmerDAODep = Annotated[SwimmerDAO, Depends(get_swimmer_dao)]
RaceRecordDAODep = Annotated[RaceRecordDAO, Depends(get_race_record_dao)]
BarrierValueDAODep = Annotated[BarrierValueDAO, Depends(get_barrier_value_dao)]
PoolTypeDAODep = Annotated[PoolTypeDAO, Depends(get_pool_type_dao)]
SwimmingStyleDAODep = Annotated[SwimmingStyleDAO, Depends(get_swimming_style_dao)]
BarrierTypeDAODep = Annotated[BarrierTypeDAO, Depends(get_barrier_type_dao)]
