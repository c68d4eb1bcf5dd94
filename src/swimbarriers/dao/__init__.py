"""Data Access Objects for Supabase database operations."""

from swimbarriers.dao.barrier_value_dao import BarrierValueDAO
from swimbarriers.dao.base import BaseDAO, SupabaseClient
from swimbarriers.dao.race_record_dao import RaceRecordDAO
from swimbarriers.dao.reference_dao import BarrierTypeDAO, PoolTypeDAO, SwimmingStyleDAO
from swimbarriers.dao.swimmer_dao import SwimmerDAO

__all__ = [
    "BarrierTypeDAO",
    "BarrierValueDAO",
    "BaseDAO",
    "PoolTypeDAO",
    "RaceRecordDAO",
    "SupabaseClient",
    "SwimmerDAO",
    "SwimmingStyleDAO",
]
