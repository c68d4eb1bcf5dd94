"""Data Access Object for Barrier Values (the barrier catalog)."""

from typing import Any

from supabase import Client
from swimbarriers.dao.base import BaseDAO
from swimbarriers.models.barrier import BarrierValue
from swimbarriers.models.swimmer import Gender

# Barrier values with the names of their tier, pool and style
SELECT_WITH_DETAILS = "*, barrier_types(name), pool_types(name), swimming_styles(name)"

UNKNOWN_TIER = "Unknown"


def _joined_name(row: dict, relation: str) -> str | None:
    """Name from an embedded relation, or None if the join is missing."""
    joined = row.get(relation)
    if isinstance(joined, list):
        joined = joined[0] if joined else None
    if not joined:
        return None
    return joined.get("name")


class BarrierValueDAO(BaseDAO[BarrierValue]):
    """DAO for BarrierValue entities.

    Rows are always read together with their barrier type, pool type and
    swimming style so the returned models carry resolved names.
    """

    table_name = "barrier_values"
    model_class = BarrierValue

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def get_by_id(self, id: str) -> BarrierValue | None:
        """Get a single barrier value by ID."""
        result = self.table.select(SELECT_WITH_DETAILS).eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def create(self, model: BarrierValue) -> BarrierValue:
        """Create a barrier value and return it with resolved names."""
        result = self.table.insert(self._to_db(model)).execute()
        row = result.data[0]
        return self.get_by_id(row["id"]) or self._to_model(row)

    def partial_update(self, id: str, updates: dict[str, Any]) -> BarrierValue | None:
        """Update specific fields of a barrier value.

        Returns:
            Updated BarrierValue or None if not found
        """
        data = {k: v for k, v in updates.items() if v is not None}

        if data:
            result = self.table.update(data).eq("id", id).execute()
            if not result.data:
                return None

        return self.get_by_id(id)

    def find_with_details(self) -> list[BarrierValue]:
        """All barrier values, ordered by age then gender."""
        result = (
            self.table.select(SELECT_WITH_DETAILS)
            .order("age")
            .order("gender")
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def find_for_swimmer(self, age: int, gender: Gender) -> list[BarrierValue]:
        """All barrier values for a swimmer's age and gender, across categories."""
        result = (
            self.table.select(SELECT_WITH_DETAILS)
            .eq("age", age)
            .eq("gender", gender.value)
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def find_for_category(
        self,
        age: int,
        gender: Gender,
        pool_type_id: str,
        swimming_style_id: str,
    ) -> list[BarrierValue]:
        """Barrier values for one age, gender, pool and style (one per tier)."""
        result = (
            self.table.select(SELECT_WITH_DETAILS)
            .eq("age", age)
            .eq("gender", gender.value)
            .eq("pool_type_id", pool_type_id)
            .eq("swimming_style_id", swimming_style_id)
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def search(
        self,
        age: int | None = None,
        gender: Gender | None = None,
        pool_type_id: str | None = None,
        swimming_style_id: str | None = None,
        barrier_type_id: str | None = None,
        limit: int = 500,
    ) -> list[BarrierValue]:
        """Search barrier values with optional filters."""
        query = self.table.select(SELECT_WITH_DETAILS)

        if age is not None:
            query = query.eq("age", age)
        if gender:
            query = query.eq("gender", gender.value)
        if pool_type_id:
            query = query.eq("pool_type_id", pool_type_id)
        if swimming_style_id:
            query = query.eq("swimming_style_id", swimming_style_id)
        if barrier_type_id:
            query = query.eq("barrier_type_id", barrier_type_id)

        result = query.order("age").order("gender").limit(limit).execute()
        return [self._to_model(row) for row in result.data]

    def _to_model(self, row: dict) -> BarrierValue:
        """Convert a (joined) database row to a BarrierValue model."""
        return BarrierValue(
            id=row["id"] if row.get("id") else None,
            barrier_type_id=row["barrier_type_id"],
            swimming_style_id=row["swimming_style_id"],
            pool_type_id=row["pool_type_id"],
            tier=_joined_name(row, "barrier_types") or UNKNOWN_TIER,
            pool_type_name=_joined_name(row, "pool_types"),
            swimming_style_name=_joined_name(row, "swimming_styles"),
            age=row["age"],
            gender=Gender(row["gender"]),
            time_milliseconds=row["time_milliseconds"],
        )

    def _to_db(self, model: BarrierValue) -> dict:
        """Convert BarrierValue model to database row (names are not stored)."""
        return {
            "barrier_type_id": model.barrier_type_id,
            "swimming_style_id": model.swimming_style_id,
            "pool_type_id": model.pool_type_id,
            "age": model.age,
            "gender": model.gender.value,
            "time_milliseconds": model.time_milliseconds,
        }
