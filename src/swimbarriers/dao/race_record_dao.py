"""Data Access Object for Race Records."""

from supabase import Client
from swimbarriers.dao.base import BaseDAO
from swimbarriers.models.event import PoolCategory
from swimbarriers.models.race_record import RaceRecord


class RaceRecordDAO(BaseDAO[RaceRecord]):
    """DAO for RaceRecord entities."""

    table_name = "race_records"
    model_class = RaceRecord

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_by_swimmer(self, swimmer_id: str) -> list[RaceRecord]:
        """Find all races for a swimmer, most recent first."""
        result = (
            self.table.select("*")
            .eq("swimmer_id", swimmer_id)
            .order("year", desc=True)
            .order("month", desc=True)
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def find_by_swimmer_and_style(
        self, swimmer_id: str, pool_type: PoolCategory, swimming_style: str
    ) -> list[RaceRecord]:
        """Find a swimmer's races in one category, oldest first.

        Args:
            swimmer_id: The swimmer's ID
            pool_type: Pool length the races were swum in
            swimming_style: Swimming style name

        Returns:
            List of RaceRecords in chronological order
        """
        result = (
            self.table.select("*")
            .eq("swimmer_id", swimmer_id)
            .eq("pool_type", pool_type.value)
            .eq("swimming_style", swimming_style)
            .order("year")
            .order("month")
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def find_best_time(
        self, swimmer_id: str, pool_type: PoolCategory, swimming_style: str
    ) -> RaceRecord | None:
        """Find a swimmer's fastest race in one category.

        Returns:
            The fastest RaceRecord or None if the swimmer has no races there
        """
        result = (
            self.table.select("*")
            .eq("swimmer_id", swimmer_id)
            .eq("pool_type", pool_type.value)
            .eq("swimming_style", swimming_style)
            .order("total_milliseconds")
            .limit(1)
            .execute()
        )

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def _to_model(self, row: dict) -> RaceRecord:
        """Convert database row to RaceRecord model."""
        return RaceRecord(
            id=row["id"] if row.get("id") else None,
            swimmer_id=row["swimmer_id"],
            pool_type=PoolCategory(row["pool_type"]),
            swimming_style=row["swimming_style"],
            month=row["month"],
            year=row["year"],
            total_milliseconds=row["total_milliseconds"],
            created_at=row.get("created_at"),
        )

    def _to_db(self, model: RaceRecord) -> dict:
        """Convert RaceRecord model to database row."""
        return {
            "swimmer_id": model.swimmer_id,
            "pool_type": model.pool_type.value,
            "swimming_style": model.swimming_style,
            "month": model.month,
            "year": model.year,
            "total_milliseconds": model.total_milliseconds,
        }
