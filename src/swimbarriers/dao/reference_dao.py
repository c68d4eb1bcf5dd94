"""Data Access Objects for reference data: pools, styles and barrier types."""

from supabase import Client
from swimbarriers.dao.base import BaseDAO
from swimbarriers.models.barrier import BarrierType
from swimbarriers.models.event import PoolCategory, PoolType, SwimmingStyle


class PoolTypeDAO(BaseDAO[PoolType]):
    """DAO for PoolType entities."""

    table_name = "pool_types"
    model_class = PoolType

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_all(self) -> list[PoolType]:
        """All pool types, shortest first."""
        result = self.table.select("*").order("length_meters").execute()
        return [self._to_model(row) for row in result.data]

    def find_by_name(self, name: PoolCategory) -> PoolType | None:
        """Find a pool type by its name (``25m`` or ``50m``)."""
        result = self.table.select("*").eq("name", name.value).limit(1).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])


class SwimmingStyleDAO(BaseDAO[SwimmingStyle]):
    """DAO for SwimmingStyle entities."""

    table_name = "swimming_styles"
    model_class = SwimmingStyle

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_all(self) -> list[SwimmingStyle]:
        """All swimming styles, ordered by stroke then distance."""
        result = self.table.select("*").order("distance_meters").execute()
        styles = [self._to_model(row) for row in result.data]
        return sorted(styles, key=lambda style: style.sort_key)

    def find_by_name(self, name: str) -> SwimmingStyle | None:
        """Find a swimming style by the name used on race records."""
        result = self.table.select("*").eq("name", name).limit(1).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])


class BarrierTypeDAO(BaseDAO[BarrierType]):
    """DAO for BarrierType entities."""

    table_name = "barrier_types"
    model_class = BarrierType

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_all(self) -> list[BarrierType]:
        """All barrier types, ordered by name."""
        result = self.table.select("*").order("name").execute()
        return [self._to_model(row) for row in result.data]
