"""Data Access Object for Swimmers."""

from supabase import Client
from swimbarriers.dao.base import BaseDAO
from swimbarriers.models.swimmer import Swimmer


class SwimmerDAO(BaseDAO[Swimmer]):
    """DAO for Swimmer entities."""

    table_name = "swimmers"
    model_class = Swimmer

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_all(self) -> list[Swimmer]:
        """All swimmers, most recently added first."""
        result = self.table.select("*").order("created_at", desc=True).execute()
        return [self._to_model(row) for row in result.data]
