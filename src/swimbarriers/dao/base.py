"""Base DAO with Supabase client connection."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from supabase import Client, create_client

from swimbarriers.config import get_settings

T = TypeVar("T", bound=BaseModel)


class SupabaseClient:
    """Process-wide Supabase client, created on first use."""

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """Get or create the Supabase client from settings."""
        if cls._instance is None:
            settings = get_settings()
            cls._instance = create_client(settings.supabase_url, settings.database_key())
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (useful for testing)."""
        cls._instance = None


class BaseDAO(Generic[T]):
    """Base Data Access Object with common CRUD operations."""

    table_name: str
    model_class: type[T]

    # Columns the database fills in; never written by the DAO
    read_only_fields: set[str] = {"id", "created_at"}

    def __init__(self, client: Client | None = None):
        """Initialize the DAO.

        Args:
            client: Supabase client. If not provided, uses the shared client.
        """
        self.client = client or SupabaseClient.get_client()

    @property
    def table(self):
        """Get the table reference."""
        return self.client.table(self.table_name)

    def get_by_id(self, id: str) -> T | None:
        """Get a single record by ID, or None if not found."""
        result = self.table.select("*").eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def get_all(self, limit: int = 100, offset: int = 0) -> list[T]:
        """Get all records with pagination."""
        result = self.table.select("*").range(offset, offset + limit - 1).execute()
        return [self._to_model(row) for row in result.data]

    def create(self, model: T) -> T:
        """Insert a record and return it with its ID populated."""
        result = self.table.insert(self._to_db(model)).execute()
        return self._to_model(result.data[0])

    def update(self, id: str, model: T) -> T | None:
        """Replace a record's writable fields. Returns None if not found."""
        result = self.table.update(self._to_db(model)).eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def partial_update(self, id: str, updates: dict[str, Any]) -> T | None:
        """Update only the given fields; None values are ignored.

        Returns:
            The updated model, or None if not found
        """
        data = {k: v for k, v in updates.items() if v is not None}

        if not data:
            return self.get_by_id(id)

        result = self.table.update(data).eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def delete(self, id: str) -> bool:
        """Delete a record. Returns False if nothing was deleted.

        Row level security makes a forbidden delete look like a missing row.
        """
        result = self.table.delete().eq("id", id).execute()
        return len(result.data) > 0

    def count(self) -> int:
        """Get total count of records."""
        result = self.table.select("*", count="exact").execute()
        return result.count or 0

    def _to_model(self, row: dict) -> T:
        """Convert a database row to a model instance.

        Override this method for custom mapping logic.
        """
        return self.model_class(**row)

    def _to_db(self, model: T) -> dict:
        """Convert a model instance to a database row.

        Override this method for custom mapping logic.
        """
        return model.model_dump(
            mode="json",
            exclude_none=True,
            exclude=self.read_only_fields,
        )
