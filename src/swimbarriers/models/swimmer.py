"""Swimmer model."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class Gender(StrEnum):
    """Swimmer gender for competition purposes."""

    MALE = "M"
    FEMALE = "F"


class Swimmer(BaseModel):
    """A club swimmer.

    Age is stored on the swimmer (not derived from a birth date) because
    barriers are published per competition age.
    """

    id: str | None = None
    name: str
    surname: str
    age: int = Field(ge=0)
    gender: Gender
    user_id: str | None = None  # Linked login account, if any
    created_at: datetime | None = None

    def __str__(self) -> str:
        return f"{self.name} {self.surname}"
