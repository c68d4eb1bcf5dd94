"""Fixtures for DAO tests.

DAOs are given a stub client that records the query built against it and
returns canned rows, so row mapping can be checked without a database.
"""

from types import SimpleNamespace

import pytest


class StubQuery:
    """Chainable stand-in for a postgrest query builder."""

    def __init__(self, rows: list[dict]):
        self.rows = rows
        self.calls: list[tuple] = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return record

    def execute(self):
        return SimpleNamespace(data=self.rows, count=len(self.rows))


class StubClient:
    """Stand-in for ``supabase.Client`` returning the same rows for every table."""

    def __init__(self, rows: list[dict] | None = None):
        self.query = StubQuery(rows or [])
        self.tables: list[str] = []

    def table(self, name: str) -> StubQuery:
        self.tables.append(name)
        return self.query


@pytest.fixture
def stub_client():
    """Factory for stub clients holding the given rows."""
    return StubClient
