"""Fixtures for API tests.

The DAO dependencies are overridden with in-memory fakes seeded with a
small catalog, so the API can be exercised without a database.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from swimbarriers.api.app import create_app
from swimbarriers.api.dependencies import (
    get_barrier_type_dao,
    get_barrier_value_dao,
    get_pool_type_dao,
    get_race_record_dao,
    get_swimmer_dao,
    get_swimming_style_dao,
)
from swimbarriers.models import (
    BarrierType,
    BarrierValue,
    Gender,
    PoolCategory,
    PoolType,
    RaceRecord,
    Stroke,
    Swimmer,
    SwimmingStyle,
)
from swimbarriers.models.barrier import TIER_ORDER, BarrierCategory

SWIMMER_ID = "swimmer-ada"
POOL_25_ID = "pool-25"
POOL_50_ID = "pool-50"
FREE_50_ID = "style-50-free"
BACK_50_ID = "style-50-back"


class FakeDAO:
    """In-memory store with the BaseDAO CRUD surface."""

    def __init__(self, items=()):
        self.items = {item.id: item for item in items}

    def get_by_id(self, id):
        return self.items.get(id)

    def create(self, model):
        created = model.model_copy(update={"id": str(uuid4())})
        self.items[created.id] = created
        return created

    def partial_update(self, id, updates):
        existing = self.items.get(id)
        if existing is None:
            return None
        data = {k: v for k, v in updates.items() if v is not None}
        updated = type(existing).model_validate({**existing.model_dump(), **data})
        self.items[id] = updated
        return updated

    def delete(self, id):
        return self.items.pop(id, None) is not None


class FakeSwimmerDAO(FakeDAO):
    def find_all(self):
        return list(self.items.values())


class FakeRaceRecordDAO(FakeDAO):
    def _category(self, swimmer_id, pool_type, swimming_style):
        return [
            record
            for record in self.items.values()
            if record.swimmer_id == swimmer_id
            and record.pool_type == pool_type
            and record.swimming_style == swimming_style
        ]

    def find_by_swimmer(self, swimmer_id):
        records = [r for r in self.items.values() if r.swimmer_id == swimmer_id]
        return sorted(records, key=lambda r: r.period_index, reverse=True)

    def find_by_swimmer_and_style(self, swimmer_id, pool_type, swimming_style):
        records = self._category(swimmer_id, pool_type, swimming_style)
        return sorted(records, key=lambda r: r.period_index)

    def find_best_time(self, swimmer_id, pool_type, swimming_style):
        records = self._category(swimmer_id, pool_type, swimming_style)
        return min(records, key=lambda r: r.total_milliseconds, default=None)


class FakeBarrierValueDAO(FakeDAO):
    """Resolves tier and names from the reference fakes, like the joined select."""

    def __init__(self, items, pool_types, styles, barrier_types):
        self.pool_types = pool_types
        self.styles = styles
        self.barrier_types = barrier_types
        super().__init__(self._resolve(item) for item in items)

    def _resolve(self, barrier):
        barrier_type = self.barrier_types.get_by_id(barrier.barrier_type_id)
        pool = self.pool_types.get_by_id(barrier.pool_type_id)
        style = self.styles.get_by_id(barrier.swimming_style_id)
        return barrier.model_copy(
            update={
                "tier": barrier_type.name if barrier_type else "Unknown",
                "pool_type_name": pool.name.value if pool else None,
                "swimming_style_name": style.name if style else None,
            }
        )

    def create(self, model):
        return super().create(self._resolve(model))

    def partial_update(self, id, updates):
        updated = super().partial_update(id, updates)
        if updated is None:
            return None
        self.items[id] = self._resolve(updated)
        return self.items[id]

    def find_for_swimmer(self, age, gender):
        return [b for b in self.items.values() if b.age == age and b.gender == gender]

    def search(
        self,
        age=None,
        gender=None,
        pool_type_id=None,
        swimming_style_id=None,
        barrier_type_id=None,
        limit=500,
    ):
        results = [
            b
            for b in self.items.values()
            if (age is None or b.age == age)
            and (gender is None or b.gender == gender)
            and (pool_type_id is None or b.pool_type_id == pool_type_id)
            and (swimming_style_id is None or b.swimming_style_id == swimming_style_id)
            and (barrier_type_id is None or b.barrier_type_id == barrier_type_id)
        ]
        return results[:limit]


class FakePoolTypeDAO(FakeDAO):
    def find_all(self):
        return sorted(self.items.values(), key=lambda p: p.length_meters)

    def find_by_name(self, name):
        return next((p for p in self.items.values() if p.name == name), None)


class FakeSwimmingStyleDAO(FakeDAO):
    def find_all(self):
        return sorted(self.items.values(), key=lambda s: s.sort_key)

    def find_by_name(self, name):
        return next((s for s in self.items.values() if s.name == name), None)


class FakeBarrierTypeDAO(FakeDAO):
    def find_all(self):
        return sorted(self.items.values(), key=lambda t: t.name)


def _barrier(tier, ms, gender=Gender.FEMALE, age=12, pool=POOL_25_ID, style=FREE_50_ID):
    return BarrierValue(
        id=f"bv-{tier}-{gender.value}-{age}-{pool}-{style}",
        barrier_type_id=f"bt-{tier}",
        swimming_style_id=style,
        pool_type_id=pool,
        tier=tier,
        age=age,
        gender=gender,
        time_milliseconds=ms,
    )


@pytest.fixture
def daos() -> dict:
    """Seeded fakes: one swimmer, reference data and a small barrier catalog."""
    pool_types = FakePoolTypeDAO(
        [
            PoolType(id=POOL_25_ID, name=PoolCategory.SHORT_COURSE, length_meters=25),
            PoolType(id=POOL_50_ID, name=PoolCategory.LONG_COURSE, length_meters=50),
        ]
    )
    styles = FakeSwimmingStyleDAO(
        [
            SwimmingStyle(
                id=BACK_50_ID, name="50m Sırtüstü", distance_meters=50,
                stroke_type=Stroke.BACKSTROKE,
            ),
            SwimmingStyle(
                id=FREE_50_ID, name="50m Serbest", distance_meters=50,
                stroke_type=Stroke.FREESTYLE,
            ),
        ]
    )
    barrier_types = FakeBarrierTypeDAO(
        [
            BarrierType(
                id=f"bt-{tier}",
                name=tier,
                category=BarrierCategory.OPEN if tier == "SEM" else BarrierCategory.AGE_GROUP,
            )
            for tier in TIER_ORDER
        ]
    )
    barriers = FakeBarrierValueDAO(
        [
            _barrier("B1", 50000),
            _barrier("B2", 48000),
            _barrier("A1", 45000),
            _barrier("B1", 52000, style=BACK_50_ID),
            _barrier("B1", 49000, gender=Gender.MALE),
            _barrier("B1", 47500, age=13),
        ],
        pool_types,
        styles,
        barrier_types,
    )
    swimmers = FakeSwimmerDAO(
        [Swimmer(id=SWIMMER_ID, name="Ada", surname="Yılmaz", age=12, gender=Gender.FEMALE)]
    )
    races = FakeRaceRecordDAO(
        [
            RaceRecord(
                id="race-1", swimmer_id=SWIMMER_ID, pool_type=PoolCategory.SHORT_COURSE,
                swimming_style="50m Serbest", month=9, year=2023, total_milliseconds=51000,
            ),
            RaceRecord(
                id="race-2", swimmer_id=SWIMMER_ID, pool_type=PoolCategory.SHORT_COURSE,
                swimming_style="50m Serbest", month=1, year=2024, total_milliseconds=47000,
            ),
            RaceRecord(
                id="race-3", swimmer_id=SWIMMER_ID, pool_type=PoolCategory.SHORT_COURSE,
                swimming_style="50m Serbest", month=11, year=2023, total_milliseconds=49500,
            ),
        ]
    )
    return {
        "swimmers": swimmers,
        "races": races,
        "barriers": barriers,
        "pool_types": pool_types,
        "styles": styles,
        "barrier_types": barrier_types,
    }


@pytest.fixture
def client(daos: dict) -> TestClient:
    """Provide a test client backed by the in-memory fakes."""
    app = create_app()

    app.dependency_overrides[get_swimmer_dao] = lambda: daos["swimmers"]
    app.dependency_overrides[get_race_record_dao] = lambda: daos["races"]
    app.dependency_overrides[get_barrier_value_dao] = lambda: daos["barriers"]
    app.dependency_overrides[get_pool_type_dao] = lambda: daos["pool_types"]
    app.dependency_overrides[get_swimming_style_dao] = lambda: daos["styles"]
    app.dependency_overrides[get_barrier_type_dao] = lambda: daos["barrier_types"]

    return TestClient(app)
