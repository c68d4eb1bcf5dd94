"""Tests for Barrier catalog and reference data API endpoints."""

from fastapi.testclient import TestClient

FREE_50_ID = "style-50-free"
POOL_25_ID = "pool-25"


class TestBarrierCatalog:
    """Test listing and editing catalog entries."""

    def test_list_with_filters(self, client: TestClient):
        """Filters narrow the catalog."""
        response = client.get(
            "/api/v1/barriers",
            params={"age": 12, "gender": "F", "swimming_style_id": FREE_50_ID},
        )
        assert response.status_code == 200
        barriers = response.json()
        assert sorted(b["tier"] for b in barriers) == ["A1", "B1", "B2"]
        assert all(b["swimming_style_name"] == "50m Serbest" for b in barriers)
        assert all(b["pool_type_name"] == "25m" for b in barriers)

    def test_create_get_update_delete_barrier(self, client: TestClient):
        """Full lifecycle for a catalog entry."""
        # CREATE
        response = client.post(
            "/api/v1/barriers",
            json={
                "barrier_type_id": "bt-A2",
                "swimming_style_id": FREE_50_ID,
                "pool_type_id": POOL_25_ID,
                "age": 12,
                "gender": "F",
                "time": "00:43:50",
            },
        )
        assert response.status_code == 201, response.text
        barrier = response.json()
        assert barrier["tier"] == "A2"
        assert barrier["time_milliseconds"] == 43500
        assert barrier["time_formatted"] == "00:43:50"
        barrier_id = barrier["id"]

        # GET by ID
        response = client.get(f"/api/v1/barriers/{barrier_id}")
        assert response.status_code == 200
        assert response.json()["tier"] == "A2"

        # UPDATE (partial)
        response = client.patch(
            f"/api/v1/barriers/{barrier_id}", json={"time_milliseconds": 43000}
        )
        assert response.status_code == 200
        assert response.json()["time_formatted"] == "00:43:00"
        assert response.json()["age"] == 12

        # DELETE
        response = client.delete(f"/api/v1/barriers/{barrier_id}")
        assert response.status_code == 204
        assert client.get(f"/api/v1/barriers/{barrier_id}").status_code == 404

    def test_create_requires_time(self, client: TestClient):
        """A barrier needs a time."""
        response = client.post(
            "/api/v1/barriers",
            json={
                "barrier_type_id": "bt-A2",
                "swimming_style_id": FREE_50_ID,
                "pool_type_id": POOL_25_ID,
                "age": 12,
                "gender": "F",
            },
        )
        assert response.status_code == 400

    def test_create_malformed_time(self, client: TestClient):
        """Barrier time text must be MM:SS:cc."""
        response = client.post(
            "/api/v1/barriers",
            json={
                "barrier_type_id": "bt-A2",
                "swimming_style_id": FREE_50_ID,
                "pool_type_id": POOL_25_ID,
                "age": 12,
                "gender": "F",
                "time": "43.50",
            },
        )
        assert response.status_code == 400

    def test_missing_barrier(self, client: TestClient):
        """Unknown barriers are 404."""
        assert client.get("/api/v1/barriers/missing").status_code == 404
        assert client.delete("/api/v1/barriers/missing").status_code == 404

    def test_refused_delete_is_forbidden(self, client: TestClient, daos: dict, monkeypatch):
        """A delete that removes no row for an existing barrier is 403."""
        barrier_id = next(iter(daos["barriers"].items))
        monkeypatch.setattr(daos["barriers"], "delete", lambda id: False)
        assert client.delete(f"/api/v1/barriers/{barrier_id}").status_code == 403


class TestBarrierChart:
    """Test the per-tier barrier chart."""

    def test_chart(self, client: TestClient):
        """One row per tier with female and male entries side by side."""
        response = client.get(
            "/api/v1/barriers/chart",
            params={"age": 12, "swimming_style_id": FREE_50_ID, "pool_type_id": POOL_25_ID},
        )
        assert response.status_code == 200, response.text

        rows = response.json()
        assert [r["tier"] for r in rows] == ["B1", "B2", "A1", "A2", "A3", "A4", "SEM"]
        assert rows[0]["female"]["time_milliseconds"] == 50000
        assert rows[0]["male"]["time_milliseconds"] == 49000
        assert rows[1]["male"] is None
        assert rows[6]["female"] is None

    def test_chart_requires_age_and_style(self, client: TestClient):
        """Age and style are required."""
        response = client.get("/api/v1/barriers/chart", params={"age": 12})
        assert response.status_code == 422


class TestReferenceData:
    """Test reference data listings."""

    def test_pool_types(self, client: TestClient):
        """Pool types, shortest first."""
        response = client.get("/api/v1/pool-types")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["25m", "50m"]

    def test_swimming_styles(self, client: TestClient):
        """Styles ordered by stroke."""
        response = client.get("/api/v1/swimming-styles")
        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["50m Serbest", "50m Sırtüstü"]

    def test_barrier_types(self, client: TestClient):
        """Every tier has a barrier type."""
        response = client.get("/api/v1/barrier-types")
        assert response.status_code == 200
        assert len(response.json()) == 7
        categories = {t["name"]: t["category"] for t in response.json()}
        assert categories["B1"] == "12 Yaş"
        assert categories["SEM"] == "SEM"
