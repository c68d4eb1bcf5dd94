"""Tests for the swimbarriers CLI."""

import json

import pytest
from typer.testing import CliRunner

from swimbarriers.cli.app import app

runner = CliRunner()


def _entry(tier: str, ms: int, gender: str = "F", age: int = 12) -> dict:
    return {
        "id": f"bv-{tier}-{gender}-{age}",
        "barrier_type_id": f"bt-{tier}",
        "swimming_style_id": "style-50-free",
        "pool_type_id": "pool-25",
        "tier": tier,
        "pool_type_name": "25m",
        "swimming_style_name": "50m Serbest",
        "age": age,
        "gender": gender,
        "time_milliseconds": ms,
    }


@pytest.fixture
def catalog_file(tmp_path):
    """A catalog with B1/B2/A1 for 12 year old girls and one entry for boys."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                _entry("A1", 45000),
                _entry("B1", 50000),
                _entry("B2", 48000),
                _entry("B1", 49000, gender="M"),
            ]
        )
    )
    return path


def _evaluate(catalog_file, time: str, gender: str = "F", style: str = "50m Serbest"):
    return runner.invoke(
        app,
        [
            "barriers",
            "evaluate",
            str(catalog_file),
            "--time",
            time,
            "--age",
            "12",
            "--gender",
            gender,
            "--pool",
            "25m",
            "--style",
            style,
        ],
    )


class TestTimeCommands:
    """Test the time conversion commands."""

    def test_format(self):
        """Milliseconds are shown as MM:SS:cc, truncated."""
        result = runner.invoke(app, ["time", "format", "83459"])
        assert result.exit_code == 0
        assert "01:23:45" in result.output

    def test_parse(self):
        """MM:SS:cc is converted to milliseconds."""
        result = runner.invoke(app, ["time", "parse", "01:23:45"])
        assert result.exit_code == 0
        assert "83450" in result.output

    def test_parse_invalid(self):
        """Malformed text exits with an error."""
        result = runner.invoke(app, ["time", "parse", "1:23"])
        assert result.exit_code == 1
        assert "Invalid time format" in result.output

    def test_format_negative_rejected(self):
        """Negative durations are a usage error."""
        result = runner.invoke(app, ["time", "format", "--", "-5"])
        assert result.exit_code != 0


class TestBarriersEvaluate:
    """Test offline evaluation against a catalog file."""

    def test_best_and_next(self, catalog_file):
        """47.00 passes B2; A1 is next, 2000 ms away."""
        result = _evaluate(catalog_file, "00:47:00")
        assert result.exit_code == 0, result.output
        assert "Best passed: B2" in result.output
        assert "Next target: A1" in result.output
        assert "2000 ms to go" in result.output

    def test_nothing_passed(self, catalog_file):
        """A slow time targets B1."""
        result = _evaluate(catalog_file, "00:55:00")
        assert result.exit_code == 0
        assert "Best passed: -" in result.output
        assert "Next target: B1" in result.output

    def test_filters_by_gender(self, catalog_file):
        """Only the boys' entry applies for gender M."""
        result = _evaluate(catalog_file, "00:48:50", gender="M")
        assert result.exit_code == 0
        assert "Best passed: B1" in result.output
        assert "Next target: -" in result.output

    def test_no_matching_barriers(self, catalog_file):
        """An unknown style has nothing to evaluate."""
        result = _evaluate(catalog_file, "00:47:00", style="50m Kelebek")
        assert result.exit_code == 0
        assert "No barriers" in result.output

    def test_invalid_time(self, catalog_file):
        """Malformed times exit with an error."""
        result = _evaluate(catalog_file, "47.00")
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        """A missing catalog is an error."""
        result = _evaluate(tmp_path / "missing.json", "00:47:00")
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_catalog(self, tmp_path):
        """Entries must be barrier values."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"tier": "B1"}]))
        result = _evaluate(path, "00:47:00")
        assert result.exit_code == 1
        assert "Invalid catalog file" in result.output


class TestSwimmerBarriers:
    """Test the database-backed swimmer summary with stubbed DAOs."""

    @pytest.fixture
    def stub_daos(self, monkeypatch):
        from swimbarriers.models import BarrierValue, RaceRecord, Swimmer

        swimmer = Swimmer(id="sw-1", name="Ada", surname="Yılmaz", age=12, gender="F")
        record = RaceRecord(
            swimmer_id="sw-1", pool_type="25m", swimming_style="50m Serbest",
            month=1, year=2024, total_milliseconds=47000,
        )
        barriers = [BarrierValue.model_validate(_entry("B1", 50000))]

        class StubSwimmerDAO:
            def get_by_id(self, id):
                return swimmer if id == "sw-1" else None

        class StubRaceRecordDAO:
            def find_by_swimmer(self, swimmer_id):
                return [record]

        class StubBarrierValueDAO:
            def find_for_swimmer(self, age, gender):
                return barriers

        monkeypatch.setattr("swimbarriers.dao.SwimmerDAO", StubSwimmerDAO)
        monkeypatch.setattr("swimbarriers.dao.RaceRecordDAO", StubRaceRecordDAO)
        monkeypatch.setattr("swimbarriers.dao.BarrierValueDAO", StubBarrierValueDAO)

    def test_summary_table(self, stub_daos):
        """The swimmer's categories are shown in a table."""
        result = runner.invoke(app, ["swimmer", "barriers", "sw-1"])
        assert result.exit_code == 0, result.output
        assert "Ada Yılmaz" in result.output
        assert "1 races recorded" in result.output

    def test_unknown_swimmer(self, stub_daos):
        """Unknown swimmers exit with an error."""
        result = runner.invoke(app, ["swimmer", "barriers", "nobody"])
        assert result.exit_code == 1
        assert "Swimmer not found" in result.output
        assert "Error:" not in result.output

    def test_missing_credentials(self, monkeypatch):
        """A DAO that cannot connect reports the error once and exits."""

        class UnconfiguredSwimmerDAO:
            def __init__(self):
                raise RuntimeError("SUPABASE_KEY is not set")

        monkeypatch.setattr("swimbarriers.dao.SwimmerDAO", UnconfiguredSwimmerDAO)
        result = runner.invoke(app, ["swimmer", "barriers", "sw-1"])
        assert result.exit_code == 1
        assert result.output.count("Error:") == 1
        assert "SUPABASE_KEY" in result.output
