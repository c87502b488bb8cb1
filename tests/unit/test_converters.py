"""
Unit tests for domain converters.

Tests for:
- db_row_to_result
- payload_to_db_row
- db_row_to_catalog_workout
"""

from datetime import date, datetime, timezone

import pytest

from domain.converters import (
    db_row_to_catalog_workout,
    db_row_to_result,
    payload_to_db_row,
)
from domain.models import Athlete, MovementLog, ResultPayload


# =============================================================================
# db_row_to_result tests
# =============================================================================


@pytest.mark.unit
class TestDbRowToResult:
    """Tests for db_row_to_result converter."""

    def test_full_row(self):
        """Convert a complete results row."""
        row = {
            "id": "r1",
            "athlete_id": "a1",
            "athlete_name": "Sam Doe",
            "athlete_email": "sam@example.com",
            "wod_id": "w1",
            "date": "2024-03-01",
            "time": "12:34",
            "rx": False,
            "notes": "tough",
            "photo_url": "https://cdn.example.com/p.jpg",
            "movements": [
                {"name": "Thruster", "reps": "21-15-9", "notes": "", "weight": "43kg"},
                {"name": "Part B", "type": "header"},
            ],
            "custom_wod_name": None,
            "custom_wod_type": None,
            "created_at": "2024-03-01T10:30:00Z",
            "updated_at": "2024-03-01T11:00:00+00:00",
        }

        result = db_row_to_result(row)

        assert result.id == "r1"
        assert result.wod_id == "w1"
        assert result.date == date(2024, 3, 1)
        assert result.score_text == "12:34"
        assert result.rx is False
        assert result.movements[0] == MovementLog(name="Thruster", reps="21-15-9", weight="43kg")
        assert result.movements[1].is_header
        assert result.logged_at == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        assert result.updated_at is not None

    def test_minimal_row(self):
        """Missing optional columns take model defaults."""
        result = db_row_to_result({"id": 1, "athlete_id": "a1", "date": "2024-03-01"})

        assert result.id == "1"
        assert result.wod_id is None
        assert result.score_text == ""
        assert result.rx is True
        assert result.notes == ""
        assert result.movements == []
        assert result.logged_at is None

    def test_timestamp_date_is_truncated(self):
        result = db_row_to_result({"id": "r1", "athlete_id": "a1", "date": "2024-03-01T00:00:00"})
        assert result.date == date(2024, 3, 1)

    def test_numeric_reps_become_text(self):
        result = db_row_to_result({
            "id": "r1",
            "athlete_id": "a1",
            "date": "2024-03-01",
            "movements": [{"name": "Burpee", "reps": 50}, "garbage"],
        })
        assert [(m.name, m.reps) for m in result.movements] == [("Burpee", "50")]

    def test_invalid_timestamp_is_none(self):
        result = db_row_to_result({
            "id": "r1",
            "athlete_id": "a1",
            "date": "2024-03-01",
            "created_at": "yesterday",
        })
        assert result.logged_at is None


# =============================================================================
# payload_to_db_row tests
# =============================================================================


@pytest.mark.unit
class TestPayloadToDbRow:
    """Tests for payload_to_db_row converter."""

    def test_update_row_has_no_athlete_columns(self):
        payload = ResultPayload(
            wod_id="w1",
            date=date(2024, 3, 1),
            score_text="8+15",
            rx=False,
            movements=[MovementLog(name="Thruster", weight="43kg")],
        )

        row = payload_to_db_row(payload)

        assert row["wod_id"] == "w1"
        assert row["date"] == "2024-03-01"
        assert row["time"] == "8+15"
        assert row["rx"] is False
        assert row["movements"] == [{"name": "Thruster", "reps": "", "notes": "", "weight": "43kg"}]
        assert "athlete_id" not in row

    def test_insert_row_has_athlete_columns(self):
        athlete = Athlete(id="a1", name="Sam Doe", email="sam@example.com")
        row = payload_to_db_row(ResultPayload(date=date(2024, 3, 1)), athlete)

        assert row["athlete_id"] == "a1"
        assert row["athlete_name"] == "Sam Doe"
        assert row["athlete_email"] == "sam@example.com"

    def test_empty_text_is_null(self):
        row = payload_to_db_row(ResultPayload(date=date(2024, 3, 1)))

        assert row["time"] is None
        assert row["notes"] is None
        assert row["photo_url"] is None
        assert row["custom_wod_name"] is None

    def test_catalog_payload_clears_custom_columns(self):
        """Updating a custom row to a catalog workout writes NULL custom columns."""
        row = payload_to_db_row(ResultPayload(wod_id="w1", date=date(2024, 3, 1)))
        assert row["custom_wod_name"] is None
        assert row["custom_wod_type"] is None

    def test_round_trip(self):
        payload = ResultPayload(
            date=date(2024, 3, 1),
            score_text="6",
            custom_wod_name="Hill sprints",
            custom_wod_type="Rounds",
        )
        row = {"id": "r1", **payload_to_db_row(payload, Athlete(id="a1"))}

        result = db_row_to_result(row)

        assert result.score_text == "6"
        assert result.custom_wod_type == "Rounds"
        assert result.is_custom


# =============================================================================
# db_row_to_catalog_workout tests
# =============================================================================


@pytest.mark.unit
class TestDbRowToCatalogWorkout:
    """Tests for db_row_to_catalog_workout converter."""

    def test_full_row(self):
        workout = db_row_to_catalog_workout({
            "id": "w1",
            "name": "Fran",
            "date": "2024-03-01",
            "type": "For Time",
            "group_type": "mens",
            "movements": [{"name": "Thruster", "reps": "21-15-9", "notes": "43/30kg"}],
            "notes": "Sprint",
        })

        assert workout.group == "mens"
        assert workout.type == "For Time"
        assert workout.movements[0].notes == "43/30kg"

    def test_defaults(self):
        workout = db_row_to_catalog_workout({"id": "w1", "date": "2024-03-01"})
        assert workout.group == "combined"
        assert workout.type == "Other"
        assert workout.movements == []
