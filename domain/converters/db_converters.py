"""
Converters: Database row format <-> domain models.

Provides bidirectional conversion between Supabase rows and the result and
workout domain models.

Database schema (results table):
- id: UUID
- athlete_id, athlete_name, athlete_email: Athlete identity
- wod_id: UUID of the catalog workout (NULL for custom workouts)
- date: Calendar day (unique together with athlete_id)
- time: TEXT, the stored score for every workout type
- rx: Boolean, Rx (true) or Scaled (false)
- movements: JSONB list of {name, reps, notes, weight, type?}
- notes, photo_url: Free text / photo reference
- custom_wod_name, custom_wod_type: Custom workout fields
- created_at, updated_at: Timestamps

Database schema (wods table):
- id, name, date, type, group_type, movements (JSONB), notes
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from domain.models import (
    Athlete,
    CatalogWorkout,
    Movement,
    MovementLog,
    ResultPayload,
    WorkoutResult,
)


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # Try ISO format with Z suffix
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _parse_date(value: Any) -> date:
    """Parse a DATE column (ISO string or date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _movement_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": raw.get("name") or "",
        "reps": str(raw.get("reps") or ""),
        "notes": raw.get("notes") or "",
        "type": "header" if raw.get("type") == "header" else None,
    }


def _parse_movement_logs(value: Any) -> List[MovementLog]:
    if not value:
        return []
    return [
        MovementLog(**_movement_fields(m), weight=m.get("weight") or "")
        for m in value
        if isinstance(m, dict)
    ]


def _parse_movements(value: Any) -> List[Movement]:
    if not value:
        return []
    return [Movement(**_movement_fields(m)) for m in value if isinstance(m, dict)]


def _movements_to_json(movements: List[MovementLog]) -> List[Dict[str, Any]]:
    return [m.model_dump(exclude_none=True) for m in movements]


def db_row_to_result(row: Dict[str, Any]) -> WorkoutResult:
    """
    Convert a results row to a WorkoutResult.

    Args:
        row: Row dict as returned by Supabase

    Returns:
        WorkoutResult domain model
    """
    return WorkoutResult(
        id=str(row["id"]),
        athlete_id=str(row["athlete_id"]),
        athlete_name=row.get("athlete_name"),
        athlete_email=row.get("athlete_email"),
        wod_id=str(row["wod_id"]) if row.get("wod_id") else None,
        date=_parse_date(row["date"]),
        score_text=row.get("time") or "",
        rx=row.get("rx") if row.get("rx") is not None else True,
        notes=row.get("notes") or "",
        photo_url=row.get("photo_url"),
        movements=_parse_movement_logs(row.get("movements")),
        custom_wod_name=row.get("custom_wod_name"),
        custom_wod_type=row.get("custom_wod_type"),
        logged_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def payload_to_db_row(
    payload: ResultPayload,
    athlete: Optional[Athlete] = None,
) -> Dict[str, Any]:
    """
    Convert a ResultPayload to a results row for insert or update.

    Athlete identity columns are only written on insert (pass `athlete`).
    Empty text columns are written as NULL.
    """
    row: Dict[str, Any] = {
        "wod_id": payload.wod_id,
        "date": payload.date.isoformat(),
        "time": payload.score_text or None,
        "rx": payload.rx,
        "movements": _movements_to_json(payload.movements),
        "notes": payload.notes or None,
        "photo_url": payload.photo_url or None,
        "custom_wod_name": payload.custom_wod_name or None,
        "custom_wod_type": payload.custom_wod_type or None,
    }
    if athlete is not None:
        row["athlete_id"] = athlete.id
        row["athlete_name"] = athlete.name
        row["athlete_email"] = athlete.email
    return row


def db_row_to_catalog_workout(row: Dict[str, Any]) -> CatalogWorkout:
    """Convert a wods row to a CatalogWorkout."""
    return CatalogWorkout(
        id=str(row["id"]),
        date=_parse_date(row["date"]),
        type=row.get("type") or "Other",
        name=row.get("name"),
        group=row.get("group_type") or "combined",
        movements=_parse_movements(row.get("movements")),
        notes=row.get("notes"),
    )
