"""
Workout result entity.

At most one result exists per (athlete, calendar date); storage enforces the
uniqueness. `score_text` is the opaque stored form decoded by the score codec.
"""

from datetime import date as date_type
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout import MovementLog


class Athlete(BaseModel):
    """Identity of the athlete logging results."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    group: Optional[str] = Field(
        default=None,
        description="Athlete group used to pick group-specific workouts (mens/womens)",
    )

    model_config = {"frozen": True}


class ResultPayload(BaseModel):
    """
    Fields written by a create or update call.

    A catalog result carries `wod_id` and no custom fields; a custom result
    carries `custom_wod_type` (and optionally a name) and no `wod_id`.
    """

    wod_id: Optional[str] = None
    date: date_type
    score_text: str = ""
    rx: bool = True
    notes: str = ""
    photo_url: Optional[str] = None
    movements: List[MovementLog] = Field(default_factory=list)
    custom_wod_name: Optional[str] = None
    custom_wod_type: Optional[str] = None

    model_config = {"frozen": True}


class WorkoutResult(BaseModel):
    """
    A stored result row.

    Examples:
        >>> result = WorkoutResult(
        ...     id="r-1",
        ...     athlete_id="a-1",
        ...     wod_id="w-1",
        ...     date=date(2024, 3, 1),
        ...     score_text="12:34",
        ... )
        >>> result.is_custom
        False
    """

    id: str
    athlete_id: str
    athlete_name: Optional[str] = None
    athlete_email: Optional[str] = None
    wod_id: Optional[str] = None
    date: date_type
    score_text: str = ""
    rx: bool = True
    notes: str = ""
    photo_url: Optional[str] = None
    movements: List[MovementLog] = Field(default_factory=list)
    custom_wod_name: Optional[str] = None
    custom_wod_type: Optional[str] = None
    logged_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def is_custom(self) -> bool:
        """True for results logged against a custom (non-catalog) workout."""
        return bool(self.custom_wod_name or self.custom_wod_type)
