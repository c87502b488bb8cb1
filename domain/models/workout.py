"""
Workout definitions: programmed catalog workouts and athlete-authored custom ones.

A catalog workout is posted by a coach for a fixed date and is read-only here.
A custom workout is never persisted as a catalog entry; it only carries the
name, type and movements that end up on the athlete's result row.
"""

from datetime import date as date_type
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class Movement(BaseModel):
    """
    A single line of a workout.

    Examples:
        >>> Movement(name="Thruster", reps="21-15-9", notes="Rx: 95/65 lb")
        >>> Movement(name="Part B", type="header")
    """

    name: str = Field(default="", description="Movement name (e.g., 'Pull-up')")
    reps: str = Field(default="", description="Prescribed reps, free text (e.g., '21-15-9')")
    notes: str = Field(default="", description="Coach notes for this line")
    type: Optional[Literal["header"]] = Field(
        default=None,
        description="'header' for section headers that take no load annotation",
    )

    @property
    def is_header(self) -> bool:
        return self.type == "header"


class MovementLog(Movement):
    """A movement as logged by an athlete, with their load annotation."""

    weight: str = Field(
        default="",
        description="Athlete's load for this movement (e.g., '34kg', 'scaled')",
    )

    @classmethod
    def blank(cls, movement: Movement) -> "MovementLog":
        """Seed a log line from a workout movement with an empty load."""
        return cls(**{**movement.model_dump(), "weight": ""})


class CatalogWorkout(BaseModel):
    """
    A coach-programmed workout for a fixed date.

    `group` is "combined" when the workout is posted for everyone, otherwise
    the athlete group it targets ("mens" or "womens").
    """

    id: str
    date: date_type
    type: str = Field(..., description="Workout type label (e.g., 'For Time', 'AMRAP')")
    name: Optional[str] = None
    group: str = "combined"
    movements: List[Movement] = Field(default_factory=list)
    notes: Optional[str] = None

    def blank_movement_logs(self) -> List[MovementLog]:
        """Movement logs aligned with this workout, every load empty."""
        return [MovementLog.blank(m) for m in self.movements]


class CustomWorkout(BaseModel):
    """An ad-hoc workout logged by an athlete outside the catalog."""

    name: Optional[str] = None
    type: str = "For Time"
    movements: List[Movement] = Field(default_factory=list)

    model_config = {"frozen": True}
