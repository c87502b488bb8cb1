"""
Result reconciliation rules.

Storage allows at most one result per athlete per calendar day. Before an
athlete logs anything these rules decide which row (if any) the submission
must update, given the athlete's stored results and the workout displayed for
the day.

The rules are pure: they take the current results and workouts and return an
EditingTarget. The stateful session in application.use_cases.result_session
owns the target between calls.
"""

from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from domain.models.result import WorkoutResult
from domain.models.workout import CatalogWorkout, MovementLog

COMBINED_GROUP = "combined"


class ReconciliationState(str, Enum):
    """
    Editing states for one athlete-day.

    - IDLE: nothing to log (no workout displayed, or just submitted)
    - EDITING_CATALOG_MATCHING: the day's row (if any) belongs to the displayed workout
    - EDITING_CATALOG_MISMATCHED: the day's row belongs to another workout or a
      custom workout; the displayed workout shows as not logged, but the row id
      is kept so that submitting updates it
    - EDITING_CUSTOM: logging an athlete-authored workout
    - EDITING_PAST: editing a specific stored row from history
    """

    IDLE = "idle"
    EDITING_CATALOG_MATCHING = "editing_catalog_matching"
    EDITING_CATALOG_MISMATCHED = "editing_catalog_mismatched"
    EDITING_CUSTOM = "editing_custom"
    EDITING_PAST = "editing_past"


class ResultDraft(BaseModel):
    """In-progress values of the result being edited."""

    score_text: str = ""
    rx: bool = True
    notes: str = ""
    photo_url: Optional[str] = None
    movements: List[MovementLog] = Field(default_factory=list)

    @classmethod
    def blank(cls, movements: Optional[List[MovementLog]] = None) -> "ResultDraft":
        return cls(movements=list(movements or []))

    @classmethod
    def from_result(cls, result: WorkoutResult) -> "ResultDraft":
        """Pre-fill from a stored row, keeping the athlete's own movement list."""
        return cls(
            score_text=result.score_text or "",
            rx=result.rx,
            notes=result.notes or "",
            photo_url=result.photo_url,
            movements=[m.model_copy() for m in result.movements],
        )


class EditingTarget(BaseModel):
    """
    What a submission will write.

    `result_id` is the row to update; None means a new row is created. In the
    mismatched state it is the id of the day's row for a different workout.
    """

    state: ReconciliationState
    day: Optional[date] = None
    workout: Optional[CatalogWorkout] = None
    result_id: Optional[str] = None
    day_result: Optional[WorkoutResult] = None
    draft: ResultDraft = Field(default_factory=ResultDraft)

    model_config = {"frozen": True}

    @property
    def is_update(self) -> bool:
        return self.result_id is not None


def find_result_for_date(
    results: Iterable[WorkoutResult],
    day: date,
) -> Optional[WorkoutResult]:
    """
    Return the stored result for a calendar day.

    Results are expected most recent first; if storage ever returned more than
    one row for the day, the most recent one is the candidate.
    """
    for result in results:
        if result.date == day:
            return result
    return None


def resolve_displayed_workout(
    workouts: Iterable[CatalogWorkout],
    day: date,
    group: Optional[str] = None,
) -> Optional[CatalogWorkout]:
    """
    Pick the catalog workout shown to an athlete for a day.

    A combined workout wins; otherwise the workout posted for the athlete's
    group, if any.
    """
    group_match = None
    for workout in workouts:
        if workout.date != day:
            continue
        if workout.group == COMBINED_GROUP:
            return workout
        if group and workout.group == group and group_match is None:
            group_match = workout
    return group_match


def reconcile_day(
    results: Iterable[WorkoutResult],
    workout: Optional[CatalogWorkout],
    day: date,
) -> EditingTarget:
    """
    Decide the editing target for a day given the workout displayed for it.

    Args:
        results: The athlete's stored results, most recent first
        workout: Catalog workout displayed for the day, if any
        day: Calendar day being logged

    Returns:
        EditingTarget with the state, the row to update (if any) and the
        seeded draft.
    """
    day_result = find_result_for_date(results, day)

    if workout is None:
        return EditingTarget(state=ReconciliationState.IDLE, day=day, day_result=day_result)

    if day_result is None:
        return EditingTarget(
            state=ReconciliationState.EDITING_CATALOG_MATCHING,
            day=day,
            workout=workout,
            draft=ResultDraft.blank(workout.blank_movement_logs()),
        )

    if not day_result.is_custom and day_result.wod_id == workout.id:
        return EditingTarget(
            state=ReconciliationState.EDITING_CATALOG_MATCHING,
            day=day,
            workout=workout,
            result_id=day_result.id,
            day_result=day_result,
            draft=ResultDraft.from_result(day_result),
        )

    return EditingTarget(
        state=ReconciliationState.EDITING_CATALOG_MISMATCHED,
        day=day,
        workout=workout,
        result_id=day_result.id,
        day_result=day_result,
        draft=ResultDraft.blank(workout.blank_movement_logs()),
    )


def custom_workout_target(results: Iterable[WorkoutResult], day: date) -> EditingTarget:
    """Target for logging a custom workout: the day's row is updated if one exists."""
    day_result = find_result_for_date(results, day)
    return EditingTarget(
        state=ReconciliationState.EDITING_CUSTOM,
        day=day,
        result_id=day_result.id if day_result else None,
        day_result=day_result,
    )


def past_result_target(
    result: WorkoutResult,
    workout: Optional[CatalogWorkout] = None,
) -> EditingTarget:
    """Target for editing a specific stored row; submitting always updates it."""
    return EditingTarget(
        state=ReconciliationState.EDITING_PAST,
        day=result.date,
        workout=workout,
        result_id=result.id,
        day_result=result,
        draft=ResultDraft.from_result(result),
    )
