"""
Pydantic models for the results API.

Request bodies carry the edits an athlete made on the logging surface; the
session decides whether they create or update a row.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from api.schemas.scores import ScoreView
from domain.models import CatalogWorkout, Movement, WorkoutResult
from domain.reconciliation import ReconciliationState, ResultDraft


class ResultEdits(BaseModel):
    """Edits applied to the draft before submitting."""

    score_fields: Optional[Dict[str, Optional[str]]] = Field(
        default=None,
        description="Score sub-field values (takes precedence over score_text)",
    )
    score_text: Optional[str] = Field(default=None, description="Raw score text")
    rx: Optional[bool] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    remove_photo: bool = False
    movement_weights: Optional[List[Optional[str]]] = Field(
        default=None,
        description="Load per movement, aligned with the workout's movements (null skips)",
    )


class CustomResultRequest(ResultEdits):
    """A custom workout plus the athlete's result for it."""

    name: Optional[str] = None
    type: str = "For Time"
    movements: List[Movement] = Field(default_factory=list)


class TodayResponse(BaseModel):
    state: ReconciliationState
    day: date
    workout: Optional[CatalogWorkout] = None
    result_id: Optional[str] = Field(
        default=None,
        description="Row a submission would update (may belong to another workout)",
    )
    day_result: Optional[WorkoutResult] = None
    draft: ResultDraft
    score: ScoreView
    completion_count: Optional[int] = None


class SubmitResponse(BaseModel):
    success: bool = True
    result: WorkoutResult
    is_update: bool
    state: ReconciliationState


class ResultListResponse(BaseModel):
    results: List[WorkoutResult]
    count: int
