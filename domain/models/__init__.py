"""
Domain models for the WOD results service.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- CatalogWorkout: A coach-programmed workout for a fixed date
- CustomWorkout: An athlete-authored workout logged outside the catalog
- WorkoutResult: One athlete's result for one calendar day
- StructuredScore: The typed, category-specific form of a stored score

Usage:
    >>> from domain.models import TimeScore, WorkoutResult

    >>> score = TimeScore(minutes=12, seconds=34)
    >>> score.is_complete
    True
"""

from domain.models.result import Athlete, ResultPayload, WorkoutResult
from domain.models.score import (
    SCORE_TYPES,
    AmrapScore,
    AnyScore,
    FreeformScore,
    RoundsScore,
    ScoreCategory,
    StructuredScore,
    TimeScore,
    WeightScore,
    empty_score,
)
from domain.models.workout import CatalogWorkout, CustomWorkout, Movement, MovementLog

__all__ = [
    # Workouts
    "CatalogWorkout",
    "CustomWorkout",
    "Movement",
    "MovementLog",
    # Results
    "Athlete",
    "ResultPayload",
    "WorkoutResult",
    # Scores
    "ScoreCategory",
    "StructuredScore",
    "AnyScore",
    "TimeScore",
    "AmrapScore",
    "WeightScore",
    "RoundsScore",
    "FreeformScore",
    "SCORE_TYPES",
    "empty_score",
]
