"""
Domain layer for the WOD results service.

This package contains pure domain models, the score codec and the result
reconciliation rules. Nothing here touches storage or HTTP.
"""

from domain.models import (
    Athlete,
    CatalogWorkout,
    CustomWorkout,
    Movement,
    MovementLog,
    ResultPayload,
    ScoreCategory,
    WorkoutResult,
)

__all__ = [
    "Athlete",
    "CatalogWorkout",
    "CustomWorkout",
    "Movement",
    "MovementLog",
    "ResultPayload",
    "ScoreCategory",
    "WorkoutResult",
]
