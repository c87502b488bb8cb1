"""
Workout type to score category classification.

The table below is the whole contract: every workout type label the service
produces is listed, and anything else scores as freeform.
"""

from typing import Dict, Optional, Tuple

from domain.models.score import ScoreCategory

# Labels offered when programming or logging a workout, in display order
WORKOUT_TYPES: Tuple[str, ...] = (
    "For Time",
    "AMRAP",
    "EMOM",
    "Interval",
    "Rounds",
    "Strength",
    "Skill",
    "Chipper",
    "Metcon",
    "Other",
)

_CATEGORY_BY_TYPE: Dict[str, ScoreCategory] = {
    "for time": ScoreCategory.TIME,
    "chipper": ScoreCategory.TIME,
    "metcon": ScoreCategory.TIME,
    "amrap": ScoreCategory.AMRAP,
    "strength": ScoreCategory.WEIGHT,
    "emom": ScoreCategory.ROUNDS,
    "rounds": ScoreCategory.ROUNDS,
    "interval": ScoreCategory.FREEFORM,
    "skill": ScoreCategory.FREEFORM,
    "other": ScoreCategory.FREEFORM,
}

_SCORE_LABELS: Dict[ScoreCategory, str] = {
    ScoreCategory.TIME: "Time",
    ScoreCategory.AMRAP: "Score",
    ScoreCategory.WEIGHT: "Weight",
    ScoreCategory.ROUNDS: "Rounds",
    ScoreCategory.FREEFORM: "Score",
}


def classify(workout_type: Optional[str]) -> ScoreCategory:
    """
    Map a workout type label to its score category.

    Matching is case-insensitive and ignores surrounding whitespace. The
    function is total: unknown, empty and missing labels yield FREEFORM.

    Args:
        workout_type: Workout type label (e.g., "For Time", "AMRAP")

    Returns:
        The score category for the label.
    """
    if not workout_type:
        return ScoreCategory.FREEFORM
    return _CATEGORY_BY_TYPE.get(workout_type.strip().lower(), ScoreCategory.FREEFORM)


def is_lower_better(workout_type: Optional[str]) -> bool:
    """Whether a lower score wins for this workout type (timed workouts only)."""
    return classify(workout_type) == ScoreCategory.TIME


def score_label(workout_type: Optional[str]) -> str:
    """Label for the score field of this workout type."""
    return category_label(classify(workout_type))


def category_label(category: ScoreCategory) -> str:
    return _SCORE_LABELS[ScoreCategory(category)]
