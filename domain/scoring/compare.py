"""
Score validation and ranking helpers.

Used for one athlete's own history (personal records on repeated benchmark
workouts); nothing here aggregates across athletes.
"""

import math
from typing import Optional

from domain.models.score import (
    AmrapScore,
    AnyScore,
    FreeformScore,
    RoundsScore,
    ScoreCategory,
    TimeScore,
    WeightScore,
)
from domain.scoring.categories import classify
from domain.scoring.codec import parse_score


def validate_score(score: AnyScore) -> Optional[str]:
    """
    Check that a score is ready to be logged.

    Returns:
        An error message for the athlete, or None when the score is valid.
    """
    if isinstance(score, TimeScore):
        return "Enter a valid time" if score.is_empty else None
    if isinstance(score, AmrapScore):
        return "Enter rounds completed" if score.rounds is None else None
    if isinstance(score, WeightScore):
        return "Enter a valid weight" if score.amount is None else None
    if isinstance(score, RoundsScore):
        return "Enter rounds completed" if score.rounds is None else None
    if isinstance(score, FreeformScore):
        return None
    raise TypeError(f"Unhandled score type: {type(score).__name__}")


def _rank_value(text: Optional[str], category: ScoreCategory) -> Optional[float]:
    """Numeric value where higher is better; None for unparseable text."""
    score = parse_score(text, category)
    if score is None or score.is_empty:
        return None
    if isinstance(score, TimeScore):
        return -float(score.total_seconds)
    if isinstance(score, AmrapScore):
        return (score.rounds or 0) * 1000.0 + (score.reps or 0)
    if isinstance(score, WeightScore):
        return float(score.amount)
    if isinstance(score, RoundsScore):
        return float(score.rounds)
    if isinstance(score, FreeformScore):
        # Freeform scores rank by a leading number when there is one
        try:
            return float(score.text.strip().split()[0])
        except (IndexError, ValueError):
            return None
    raise TypeError(f"Unhandled score type: {type(score).__name__}")


def compare_scores(a: Optional[str], b: Optional[str], workout_type: Optional[str]) -> float:
    """
    Compare two stored scores of the same workout type.

    Timed workouts rank lower times first; every other category ranks higher
    values first. Unparseable or empty scores rank last.

    Returns:
        A negative number when `a` is better than `b`, positive when worse,
        and zero when they rank equal.
    """
    category = classify(workout_type)
    value_a = _rank_value(a, category)
    value_b = _rank_value(b, category)
    rank_a = -math.inf if value_a is None else value_a
    rank_b = -math.inf if value_b is None else value_b
    if rank_a == rank_b:
        return 0.0
    return 1.0 if rank_a < rank_b else -1.0
