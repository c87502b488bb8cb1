"""
Score classification, codec and field projection.

Usage:
    >>> from domain.scoring import classify, parse_score, format_score

    >>> category = classify("AMRAP")
    >>> parse_score("8+15", category)
    AmrapScore(category='amrap', rounds=8, reps=15)
    >>> parse_score("8+15", classify("Strength")) is None
    True
"""

from domain.scoring.categories import (
    WORKOUT_TYPES,
    category_label,
    classify,
    is_lower_better,
    score_label,
)
from domain.scoring.codec import (
    ScoreCategoryMismatch,
    format_fields,
    format_score,
    parse_score,
)
from domain.scoring.compare import compare_scores, validate_score
from domain.scoring.fields import FIELD_NAMES, from_fields, is_out_of_range, to_fields

__all__ = [
    # Classification
    "WORKOUT_TYPES",
    "classify",
    "is_lower_better",
    "score_label",
    "category_label",
    # Codec
    "parse_score",
    "format_score",
    "format_fields",
    "ScoreCategoryMismatch",
    # Field projection
    "FIELD_NAMES",
    "to_fields",
    "from_fields",
    "is_out_of_range",
    # Validation and ranking
    "validate_score",
    "compare_scores",
]
