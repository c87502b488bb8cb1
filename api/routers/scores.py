"""
Scores router.

Stateless endpoints for the score codec:
- /scores/category - Classify a workout type
- /scores/parse - Decode stored score text into editable fields
- /scores/format - Encode editable fields as stored score text
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from api.schemas.scores import (
    ScoreCategoryResponse,
    ScoreFormatRequest,
    ScoreParseRequest,
    ScoreView,
)
from application.use_cases import ScoreEditor
from domain.models import ScoreCategory
from domain.scoring import (
    FIELD_NAMES,
    category_label,
    classify,
    format_fields,
    from_fields,
    is_lower_better,
    to_fields,
    validate_score,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/scores",
    tags=["Scores"],
)


def _category(workout_type: Optional[str], category: Optional[ScoreCategory]) -> ScoreCategory:
    return category if category is not None else classify(workout_type)


def score_view(editor: ScoreEditor) -> ScoreView:
    """Build the API view of a score editor."""
    return ScoreView(
        category=editor.category,
        label=category_label(editor.category),
        is_fallback=editor.is_fallback,
        field_names=list(editor.field_names),
        fields=editor.fields,
        text=editor.text,
        error=editor.error,
    )


@router.get("/category", response_model=ScoreCategoryResponse)
def classify_workout_type(workout_type: Optional[str] = Query(default=None)):
    """
    Classify a workout type label.

    Unknown or missing labels score as freeform.
    """
    category = classify(workout_type)
    return ScoreCategoryResponse(
        workout_type=workout_type,
        category=category,
        label=category_label(category),
        lower_is_better=is_lower_better(workout_type),
        field_names=list(FIELD_NAMES[category]),
    )


@router.post("/parse", response_model=ScoreView)
def parse_score_text(request: ScoreParseRequest):
    """
    Decode stored score text for editing.

    Text that does not fit the category grammar is returned verbatim with
    `is_fallback` set; it is never rewritten.
    """
    editor = ScoreEditor(request.text, _category(request.workout_type, request.category))
    return score_view(editor)


@router.post("/format", response_model=ScoreView)
def format_score_fields(request: ScoreFormatRequest):
    """
    Encode raw editable fields as stored score text.

    Blank fields are omitted rather than written as zero.
    """
    category = _category(request.workout_type, request.category)
    unknown = sorted(set(request.fields) - set(FIELD_NAMES[category]))
    if unknown:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown score field(s) {unknown} for {category.value}",
        )

    score = from_fields(request.fields, category)
    return ScoreView(
        category=category,
        label=category_label(category),
        is_fallback=False,
        field_names=list(FIELD_NAMES[category]),
        fields=to_fields(score),
        text=format_fields(request.fields, category),
        error=validate_score(score),
    )
