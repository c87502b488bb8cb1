"""
Pydantic models for the score API.

Request and response models for classifying workout types and converting
scores between stored text and editable fields.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from domain.models import ScoreCategory


class _CategorySelector(BaseModel):
    """Either a workout type label or an explicit category (category wins)."""

    workout_type: Optional[str] = Field(default=None, description="Workout type label, e.g. 'AMRAP'")
    category: Optional[ScoreCategory] = None


class ScoreCategoryResponse(BaseModel):
    workout_type: Optional[str] = None
    category: ScoreCategory
    label: str
    lower_is_better: bool
    field_names: List[str]


class ScoreParseRequest(_CategorySelector):
    text: Optional[str] = Field(default="", description="Stored score text")


class ScoreFormatRequest(_CategorySelector):
    fields: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Raw editable field values, e.g. {'minutes': '12', 'seconds': '34'}",
    )

    @model_validator(mode="after")
    def _fields_not_empty(self) -> "ScoreFormatRequest":
        if not self.fields:
            raise ValueError("fields must contain at least one value")
        return self


class ScoreView(BaseModel):
    """Editing view of a score: how it is shown and what would be stored."""

    category: ScoreCategory
    label: str
    is_fallback: bool = Field(description="True when the text is edited verbatim as freeform")
    field_names: List[str]
    fields: Dict[str, str]
    text: str = Field(description="Stored-form score text")
    error: Optional[str] = Field(default=None, description="Validation message, if incomplete")
