"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- scores: Score classification and conversion models
- results: Result logging models
"""

from api.schemas.scores import (
    ScoreCategoryResponse,
    ScoreFormatRequest,
    ScoreParseRequest,
    ScoreView,
)
from api.schemas.results import (
    CustomResultRequest,
    ResultEdits,
    ResultListResponse,
    SubmitResponse,
    TodayResponse,
)

__all__ = [
    "ScoreCategoryResponse",
    "ScoreFormatRequest",
    "ScoreParseRequest",
    "ScoreView",
    "CustomResultRequest",
    "ResultEdits",
    "ResultListResponse",
    "SubmitResponse",
    "TodayResponse",
]
