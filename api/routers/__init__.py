"""
Router package for the WOD results service.

This package contains all API routers organized by domain:
- health: Health check
- scores: Score classification, parsing and formatting
- results: Result logging, editing and deletion
"""

from api.routers.health import router as health_router
from api.routers.scores import router as scores_router
from api.routers.results import router as results_router

__all__ = [
    "health_router",
    "scores_router",
    "results_router",
]
