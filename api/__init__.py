"""
API package for the WOD results service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_result_repo,
    get_workout_catalog,
    get_benchmark_directory,
    get_today,
    get_athlete,
    get_result_session,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_result_repo",
    "get_workout_catalog",
    "get_benchmark_directory",
    # Request context
    "get_today",
    "get_athlete",
    "get_result_session",
]
