"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseResultRepository, SupabaseWorkoutCatalog

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    result_repo = SupabaseResultRepository(client)
    catalog = SupabaseWorkoutCatalog(client)
"""

from infrastructure.db.result_repository import SupabaseResultRepository
from infrastructure.db.workout_catalog import SupabaseWorkoutCatalog

__all__ = [
    # Result persistence
    "SupabaseResultRepository",

    # Programmed workouts
    "SupabaseWorkoutCatalog",
]
