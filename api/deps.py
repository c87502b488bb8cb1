"""
FastAPI Dependency Providers for the WOD results service.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, Supabase client and the benchmark list are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Each request gets a fresh ResultEditingSession

Usage in routers:
    from api.deps import get_result_session
    from application.use_cases import ResultEditingSession

    @router.get("/athletes/{athlete_id}/today")
    def today(session: ResultEditingSession = Depends(get_result_session)):
        session.load()
        return session.state

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_result_repo] = lambda: FakeResultRepository()
"""

from datetime import date, datetime
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Depends, HTTPException, Query
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    BenchmarkDirectory,
    ResultRepository,
    WorkoutCatalog,
)
from application.use_cases import ResultEditingSession
from domain.models import Athlete

# Concrete implementations
from infrastructure import (
    InMemoryBenchmarkDirectory,
    SupabaseResultRepository,
    SupabaseWorkoutCatalog,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_result_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ResultRepository:
    """
    Get ResultRepository implementation.

    Returns a SupabaseResultRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseResultRepository(client, table=settings.results_table)


def get_workout_catalog(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> WorkoutCatalog:
    """Get WorkoutCatalog implementation backed by the wods table."""
    return SupabaseWorkoutCatalog(client, table=settings.wods_table)


@lru_cache
def _load_benchmarks(path: Optional[str]) -> InMemoryBenchmarkDirectory:
    return InMemoryBenchmarkDirectory.from_file(path)


def get_benchmark_directory(
    settings: Settings = Depends(get_settings),
) -> BenchmarkDirectory:
    """
    Get BenchmarkDirectory implementation.

    Uses a static name list and doesn't require Supabase.
    """
    return _load_benchmarks(settings.benchmarks_file)


# =============================================================================
# Request Context Providers
# =============================================================================


def get_today(settings: Settings = Depends(get_settings)) -> date:
    """Calendar day in the configured time zone."""
    return datetime.now(ZoneInfo(settings.timezone)).date()


def get_athlete(
    athlete_id: str,
    name: Optional[str] = Query(None, description="Athlete display name"),
    email: Optional[str] = Query(None, description="Athlete email"),
    group: Optional[str] = Query(None, description="Athlete group (mens/womens)"),
) -> Athlete:
    """Athlete identity from the path and query string."""
    return Athlete(id=athlete_id, name=name, email=email, group=group)


def get_result_session(
    athlete: Athlete = Depends(get_athlete),
    result_repo: ResultRepository = Depends(get_result_repo),
    catalog: WorkoutCatalog = Depends(get_workout_catalog),
    benchmarks: BenchmarkDirectory = Depends(get_benchmark_directory),
    today: date = Depends(get_today),
) -> ResultEditingSession:
    """
    Get a fresh, not yet loaded, editing session for the athlete.

    Callers run session.load() first so every request starts from the
    authoritative stored state.
    """
    return ResultEditingSession(
        athlete,
        result_repo=result_repo,
        catalog=catalog,
        benchmarks=benchmarks,
        today=today,
    )


# =============================================================================
# Exports
# =============================================================================

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
