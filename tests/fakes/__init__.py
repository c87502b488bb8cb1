"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports failure injection (fail_next) for store error paths
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeResultRepository, create_result_repo

    # Direct instantiation
    repo = FakeResultRepository()
    repo.seed([{"id": "r1", "athlete_id": "a1", "date": "2024-03-01"}])

    # Factory function with pre-populated data
    repo = create_result_repo(athlete_id="a1", days=[date(2024, 3, 1)])
"""
from datetime import date
from typing import Iterable, List, Optional

from domain.models import CatalogWorkout, Movement

# Import all fake implementations
from tests.fakes.result_repository import FakeResultRepository
from tests.fakes.workout_catalog import FakeWorkoutCatalog
from tests.fakes.benchmark_directory import FakeBenchmarkDirectory


# =============================================================================
# Factory Functions
# =============================================================================


def create_result_repo(
    *,
    athlete_id: str = "athlete-1",
    days: Iterable[date] = (),
    wod_id: Optional[str] = None,
    score_text: str = "",
) -> FakeResultRepository:
    """
    Create a FakeResultRepository with one result per given day.

    Args:
        athlete_id: Athlete owning the generated results
        days: Calendar days to create results for
        wod_id: Catalog workout referenced by every result
        score_text: Stored score of every result

    Returns:
        Pre-populated FakeResultRepository
    """
    repo = FakeResultRepository()
    repo.seed([
        {
            "id": f"result-{day.isoformat()}",
            "athlete_id": athlete_id,
            "date": day,
            "wod_id": wod_id,
            "score_text": score_text,
        }
        for day in days
    ])
    return repo


def make_workout(
    workout_id: str,
    day: date,
    workout_type: str = "For Time",
    *,
    group: str = "combined",
    movements: Optional[List[str]] = None,
    name: Optional[str] = None,
) -> CatalogWorkout:
    """Build a catalog workout with named movements."""
    return CatalogWorkout(
        id=workout_id,
        date=day,
        type=workout_type,
        name=name,
        group=group,
        movements=[Movement(name=m) for m in (movements or ["Thruster", "Pull-up"])],
    )


def create_workout_catalog(workouts: Iterable[CatalogWorkout] = ()) -> FakeWorkoutCatalog:
    """Create a FakeWorkoutCatalog holding the given workouts."""
    catalog = FakeWorkoutCatalog()
    catalog.seed(list(workouts))
    return catalog


def create_benchmark_directory(
    names: Iterable[str] = ("Fran", "Grace", "Helen", "Barbara Ann"),
) -> FakeBenchmarkDirectory:
    """Create a FakeBenchmarkDirectory seeded with common benchmark names."""
    return FakeBenchmarkDirectory(names)


__all__ = [
    # Fakes
    "FakeResultRepository",
    "FakeWorkoutCatalog",
    "FakeBenchmarkDirectory",
    # Factories
    "create_result_repo",
    "create_workout_catalog",
    "create_benchmark_directory",
    "make_workout",
]
