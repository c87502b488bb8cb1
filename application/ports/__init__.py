"""
Repository Interfaces (Ports) for the WOD results service.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, lookup tables). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ResultRepository, WorkoutCatalog

    class ResultService:
        def __init__(self, result_repo: ResultRepository):
            self.result_repo = result_repo
"""

# Result persistence
from application.ports.result_repository import ResultRepository, ResultStoreError

# Programmed workouts
from application.ports.workout_catalog import WorkoutCatalog

# Benchmark names
from application.ports.benchmark_directory import BenchmarkDirectory

__all__ = [
    # Results
    "ResultRepository",
    "ResultStoreError",
    # Catalog
    "WorkoutCatalog",
    # Benchmarks
    "BenchmarkDirectory",
]
