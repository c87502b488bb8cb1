"""
Infrastructure Layer for the WOD results service.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
- benchmarks: In-memory benchmark name directory
"""

# Re-export adapters for convenient access
from infrastructure.db import (
    SupabaseResultRepository,
    SupabaseWorkoutCatalog,
)
from infrastructure.benchmarks import InMemoryBenchmarkDirectory

__all__ = [
    "SupabaseResultRepository",
    "SupabaseWorkoutCatalog",
    "InMemoryBenchmarkDirectory",
]
