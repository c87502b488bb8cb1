"""
Benchmark Directory Interface (Port).

Looks up named benchmark workouts ("Fran", "Murph", ...) so that custom
workouts cannot reuse their names.
"""
from typing import Optional, Protocol


class BenchmarkDirectory(Protocol):
    """Abstract interface for benchmark workout name lookups."""

    def find(self, name: str) -> Optional[str]:
        """
        Find a benchmark by name.

        Matching ignores case and surrounding whitespace.

        Args:
            name: Candidate workout name

        Returns:
            The canonical benchmark name, or None if `name` is not a benchmark
        """
        ...
