"""
Workout Catalog Interface (Port).

Coach-programmed workouts are read-only to this service.
"""
from typing import List, Protocol

from domain.models import CatalogWorkout


class WorkoutCatalog(Protocol):
    """Abstract interface for reading the programmed workout catalog."""

    def list_workouts(self) -> List[CatalogWorkout]:
        """
        List programmed workouts.

        Returns:
            Workouts ordered newest date first

        Raises:
            ResultStoreError: If the catalog cannot be read
        """
        ...
