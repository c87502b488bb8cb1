"""
Supabase implementation of WorkoutCatalog.

Reads coach-programmed workouts from the `wods` table.
"""
import logging
from typing import List

from supabase import Client

from application.ports.result_repository import ResultStoreError
from domain.converters import db_row_to_catalog_workout
from domain.models import CatalogWorkout

logger = logging.getLogger(__name__)


class SupabaseWorkoutCatalog:
    """
    Supabase implementation of WorkoutCatalog protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = "wods"):
        self._client = client
        self._table = table

    def list_workouts(self) -> List[CatalogWorkout]:
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list workouts: {e}")
            raise ResultStoreError(f"Failed to load workouts: {e}") from e
        return [db_row_to_catalog_workout(row) for row in result.data or []]
