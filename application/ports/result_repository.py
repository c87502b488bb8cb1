"""
Result Repository Interface (Port).

This module defines the abstract interface for workout result persistence.
Storage enforces at most one result per (athlete, date); callers must resolve
the existing row and update it instead of inserting a second one.
"""
from typing import List, Protocol

from domain.models import Athlete, ResultPayload, WorkoutResult


class ResultStoreError(Exception):
    """
    Raised when the result store rejects or fails a call.

    The original exception is chained (`raise ... from e`). Callers surface it
    unchanged and do not retry.
    """


class ResultRepository(Protocol):
    """
    Abstract interface for workout result persistence.

    Every method raises ResultStoreError on failure.
    """

    def list_for_athlete(self, athlete_id: str) -> List[WorkoutResult]:
        """
        List one athlete's results.

        Args:
            athlete_id: Athlete ID

        Returns:
            Results ordered most recent date first
        """
        ...

    def list_all(self) -> List[WorkoutResult]:
        """
        List results across all athletes (used for completion counts).

        Returns:
            Results ordered most recent date first
        """
        ...

    def create(self, athlete: Athlete, payload: ResultPayload) -> WorkoutResult:
        """
        Insert a new result row.

        Args:
            athlete: Athlete the result belongs to
            payload: Fields to write

        Returns:
            The stored result with its generated ID
        """
        ...

    def update(self, result_id: str, payload: ResultPayload) -> WorkoutResult:
        """
        Overwrite the fields of an existing result row.

        Args:
            result_id: ID of the row to update
            payload: Fields to write

        Returns:
            The stored result after the update
        """
        ...

    def delete(self, result_id: str) -> bool:
        """
        Delete a result row.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        ...
