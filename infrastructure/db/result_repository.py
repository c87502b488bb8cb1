"""
Supabase implementation of ResultRepository.

This module provides the concrete Supabase implementation for workout result
persistence. The `results` table has a unique constraint on
(athlete_id, date); a second insert for the same day is rejected by storage
and surfaces as ResultStoreError.
"""
import logging
from typing import List

from supabase import Client

from application.ports.result_repository import ResultStoreError
from domain.converters import db_row_to_result, payload_to_db_row
from domain.models import Athlete, ResultPayload, WorkoutResult

logger = logging.getLogger(__name__)


class SupabaseResultRepository:
    """
    Supabase implementation of ResultRepository protocol.

    All Supabase query logic for results is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = "results"):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the results table
        """
        self._client = client
        self._table = table

    def list_for_athlete(self, athlete_id: str) -> List[WorkoutResult]:
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .eq("athlete_id", athlete_id)
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list results for athlete {athlete_id}: {e}")
            raise ResultStoreError(f"Failed to load results: {e}") from e
        return [db_row_to_result(row) for row in result.data or []]

    def list_all(self) -> List[WorkoutResult]:
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list results: {e}")
            raise ResultStoreError(f"Failed to load results: {e}") from e
        return [db_row_to_result(row) for row in result.data or []]

    def create(self, athlete: Athlete, payload: ResultPayload) -> WorkoutResult:
        data = payload_to_db_row(payload, athlete=athlete)
        try:
            result = self._client.table(self._table).insert(data).execute()
        except Exception as e:
            logger.error(f"Failed to create result for athlete {athlete.id}: {e}")
            raise ResultStoreError(f"Failed to save result: {e}") from e
        if not result.data:
            raise ResultStoreError("Failed to save result: no row returned")
        logger.info(f"Result created for athlete {athlete.id} on {payload.date}")
        return db_row_to_result(result.data[0])

    def update(self, result_id: str, payload: ResultPayload) -> WorkoutResult:
        data = payload_to_db_row(payload)
        try:
            result = (
                self._client.table(self._table)
                .update(data)
                .eq("id", result_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update result {result_id}: {e}")
            raise ResultStoreError(f"Failed to update result: {e}") from e
        if not result.data:
            raise ResultStoreError(f"Failed to update result: {result_id} not found")
        logger.info(f"Result {result_id} updated")
        return db_row_to_result(result.data[0])

    def delete(self, result_id: str) -> bool:
        try:
            result = self._client.table(self._table).delete().eq("id", result_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete result {result_id}: {e}")
            raise ResultStoreError(f"Failed to delete result: {e}") from e
        deleted = bool(result.data)
        if deleted:
            logger.info(f"Result {result_id} deleted")
        return deleted
