"""
Fake Result Repository for testing.

This module provides an in-memory implementation of ResultRepository
for fast, isolated testing without database dependencies. Like the real
table it rejects a second row for the same (athlete_id, date).
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union
import uuid

from application.ports import ResultStoreError
from domain.models import Athlete, ResultPayload, WorkoutResult


class FakeResultRepository:
    """
    In-memory fake implementation of ResultRepository for testing.

    Stores results in a dict keyed by result ID.

    Usage:
        repo = FakeResultRepository()
        repo.seed([{"id": "r1", "athlete_id": "a1", "date": "2024-03-01", ...}])
        repo.fail_next("update")  # next update raises ResultStoreError
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._results: Dict[str, WorkoutResult] = {}
        self._failures: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, Any]] = []

    def reset(self) -> None:
        """Clear all stored results, pending failures and recorded calls."""
        self._results.clear()
        self._failures.clear()
        self.calls.clear()

    def seed(self, results: List[Union[WorkoutResult, Dict[str, Any]]]) -> None:
        """
        Seed the repository with test data.

        Args:
            results: WorkoutResult models or dicts with at least athlete_id and date
        """
        for result in results:
            if isinstance(result, dict):
                result = WorkoutResult(**{"id": str(uuid.uuid4()), **result})
            self._results[result.id] = result

    def get_all(self) -> List[WorkoutResult]:
        """Get all stored results (test helper)."""
        return list(self._results.values())

    def get(self, result_id: str) -> Optional[WorkoutResult]:
        """Get one stored result (test helper)."""
        return self._results.get(result_id)

    def fail_next(self, method: str, error: Optional[Exception] = None) -> None:
        """Make the next call to `method` raise (ResultStoreError by default)."""
        self._failures[method] = error or ResultStoreError(f"{method} failed")

    def calls_to(self, method: str) -> List[Any]:
        """Arguments of recorded calls to `method` (test helper)."""
        return [args for name, args in self.calls if name == method]

    def _record(self, method: str, args: Any) -> None:
        self.calls.append((method, args))
        failure = self._failures.pop(method, None)
        if failure is not None:
            raise failure

    @staticmethod
    def _sorted(results: List[WorkoutResult]) -> List[WorkoutResult]:
        return sorted(results, key=lambda r: r.date, reverse=True)

    def _check_unique(self, athlete_id: str, payload: ResultPayload, exclude_id: Optional[str] = None) -> None:
        for existing in self._results.values():
            if (
                existing.id != exclude_id
                and existing.athlete_id == athlete_id
                and existing.date == payload.date
            ):
                raise ResultStoreError(
                    'duplicate key value violates unique constraint "results_athlete_id_date_key"'
                )

    # =========================================================================
    # ResultRepository Protocol Methods
    # =========================================================================

    def list_for_athlete(self, athlete_id: str) -> List[WorkoutResult]:
        self._record("list_for_athlete", athlete_id)
        return self._sorted([r for r in self._results.values() if r.athlete_id == athlete_id])

    def list_all(self) -> List[WorkoutResult]:
        self._record("list_all", None)
        return self._sorted(list(self._results.values()))

    def create(self, athlete: Athlete, payload: ResultPayload) -> WorkoutResult:
        self._record("create", (athlete, payload))
        self._check_unique(athlete.id, payload)
        now = datetime.now(timezone.utc)
        result = WorkoutResult(
            id=str(uuid.uuid4()),
            athlete_id=athlete.id,
            athlete_name=athlete.name,
            athlete_email=athlete.email,
            logged_at=now,
            updated_at=now,
            **payload.model_dump(),
        )
        self._results[result.id] = result
        return result

    def update(self, result_id: str, payload: ResultPayload) -> WorkoutResult:
        self._record("update", (result_id, payload))
        existing = self._results.get(result_id)
        if existing is None:
            raise ResultStoreError(f"Failed to update result: {result_id} not found")
        self._check_unique(existing.athlete_id, payload, exclude_id=result_id)
        result = WorkoutResult(
            **{
                **existing.model_dump(),
                **payload.model_dump(),
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._results[result_id] = result
        return result

    def delete(self, result_id: str) -> bool:
        self._record("delete", result_id)
        return self._results.pop(result_id, None) is not None
