"""
Application error taxonomy.

Parse failures never raise (see domain.scoring.codec); the types below cover
user-correctable validation problems and lookups. Persistence failures are
declared next to the port that raises them (application.ports.result_repository).
"""

from typing import List, Optional


class ResultValidationError(Exception):
    """Raised when a result cannot be submitted as entered. Non-fatal."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]


class BenchmarkNameCollisionError(ResultValidationError):
    """Raised when a custom workout is named after a benchmark workout."""

    def __init__(self, name: str, benchmark: str):
        message = (
            f'"{benchmark}" is a benchmark workout. Rename your workout or wait '
            f"for the benchmark to be programmed."
        )
        super().__init__(message)
        self.name = name
        self.benchmark = benchmark


class NothingToSubmitError(ResultValidationError):
    """Raised when submit is called with no editing target."""

    def __init__(self, message: str = "There is no workout to log"):
        super().__init__(message)


class ResultNotFoundError(LookupError):
    """Raised when a result id does not belong to the athlete."""

    def __init__(self, result_id: str):
        super().__init__(f"Result not found: {result_id}")
        self.result_id = result_id


class WorkoutNotFoundError(LookupError):
    """Raised when a workout id is not in the catalog."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout not found: {workout_id}")
        self.workout_id = workout_id
