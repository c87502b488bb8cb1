"""
CustomWorkoutBuilder.

Assembles an athlete-authored workout (name, type, movements) that is logged
outside the programmed catalog. The type drives the score category exactly as
a catalog workout's type does.
"""

import logging
from typing import List, Optional

from application.errors import BenchmarkNameCollisionError, ResultValidationError
from application.ports import BenchmarkDirectory
from domain.models import CustomWorkout, Movement, ScoreCategory
from domain.scoring import classify

logger = logging.getLogger(__name__)

DEFAULT_CUSTOM_TYPE = "For Time"


class CustomWorkoutBuilder:
    """
    Mutable draft of a custom workout.

    The movement list always holds at least one row so the editing surface has
    somewhere to type.

    Usage:
        >>> builder = CustomWorkoutBuilder(benchmarks)
        >>> builder.set_name("Backyard burner")
        >>> builder.update_movement(0, name="Burpee", reps="50")
        >>> workout = builder.build()
    """

    def __init__(
        self,
        benchmarks: BenchmarkDirectory,
        *,
        name: str = "",
        workout_type: str = DEFAULT_CUSTOM_TYPE,
        movements: Optional[List[Movement]] = None,
    ) -> None:
        self._benchmarks = benchmarks
        self._name = name
        self._type = workout_type
        self._movements: List[Movement] = list(movements or []) or [Movement()]

    @property
    def name(self) -> str:
        return self._name

    @property
    def workout_type(self) -> str:
        return self._type

    @property
    def category(self) -> ScoreCategory:
        return classify(self._type)

    @property
    def movements(self) -> List[Movement]:
        return list(self._movements)

    def set_name(self, name: Optional[str]) -> None:
        self._name = name or ""

    def set_type(self, workout_type: str) -> ScoreCategory:
        """Set the workout type and return the score category it maps to."""
        self._type = workout_type
        return self.category

    def add_movement(self, movement: Optional[Movement] = None) -> int:
        """Append a movement row (blank by default) and return its index."""
        self._movements.append(movement or Movement())
        return len(self._movements) - 1

    def remove_movement(self, index: int) -> bool:
        """
        Remove a movement row.

        Returns:
            False when the row is the last one left (nothing is removed)
        """
        if len(self._movements) <= 1:
            return False
        del self._movements[index]
        return True

    def update_movement(self, index: int, **changes: str) -> Movement:
        """Change fields (name, reps, notes) of a movement row."""
        current = self._movements[index]
        updated = Movement(**{**current.model_dump(), **changes})
        self._movements[index] = updated
        return updated

    def name_error(self) -> Optional[str]:
        """Advisory message when the name belongs to a benchmark workout."""
        collision = self._benchmark_collision()
        return collision.message if collision else None

    def _benchmark_collision(self) -> Optional[BenchmarkNameCollisionError]:
        name = self._name.strip()
        if not name:
            return None
        benchmark = self._benchmarks.find(name)
        if benchmark is None:
            return None
        return BenchmarkNameCollisionError(name, benchmark)

    def _named_movements(self) -> List[Movement]:
        return [m for m in self._movements if m.name.strip()]

    def validate(self) -> List[str]:
        """Return every problem that blocks logging; empty when valid."""
        errors = []
        collision = self._benchmark_collision()
        if collision:
            errors.append(collision.message)
        if not self._named_movements():
            errors.append("Add at least one movement to your workout")
        return errors

    def build(self) -> CustomWorkout:
        """
        Build the custom workout, keeping only named movements.

        Raises:
            BenchmarkNameCollisionError: If the name belongs to a benchmark
            ResultValidationError: If no movement has a name
        """
        collision = self._benchmark_collision()
        if collision:
            logger.warning("Custom workout name collides with benchmark %r", collision.benchmark)
            raise collision

        movements = self._named_movements()
        if not movements:
            logger.warning("Custom workout has no named movements")
            raise ResultValidationError("Add at least one movement to your workout")

        return CustomWorkout(
            name=self._name.strip() or None,
            type=self._type,
            movements=movements,
        )
