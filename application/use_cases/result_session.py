"""
ResultEditingSession.

The stateful side of result reconciliation. A session belongs to one athlete
and one "today"; it loads the athlete's stored results and the catalog, works
out what a submission must write (see domain.reconciliation), holds the
in-progress draft and score editor, and performs exactly one create or update
per submit.

After every write the session reloads the athlete's results and the
cross-athlete result set from storage instead of patching its cache.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from application.errors import (
    NothingToSubmitError,
    ResultNotFoundError,
    WorkoutNotFoundError,
)
from application.ports import (
    BenchmarkDirectory,
    ResultRepository,
    ResultStoreError,
    WorkoutCatalog,
)
from application.use_cases.custom_workout import CustomWorkoutBuilder
from application.use_cases.score_editor import ScoreEditor
from domain.models import (
    Athlete,
    CatalogWorkout,
    MovementLog,
    ResultPayload,
    ScoreCategory,
    WorkoutResult,
)
from domain.reconciliation import (
    EditingTarget,
    ReconciliationState,
    ResultDraft,
    custom_workout_target,
    find_result_for_date,
    past_result_target,
    reconcile_day,
    resolve_displayed_workout,
)
from domain.scoring import classify

logger = logging.getLogger(__name__)


@dataclass
class SubmitOutcome:
    """Result of a successful submit."""

    result: WorkoutResult
    is_update: bool
    state: ReconciliationState


class ResultEditingSession:
    """
    Editing session for one athlete's results.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> session = ResultEditingSession(
        ...     athlete,
        ...     result_repo=result_repo,
        ...     catalog=catalog,
        ...     benchmarks=benchmarks,
        ...     today=date(2024, 3, 1),
        ... )
        >>> session.load()
        >>> session.edit_score_fields(minutes="12", seconds="34")
        >>> outcome = session.submit()
    """

    def __init__(
        self,
        athlete: Athlete,
        *,
        result_repo: ResultRepository,
        catalog: WorkoutCatalog,
        benchmarks: BenchmarkDirectory,
        today: date,
    ) -> None:
        """
        Initialize the session with required dependencies.

        Args:
            athlete: Athlete whose results are edited
            result_repo: Repository for reading and writing results
            catalog: Source of programmed workouts
            benchmarks: Benchmark names custom workouts may not reuse
            today: Calendar day treated as "today"
        """
        self._athlete = athlete
        self._result_repo = result_repo
        self._catalog = catalog
        self._benchmarks = benchmarks
        self._today = today

        self._results: List[WorkoutResult] = []
        self._all_results: List[WorkoutResult] = []
        self._workouts: List[CatalogWorkout] = []
        self._displayed: Optional[CatalogWorkout] = None
        self._builder: Optional[CustomWorkoutBuilder] = None
        self._go_idle()

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self) -> ReconciliationState:
        """
        Reload results and the catalog, then reconcile today.

        Raises:
            ResultStoreError: If storage cannot be read
        """
        self._reload_results()
        self._workouts = self._catalog.list_workouts()
        self._displayed = resolve_displayed_workout(
            self._workouts, self._today, self._athlete.group
        )
        self._builder = None
        self._restore_day()
        return self.state

    def _reload_results(self) -> None:
        self._results = self._result_repo.list_for_athlete(self._athlete.id)
        self._all_results = self._result_repo.list_all()

    def _restore_day(self) -> None:
        target = reconcile_day(self._results, self._displayed, self._today)
        self._enter(target, self._displayed.type if self._displayed else None)

    def _enter(self, target: EditingTarget, workout_type: Optional[str]) -> None:
        self._target = target
        self._draft = target.draft.model_copy(deep=True)
        self._editor = ScoreEditor(self._draft.score_text, classify(workout_type))
        logger.info(
            "Athlete %s editing state: %s (result_id=%s)",
            self._athlete.id,
            target.state.value,
            target.result_id,
        )

    def _go_idle(self) -> None:
        self._builder = None
        self._target = EditingTarget(
            state=ReconciliationState.IDLE,
            day=self._today,
            day_result=find_result_for_date(self._results, self._today),
        )
        self._draft = ResultDraft()
        self._editor = ScoreEditor("", ScoreCategory.FREEFORM)

    # =========================================================================
    # Entry points
    # =========================================================================

    def start_custom_workout(self) -> CustomWorkoutBuilder:
        """
        Start logging a custom workout for today.

        Any catalog context is dropped. If a row already exists for today the
        submission updates it.
        """
        self._builder = CustomWorkoutBuilder(self._benchmarks)
        self._enter(
            custom_workout_target(self._results, self._today),
            self._builder.workout_type,
        )
        return self._builder

    def start_editing_past(self, result_id: str) -> EditingTarget:
        """
        Start editing a specific stored result, whatever its date.

        Raises:
            ResultNotFoundError: If the result is not one of the athlete's
        """
        result = self._find_result(result_id)
        workout = self._find_workout(result.wod_id) if result.wod_id else None
        self._builder = None
        workout_type = result.custom_wod_type or (workout.type if workout else None)
        self._enter(past_result_target(result, workout), workout_type)
        return self._target

    def start_logging_missed(self, workout_id: str) -> EditingTarget:
        """
        Start logging a catalog workout from an earlier day.

        The workout's own date is reconciled with the same rules as today.

        Raises:
            WorkoutNotFoundError: If the workout is not in the catalog
        """
        workout = self._find_workout(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)
        self._builder = None
        self._enter(reconcile_day(self._results, workout, workout.date), workout.type)
        return self._target

    def cancel(self) -> ReconciliationState:
        """Leave custom or past editing and recompute today's state."""
        self._builder = None
        self._restore_day()
        return self.state

    # =========================================================================
    # Editing
    # =========================================================================

    def _require_target(self) -> None:
        if self.state == ReconciliationState.IDLE:
            raise NothingToSubmitError()

    def edit_score_fields(self, **fields: Optional[str]) -> str:
        """Apply edited score sub-fields and return the resulting score text."""
        self._require_target()
        editor = self.editor
        editor.update_fields(**fields)
        return editor.text

    def edit_score_text(self, text: Optional[str]) -> str:
        """Replace the score with raw text and return the resulting score text."""
        self._require_target()
        editor = self.editor
        editor.set_text(text)
        return editor.text

    def set_movement_weight(self, index: int, weight: str) -> None:
        self._require_target()
        movements = list(self._draft.movements)
        if not 0 <= index < len(movements):
            raise IndexError(f"Movement index {index} out of range")
        movements[index] = movements[index].model_copy(update={"weight": weight})
        self._draft = self._draft.model_copy(update={"movements": movements})

    def set_notes(self, notes: Optional[str]) -> None:
        self._require_target()
        self._draft = self._draft.model_copy(update={"notes": notes or ""})

    def set_rx(self, rx: bool) -> None:
        self._require_target()
        self._draft = self._draft.model_copy(update={"rx": rx})

    def attach_photo(self, photo_url: str) -> None:
        self._require_target()
        self._draft = self._draft.model_copy(update={"photo_url": photo_url})

    def remove_photo(self) -> None:
        self._require_target()
        self._draft = self._draft.model_copy(update={"photo_url": None})

    # =========================================================================
    # Submit / delete
    # =========================================================================

    def _build_payload(self) -> ResultPayload:
        target = self._target
        fields = dict(
            score_text=self.editor.text,
            rx=self._draft.rx,
            notes=self._draft.notes,
            photo_url=self._draft.photo_url,
        )

        if target.state == ReconciliationState.EDITING_CUSTOM:
            workout = self._builder.build()
            return ResultPayload(
                wod_id=None,
                date=target.day,
                movements=[MovementLog.blank(m) for m in workout.movements],
                custom_wod_name=workout.name,
                custom_wod_type=workout.type,
                **fields,
            )

        if target.state == ReconciliationState.EDITING_PAST:
            result = target.day_result
            return ResultPayload(
                wod_id=None if result.is_custom else result.wod_id,
                date=result.date,
                movements=self._draft.movements,
                custom_wod_name=result.custom_wod_name,
                custom_wod_type=result.custom_wod_type,
                **fields,
            )

        # Catalog workout; a stale custom row is overwritten with the catalog reference
        return ResultPayload(
            wod_id=target.workout.id,
            date=target.day,
            movements=self._draft.movements,
            **fields,
        )

    def submit(self) -> SubmitOutcome:
        """
        Write the draft: one update when the target has a row id, else one create.

        On success the session returns to IDLE and reloads from storage. A
        failed reload after the write is logged; the saved row is merged into
        the cached results and the outcome is still returned.

        Raises:
            NothingToSubmitError: If there is no editing target
            ResultValidationError: If the custom workout is invalid
            ResultStoreError: If the write fails (editing state is kept)
        """
        self._require_target()
        target = self._target
        payload = self._build_payload()

        score_error = self.editor.error
        if score_error:
            logger.warning(
                "Athlete %s submitting with incomplete score %r: %s",
                self._athlete.id,
                payload.score_text,
                score_error,
            )

        try:
            if target.is_update:
                saved = self._result_repo.update(target.result_id, payload)
            else:
                saved = self._result_repo.create(self._athlete, payload)
        except ResultStoreError as e:
            logger.error(
                "Failed to save result for athlete %s (%s): %s",
                self._athlete.id,
                target.state.value,
                e,
            )
            raise

        logger.info(
            "%s result %s for athlete %s on %s",
            "Updated" if target.is_update else "Created",
            saved.id,
            self._athlete.id,
            payload.date,
        )

        # The write is committed: leave editing before the reload can fail
        self._go_idle()
        try:
            self._reload_results()
        except ResultStoreError as e:
            logger.error("Saved result %s but failed to reload results: %s", saved.id, e)
            self._results = [r for r in self._results if r.id != saved.id] + [saved]
        self._target = self._target.model_copy(
            update={"day_result": find_result_for_date(self._results, self._today)}
        )
        return SubmitOutcome(result=saved, is_update=target.is_update, state=self.state)

    def delete_result(self, result_id: str) -> None:
        """
        Delete one of the athlete's results, reload, and recompute today.

        Raises:
            ResultNotFoundError: If the result is not one of the athlete's
            ResultStoreError: If the delete fails
        """
        self._find_result(result_id)
        try:
            self._result_repo.delete(result_id)
        except ResultStoreError as e:
            logger.error("Failed to delete result %s: %s", result_id, e)
            raise
        logger.info("Deleted result %s for athlete %s", result_id, self._athlete.id)
        self._reload_results()
        self._builder = None
        self._restore_day()

    # =========================================================================
    # Queries
    # =========================================================================

    def _find_result(self, result_id: str) -> WorkoutResult:
        for result in self._results:
            if result.id == result_id:
                return result
        raise ResultNotFoundError(result_id)

    def _find_workout(self, workout_id: str) -> Optional[CatalogWorkout]:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    def completion_count(self, wod_id: str) -> int:
        """
        Number of athletes who logged a catalog workout.

        Counts rows referencing the workout, plus rows on the workout's date
        that carry neither a workout reference nor custom fields.
        """
        workout = self._find_workout(wod_id)
        athletes = {
            r.athlete_id
            for r in self._all_results
            if r.wod_id == wod_id
            or (
                workout is not None
                and r.wod_id is None
                and not r.is_custom
                and r.date == workout.date
            )
        }
        return len(athletes)

    @property
    def athlete(self) -> Athlete:
        return self._athlete

    @property
    def today(self) -> date:
        return self._today

    @property
    def state(self) -> ReconciliationState:
        return self._target.state

    @property
    def target(self) -> EditingTarget:
        return self._target

    @property
    def displayed_workout(self) -> Optional[CatalogWorkout]:
        return self._displayed

    @property
    def results(self) -> List[WorkoutResult]:
        return list(self._results)

    @property
    def all_results(self) -> List[WorkoutResult]:
        return list(self._all_results)

    @property
    def workouts(self) -> List[CatalogWorkout]:
        return list(self._workouts)

    @property
    def custom_builder(self) -> Optional[CustomWorkoutBuilder]:
        return self._builder

    @property
    def editor(self) -> ScoreEditor:
        """Score editor, following the custom workout type while one is built."""
        if self._builder is not None:
            self._editor.change_category(self._builder.category)
        return self._editor

    @property
    def draft(self) -> ResultDraft:
        """Current draft with the score text as it would be written."""
        return self._draft.model_copy(update={"score_text": self.editor.text})
