"""
Application Use Cases for the WOD results service.

This package contains the application-level objects that orchestrate domain
logic and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import ResultEditingSession

    session = ResultEditingSession(
        athlete,
        result_repo=result_repo,
        catalog=catalog,
        benchmarks=benchmarks,
        today=date.today(),
    )
    session.load()

    # Log today's catalog workout
    session.edit_score_fields(minutes="12", seconds="34")
    outcome = session.submit()

    # Log a custom workout
    builder = session.start_custom_workout()
    builder.set_name("Backyard burner")
    builder.update_movement(0, name="Burpee", reps="100")
    outcome = session.submit()
"""

from application.use_cases.custom_workout import DEFAULT_CUSTOM_TYPE, CustomWorkoutBuilder
from application.use_cases.result_session import ResultEditingSession, SubmitOutcome
from application.use_cases.score_editor import ScoreEditor

__all__ = [
    # Score editing
    "ScoreEditor",
    # Custom workouts
    "CustomWorkoutBuilder",
    "DEFAULT_CUSTOM_TYPE",
    # Reconciliation session
    "ResultEditingSession",
    "SubmitOutcome",
]
