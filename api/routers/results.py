"""
Results router for logging workout results.

This router contains endpoints for:
- /athletes/{athlete_id}/results - List and edit an athlete's results
- /athletes/{athlete_id}/today - Today's editing state and submission
- /athletes/{athlete_id}/custom - Log a custom workout for today
- /athletes/{athlete_id}/workouts/{workout_id}/result - Log a missed workout

Every request builds a fresh session and loads it from storage first.
"""

import logging
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_result_session
from api.routers.scores import score_view
from api.schemas.results import (
    CustomResultRequest,
    ResultEdits,
    ResultListResponse,
    SubmitResponse,
    TodayResponse,
)
from application.errors import (
    ResultNotFoundError,
    ResultValidationError,
    WorkoutNotFoundError,
)
from application.ports import ResultStoreError
from application.use_cases import ResultEditingSession, SubmitOutcome

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/athletes/{athlete_id}",
    tags=["Results"],
)


@contextmanager
def _http_errors():
    """Translate session errors into HTTP errors."""
    try:
        yield
    except ResultValidationError as e:
        logger.warning(f"Result rejected: {e.message}")
        raise HTTPException(status_code=422, detail={"message": e.message, "errors": e.errors})
    except (ResultNotFoundError, WorkoutNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ResultStoreError as e:
        raise HTTPException(status_code=502, detail=f"Result store error: {e}")
    except (ValueError, IndexError) as e:
        raise HTTPException(status_code=422, detail=str(e))


def _apply_edits(session: ResultEditingSession, edits: ResultEdits) -> None:
    if edits.score_fields is not None:
        session.edit_score_fields(**edits.score_fields)
    elif edits.score_text is not None:
        session.edit_score_text(edits.score_text)
    if edits.rx is not None:
        session.set_rx(edits.rx)
    if edits.notes is not None:
        session.set_notes(edits.notes)
    if edits.remove_photo:
        session.remove_photo()
    elif edits.photo_url:
        session.attach_photo(edits.photo_url)
    for index, weight in enumerate(edits.movement_weights or []):
        if weight is not None:
            session.set_movement_weight(index, weight)


def _submitted(outcome: SubmitOutcome) -> SubmitResponse:
    return SubmitResponse(
        result=outcome.result,
        is_update=outcome.is_update,
        state=outcome.state,
    )


def _today_view(session: ResultEditingSession) -> TodayResponse:
    target = session.target
    workout = session.displayed_workout
    return TodayResponse(
        state=target.state,
        day=target.day,
        workout=target.workout,
        result_id=target.result_id,
        day_result=target.day_result,
        draft=session.draft,
        score=score_view(session.editor),
        completion_count=session.completion_count(workout.id) if workout else None,
    )


@router.get("/results", response_model=ResultListResponse)
def list_results(session: ResultEditingSession = Depends(get_result_session)):
    """List the athlete's results, most recent first."""
    with _http_errors():
        session.load()
    results = session.results
    return ResultListResponse(results=results, count=len(results))


@router.get("/today", response_model=TodayResponse)
def get_today(session: ResultEditingSession = Depends(get_result_session)):
    """
    Today's editing state.

    `result_id` is the row a submission would update. In the
    `editing_catalog_mismatched` state it belongs to another workout (or a
    custom one) logged earlier today.
    """
    with _http_errors():
        session.load()
    return _today_view(session)


@router.post("/today", response_model=SubmitResponse)
def submit_today(
    edits: ResultEdits,
    session: ResultEditingSession = Depends(get_result_session),
):
    """Log (or re-log) today's displayed workout."""
    with _http_errors():
        session.load()
        _apply_edits(session, edits)
        return _submitted(session.submit())


@router.post("/custom", response_model=SubmitResponse)
def submit_custom(
    request: CustomResultRequest,
    session: ResultEditingSession = Depends(get_result_session),
):
    """Log a custom workout as today's result."""
    with _http_errors():
        session.load()
        builder = session.start_custom_workout()
        builder.set_name(request.name)
        builder.set_type(request.type)
        for index, movement in enumerate(request.movements):
            if index == 0:
                builder.update_movement(0, **movement.model_dump(exclude_none=True))
            else:
                builder.add_movement(movement)
        _apply_edits(session, request)
        return _submitted(session.submit())


@router.post("/workouts/{workout_id}/result", response_model=SubmitResponse)
def submit_missed(
    workout_id: str,
    edits: ResultEdits,
    session: ResultEditingSession = Depends(get_result_session),
):
    """Log a catalog workout from an earlier day."""
    with _http_errors():
        session.load()
        session.start_logging_missed(workout_id)
        _apply_edits(session, edits)
        return _submitted(session.submit())


@router.put("/results/{result_id}", response_model=SubmitResponse)
def edit_result(
    result_id: str,
    edits: ResultEdits,
    session: ResultEditingSession = Depends(get_result_session),
):
    """Edit a past result. Always updates that row."""
    with _http_errors():
        session.load()
        session.start_editing_past(result_id)
        _apply_edits(session, edits)
        return _submitted(session.submit())


@router.delete("/results/{result_id}")
def delete_result(
    result_id: str,
    session: ResultEditingSession = Depends(get_result_session),
):
    """Delete one of the athlete's results."""
    with _http_errors():
        session.load()
        session.delete_result(result_id)
    return {"success": True, "id": result_id}
