"""
Exercise endpoints.

Log exercises for a user and read back the user's exercise log with
optional date filters and a limit.  Both routes answer 404 when the
user id is unknown.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from exercise_tracker_api.app.api.deps import exercise_create_body, get_store, log_query
from exercise_tracker_api.app.core.store import JsonStore
from exercise_tracker_api.app.schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseRead, LogQuery
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.user_service import UserNotFoundError


router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(
    user_id: str,
    exercise: ExerciseCreate = Depends(exercise_create_body),
    store: JsonStore = Depends(get_store),
) -> ExerciseRead:
    """Log an exercise for a user.

    ``duration`` is in minutes.  ``date`` may be omitted, in which case
    today's date is used.  The response merges the user's ``id`` and
    ``username`` with the stored exercise.
    """
    try:
        return await ExerciseService.add_exercise(store, user_id, exercise)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_log(
    user_id: str,
    query: LogQuery = Depends(log_query),
    store: JsonStore = Depends(get_store),
) -> ExerciseLog:
    """Return a user's exercise log.

    - **from**, **to**: inclusive date bounds (``YYYY-MM-DD``).
    - **limit**: keep only the first N entries after date filtering.

    ``count`` equals the number of entries returned.
    """
    try:
        return await ExerciseService.get_log(store, user_id, query)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
