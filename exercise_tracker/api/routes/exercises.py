"""Exercise Routes — add exercises, read a user's log, bulk-delete exercises.

Invariants:
    - Unknown (or malformed) user ids answer 404 before anything is written
    - Log query parameters are read as raw strings; coercion happens in the service
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.routes.request_body import read_payload
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.exercise import (
    ExerciseCreate, ExerciseLogResponse, ExerciseResponse,
)
from exercise_tracker.schemas.user import BulkDeleteResponse
from exercise_tracker.services import exercise_service

router = APIRouter(prefix="/api", tags=["exercises"])


@router.post(
    "/users/{user_id}/exercises", response_model=ExerciseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_exercise(
    user_id: str,
    payload: dict = Depends(read_payload),
    db: AsyncSession = Depends(get_db),
):
    """Log an exercise for a user; date defaults to today (UTC)."""
    body = ExerciseCreate.model_validate(payload)
    return await exercise_service.add_exercise(db, user_id, body)


@router.get("/users/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """A user's exercises within [from, to], capped at limit."""
    return await exercise_service.get_log(
        db, user_id, date_from=date_from, date_to=date_to, limit=limit,
    )


@router.get("/exercises/delete", response_model=BulkDeleteResponse)
async def delete_all_exercises(db: AsyncSession = Depends(get_db)):
    return await exercise_service.delete_all_exercises(db)
