"""Exercise Service — add exercises, bulk-delete them, and read a user's log.

Invariants:
    - add_exercise checks the owner once, then inserts (two round trips, no transaction
      spanning both: an owner deleted in between leaves an orphaned exercise)
    - Stored dates stay ISO strings; responses render them human-readable
    - get_log: count == len(log), never the total number of matches
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.coercion import parse_limit
from exercise_tracker.core.dates import epoch_iso, to_date_string, today_iso
from exercise_tracker.infrastructure.database import store_operation
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.schemas.exercise import (
    ExerciseCreate, ExerciseLogResponse, ExerciseResponse, LogEntry,
)
from exercise_tracker.schemas.user import BulkDeleteResponse, DeleteResult
from exercise_tracker.services.user_service import get_user_or_404

logger = logging.getLogger(__name__)


async def add_exercise(
    db: AsyncSession, user_id: str | UUID, payload: ExerciseCreate,
) -> ExerciseResponse:
    """Attach a new exercise to an existing user."""
    failure = "Exercise creation failed!"
    exercise_date = payload.date or today_iso()

    async with store_operation(db, failure, "find_user"):
        user = await get_user_or_404(db, user_id)

    async with store_operation(db, failure, "add_exercise"):
        exercise = Exercise(
            user_id=user.id,
            username=user.username,
            description=payload.description,
            duration=payload.duration,
            date=exercise_date,
        )
        db.add(exercise)
        await db.commit()
        await db.refresh(exercise)

    logger.info("Exercise added", extra={"user_id": str(user.id)})
    return ExerciseResponse(
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=to_date_string(exercise.date),
        id=user.id,
    )


async def delete_all_exercises(db: AsyncSession) -> BulkDeleteResponse:
    async with store_operation(
        db, "Deleting all exercises failed!", "delete_all_exercises",
    ):
        result = await db.execute(delete(Exercise))
        await db.commit()
    deleted = result.rowcount or 0
    logger.info("All exercises deleted", extra={"deleted_count": deleted})
    return BulkDeleteResponse(
        message="All exercises have been deleted!",
        result=DeleteResult(deleted_count=deleted),
    )


async def get_log(
    db: AsyncSession,
    user_id: str | UUID,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: object = None,
) -> ExerciseLogResponse:
    """Exercises for one user within [date_from, date_to], oldest first."""
    failure = "Failed to retrieve exercise logs"

    async with store_operation(db, failure, "find_user"):
        user = await get_user_or_404(db, user_id)

    query = (
        select(Exercise)
        .where(
            Exercise.user_id == user.id,
            Exercise.date >= (date_from or epoch_iso()),
            Exercise.date <= (date_to or today_iso()),
        )
        .order_by(Exercise.created_at)
    )
    cap = parse_limit(limit)
    if cap:
        query = query.limit(cap)

    async with store_operation(db, failure, "get_log"):
        result = await db.execute(query)
        exercises = result.scalars().all()

    log = [
        LogEntry(
            description=ex.description,
            duration=ex.duration,
            date=to_date_string(ex.date),
        )
        for ex in exercises
    ]
    return ExerciseLogResponse(
        id=user.id, username=user.username, count=len(log), log=log,
    )
