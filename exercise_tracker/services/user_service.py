"""User Service — list, create, and bulk-delete users.

Invariants:
    - list_users raises NotFoundError on an empty collection (404, not [])
    - create_user stores the username verbatim (no emptiness or duplicate checks)
    - delete_all_users never touches exercises

Design Decisions:
    - get_user_or_404 shared with exercise_service: both exercise endpoints need the owner
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import NotFoundError
from exercise_tracker.infrastructure.database import store_operation
from exercise_tracker.models.user import User
from exercise_tracker.schemas.user import (
    BulkDeleteResponse, DeleteResult, UserResponse,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found!"


def _parse_user_id(user_id: str | UUID) -> UUID | None:
    if isinstance(user_id, UUID):
        return user_id
    try:
        return UUID(user_id)
    except (ValueError, TypeError):
        return None


async def get_user_or_404(db: AsyncSession, user_id: str | UUID) -> User:
    """Load a user by id; malformed ids are treated as absent."""
    uid = _parse_user_id(user_id)
    user = await db.get(User, uid) if uid is not None else None
    if user is None:
        logger.info("User lookup missed", extra={"user_id": str(user_id)})
        raise NotFoundError(USER_NOT_FOUND)
    return user


async def list_users(db: AsyncSession) -> list[UserResponse]:
    async with store_operation(db, "Getting all users failed!", "list_users"):
        result = await db.execute(select(User).order_by(User.created_at))
        users = result.scalars().all()
    if not users:
        raise NotFoundError("No users found in the database!")
    return [UserResponse(id=u.id, username=u.username) for u in users]


async def create_user(db: AsyncSession, username: str | None) -> UserResponse:
    async with store_operation(db, "User creation failed!", "create_user"):
        user = User(username=username)
        db.add(user)
        await db.commit()
        await db.refresh(user)
    logger.info("User created", extra={"user_id": str(user.id)})
    return UserResponse(id=user.id, username=user.username)


async def delete_all_users(db: AsyncSession) -> BulkDeleteResponse:
    async with store_operation(db, "Deleting all users failed!", "delete_all_users"):
        result = await db.execute(delete(User))
        await db.commit()
    deleted = result.rowcount or 0
    logger.info("All users deleted", extra={"deleted_count": deleted})
    return BulkDeleteResponse(
        message="All users have been deleted!",
        result=DeleteResult(deleted_count=deleted),
    )
