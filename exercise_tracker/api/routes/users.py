"""User Routes — list, create, and bulk-delete users.

Invariants:
    - GET /api/users answers 404 on an empty collection
    - POST /api/users answers 201 with {username, _id}
    - Bulk delete is a GET (kept for browser/form compatibility)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.routes.request_body import read_payload
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.user import (
    BulkDeleteResponse, UserCreate, UserResponse,
)
from exercise_tracker.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """All users, oldest first."""
    return await user_service.list_users(db)


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    payload: dict = Depends(read_payload),
    db: AsyncSession = Depends(get_db),
):
    body = UserCreate.model_validate(payload)
    return await user_service.create_user(db, body.username)


@router.get("/delete", response_model=BulkDeleteResponse)
async def delete_all_users(db: AsyncSession = Depends(get_db)):
    """Delete every user. Exercises are left in place."""
    return await user_service.delete_all_users(db)
