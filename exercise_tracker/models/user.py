"""User ORM — a named owner of exercise records.

Invariants:
    - id is an opaque UUID primary key
    - username is free text: nullable, not unique, never updated after insert

Design Decisions:
    - No relationship() to Exercise: exercises reference users by value only, so
      bulk user deletion never cascades (ADR: records outlive their owner)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """User record."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
