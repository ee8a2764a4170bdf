"""Exercise ORM — one logged activity, attached to a user by id.

Invariants:
    - description and duration are NOT NULL: the store rejects incomplete records
    - user_id is a plain column, not a ForeignKey (existence checked once, at write time)
    - username is a denormalized copy taken at insert time, never re-synced
    - date is a YYYY-MM-DD string; range queries compare it lexicographically
    - duration is 64-bit; text columns are unbounded so malformed input is stored as sent

Design Decisions:
    - created_at drives log ordering (insertion order)
    - Indexes on user_id and date: the log query filters on both
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise log entry."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    username: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(BigInteger, nullable=False)
    date: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
