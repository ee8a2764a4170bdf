"""Database Session Manager — async connection pool, store error mapping, and health checks.

Invariants:
    - Every store failure inside store_operation() rolls back and becomes InternalError,
      including driver OverflowError for integers wider than the column (64 bits)
    - Connection pool uses pool_pre_ping for stale connection detection (non-SQLite)
    - Non-store exceptions (NotFoundError etc.) pass through store_operation untouched

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Error mapping lives in store_operation, not in get_db: the route needs the
      per-operation message, which only the caller knows
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from exercise_tracker.core.errors import InternalError
from exercise_tracker.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, schema bootstrap, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        # SQLite pools (Static/SingletonThread) reject sizing arguments
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that is always closed."""
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (idempotent)."""
        import exercise_tracker.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


@asynccontextmanager
async def store_operation(
    db: AsyncSession, failure_message: str, operation: str = "unknown",
) -> AsyncGenerator[AsyncSession, None]:
    """Run store calls; any SQLAlchemy or driver overflow failure rolls back and raises InternalError."""
    try:
        yield db
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(
            f"Store {operation} failed: {e}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "operation": operation},
        )
        raise InternalError(failure_message, operation) from e
