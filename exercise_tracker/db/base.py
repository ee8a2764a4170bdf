"""SQLAlchemy Declarative Base — shared metadata for the users and exercises tables.

Invariants:
    - All models inherit from Base
    - Base.metadata is what create_schema() and alembic autogenerate read
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all exercise tracker ORM models."""
    pass
