"""Exercise Schemas — exercise payload, composed exercise record, and log response.

Invariants:
    - ExerciseCreate never fails validation: description/duration enforcement is left
      to the store's NOT NULL columns
    - duration is read with integer-prefix semantics ("30min" -> 30, "abc" -> None)
    - A falsy date ("" or missing) means "today"
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exercise_tracker.core.coercion import parse_int


class ExerciseCreate(BaseModel):
    """Exercise payload from JSON or form body."""
    model_config = ConfigDict(extra="ignore")

    description: str | None = None
    duration: int | None = None
    date: str | None = None

    @field_validator("description", "date", mode="before")
    @classmethod
    def stringify(cls, v: object) -> str | None:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v: object) -> int | None:
        return parse_int(v)


class ExerciseResponse(BaseModel):
    """Composed exercise record; _id is the owning user's id."""
    model_config = ConfigDict(populate_by_name=True)

    username: str | None
    description: str
    duration: int
    date: str
    id: UUID = Field(alias="_id")


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    """A user's exercise log; count is the number of entries returned."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str | None
    count: int
    log: list[LogEntry]
