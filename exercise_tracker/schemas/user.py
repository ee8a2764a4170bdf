"""User Schemas — creation payload, public user record, bulk delete result."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """User creation payload — username is taken as-is (no emptiness/duplicate checks)."""
    model_config = ConfigDict(extra="ignore")

    username: str | None = None

    @field_validator("username", mode="before")
    @classmethod
    def stringify_username(cls, v: object) -> str | None:
        if v is None or isinstance(v, str):
            return v
        return str(v)


class UserResponse(BaseModel):
    """Public user record."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str | None


class DeleteResult(BaseModel):
    """Outcome of a bulk delete."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(alias="deletedCount")


class BulkDeleteResponse(BaseModel):
    message: str
    result: DeleteResult
