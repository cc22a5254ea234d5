"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    id: int
    username: str
    display_name: str | None
    role: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CurrentUserRead(UserRead):
    permissions: list[str] = Field(
        default_factory=list, description="Effective permission keys of the user's role"
    )


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    display_name: str | None = Field(default=None, max_length=100)
    role: str | None = Field(default=None, max_length=50)


class UserUpdate(BaseModel):
    display_name: str | None = Field(default=None, max_length=100)
    password: str | None = Field(default=None, min_length=1)
    role: str | None = Field(default=None, max_length=50)

    model_config = ConfigDict(extra="forbid")
