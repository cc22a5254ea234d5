"""Authentication related schemas."""

from pydantic import BaseModel, Field

from .user import CurrentUserRead, UserRead


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: CurrentUserRead


class SeedAdminResponse(BaseModel):
    success: bool = True
    message: str
    user: UserRead
