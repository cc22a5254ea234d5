"""Permission catalog and role schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PermissionRead(BaseModel):
    id: int
    key: str
    label: str
    group: str | None
    order: int

    model_config = ConfigDict(from_attributes=True)


class PermissionCreate(BaseModel):
    key: str = Field(..., min_length=1, max_length=100)
    label: str = Field(..., min_length=1, max_length=255)
    group: str | None = Field(default=None, max_length=100)
    order: int = 0


class PermissionSeedResponse(BaseModel):
    success: bool = True
    message: str
    count: int


class RolePermissionsUpdate(BaseModel):
    permissions: list[str] = Field(
        default_factory=list,
        description="Complete replacement set of permission keys for the role",
    )


class RolePermissionsRead(BaseModel):
    success: bool = True
    role: str
    permissions: list[str]


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    permissions: list[str] = Field(default_factory=list)


class RoleRead(BaseModel):
    name: str
    permissions: list[str]
    user_count: int

    model_config = ConfigDict(from_attributes=True)
