from .auth import LoginRequest, LoginResponse, SeedAdminResponse, Token
from .common import MessageResponse
from .news import NewsCreate, NewsRead, NewsUpdate
from .permission import (
    PermissionCreate,
    PermissionRead,
    PermissionSeedResponse,
    RoleCreate,
    RolePermissionsRead,
    RolePermissionsUpdate,
    RoleRead,
)
from .pharmacist import PharmacistRead
from .user import CurrentUserRead, UserCreate, UserRead, UserUpdate
from .web_settings import WebSettingsRead, WebSettingsUpdate

__all__ = [
    "CurrentUserRead",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "NewsCreate",
    "NewsRead",
    "NewsUpdate",
    "PermissionCreate",
    "PermissionRead",
    "PermissionSeedResponse",
    "PharmacistRead",
    "RoleCreate",
    "RolePermissionsRead",
    "RolePermissionsUpdate",
    "RoleRead",
    "SeedAdminResponse",
    "Token",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "WebSettingsRead",
    "WebSettingsUpdate",
]
