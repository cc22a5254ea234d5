"""Repository implementations for infrastructure layer."""

from .news_repository import NewsRepository
from .permission_repository import PermissionRepository
from .pharmacist_repository import PharmacistRepository
from .role_permission_repository import RolePermissionRepository
from .user_repository import UserRepository
from .web_settings_repository import WebSettingsRepository

__all__ = [
    "NewsRepository",
    "PermissionRepository",
    "PharmacistRepository",
    "RolePermissionRepository",
    "UserRepository",
    "WebSettingsRepository",
]
