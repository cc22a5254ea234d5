"""ORM models used by the application infrastructure."""

from .news import NewsModel
from .permission import PermissionModel
from .pharmacist import PharmacistModel
from .role_permission import RolePermissionModel
from .user import UserModel
from .web_settings import WebSettingsModel

__all__ = [
    "NewsModel",
    "PermissionModel",
    "PharmacistModel",
    "RolePermissionModel",
    "UserModel",
    "WebSettingsModel",
]
