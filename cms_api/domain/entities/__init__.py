"""Domain entities exposed by the application."""

from .news import NEWS_CATEGORIES, NEWS_STATUSES, News
from .permission import Permission
from .pharmacist import Pharmacist
from .role import ADMIN_ROLE, RoleName, RoleSummary, is_admin_role, parse_role_name
from .user import User
from .web_settings import WebSettings

__all__ = [
    "ADMIN_ROLE",
    "NEWS_CATEGORIES",
    "NEWS_STATUSES",
    "News",
    "Permission",
    "Pharmacist",
    "RoleName",
    "RoleSummary",
    "User",
    "WebSettings",
    "is_admin_role",
    "parse_role_name",
]
