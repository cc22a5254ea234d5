"""Use cases for managing roles and their permission sets."""

from .create_role import create_role
from .delete_role import delete_role, ensure_role_deletable
from .list_roles import list_roles, role_exists
from .replace_role_permissions import replace_role_permissions

__all__ = [
    "create_role",
    "delete_role",
    "ensure_role_deletable",
    "list_roles",
    "replace_role_permissions",
    "role_exists",
]
