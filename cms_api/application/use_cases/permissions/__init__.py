"""Use cases for the permission catalog and effective permissions."""

from .create_permission import create_permission
from .defaults import DEFAULT_PERMISSIONS, DEFAULT_ROLE_GRANTS
from .delete_permission import delete_permission
from .list_permissions import list_permissions
from .resolve_permissions import (
    authorize_role,
    get_authorization_resolver,
    get_role_permissions,
    resolve_permissions,
)
from .seed_permissions import seed_permissions

__all__ = [
    "DEFAULT_PERMISSIONS",
    "DEFAULT_ROLE_GRANTS",
    "authorize_role",
    "create_permission",
    "delete_permission",
    "get_authorization_resolver",
    "get_role_permissions",
    "list_permissions",
    "resolve_permissions",
    "seed_permissions",
]
