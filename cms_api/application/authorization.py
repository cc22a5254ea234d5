"""Resolve roles into effective permission sets and gate actions on them.

The administrator role is never stored. It resolves to whatever the catalog
contains at query time, so a newly created permission is granted to admins
without any migration. Nothing here is cached.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cms_api.domain.entities import is_admin_role
from cms_api.domain.stores import PermissionCatalogStore, RolePermissionStore

logger = logging.getLogger(__name__)


class AuthorizationResolver:
    """Translate a role into permissions and answer any-of authorization checks."""

    def __init__(
        self,
        catalog: PermissionCatalogStore,
        role_permissions: RolePermissionStore,
    ) -> None:
        self.catalog = catalog
        self.role_permissions = role_permissions

    def resolve_permissions(self, role: str) -> set[str]:
        """Return the effective permission keys of ``role``.

        Unknown roles are valid and resolve to an empty set.
        """

        if is_admin_role(role):
            return {permission.key for permission in self.catalog.list_all()}
        return set(self.role_permissions.list_for_role(role))

    def authorize(self, role: str, required_keys: Iterable[str]) -> bool:
        """Return ``True`` when ``role`` holds *any one* of ``required_keys``.

        This is an any-of policy, not all-of. Admins are authorized without
        consulting the grants table.
        """

        required = set(required_keys)
        if not required:
            raise ValueError("At least one permission key is required")

        if is_admin_role(role):
            return True

        allowed = not required.isdisjoint(self.role_permissions.list_for_role(role))
        if not allowed:
            logger.debug("Role %r lacks all of %s", role, sorted(required))
        return allowed


def authorize_any_of(
    resolver: AuthorizationResolver, role: str, *required_keys: str
) -> bool:
    """Named shorthand for the any-of policy used by route guards."""

    return resolver.authorize(role, required_keys)


__all__ = ["AuthorizationResolver", "authorize_any_of"]
