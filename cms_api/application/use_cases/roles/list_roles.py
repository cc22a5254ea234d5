"""Use cases for observing the roles that currently exist."""

from sqlalchemy.orm import Session

from cms_api.domain.entities import ADMIN_ROLE, RoleSummary, is_admin_role
from cms_api.infrastructure.repositories import (
    RolePermissionRepository,
    UserRepository,
)

from ..permissions import get_authorization_resolver


def role_exists(session: Session, role: str) -> bool:
    """Return ``True`` when any user or grant references ``role``.

    The administrator role always exists.
    """

    if is_admin_role(role):
        return True
    return (
        RolePermissionRepository(session).has_role(role)
        or UserRepository(session).exists_with_role(role)
    )


def list_roles(session: Session) -> list[RoleSummary]:
    """Return every existing role with its effective permissions and user count."""

    user_counts = UserRepository(session).count_by_role()
    names = {ADMIN_ROLE} | set(user_counts) | RolePermissionRepository(session).list_roles()
    resolver = get_authorization_resolver(session)

    summaries = [
        RoleSummary(
            name=name,
            permissions=sorted(resolver.resolve_permissions(name)),
            user_count=user_counts.get(name, 0),
        )
        for name in names
    ]
    # Admin first, the rest alphabetically.
    summaries.sort(key=lambda summary: (not summary.is_admin, summary.name))
    return summaries
