"""Use cases exposing the authorization resolver over a database session."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from cms_api.application.authorization import AuthorizationResolver
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
)


def get_authorization_resolver(session: Session) -> AuthorizationResolver:
    """Return a resolver backed by the SQLAlchemy repositories."""

    return AuthorizationResolver(
        catalog=PermissionRepository(session),
        role_permissions=RolePermissionRepository(session),
    )


def resolve_permissions(session: Session, role: str) -> list[str]:
    """Return the effective permission keys of ``role`` sorted for display."""

    return sorted(get_authorization_resolver(session).resolve_permissions(role))


def authorize_role(session: Session, role: str, required_keys: Iterable[str]) -> bool:
    """Return ``True`` when ``role`` holds any of ``required_keys``."""

    return get_authorization_resolver(session).authorize(role, required_keys)


def get_role_permissions(session: Session, role: str) -> list[str]:
    """Return the keys stored for ``role``, without the admin expansion."""

    return RolePermissionRepository(session).list_for_role(role)
