"""Helpers for inserting test records directly through the repositories."""

from __future__ import annotations

from cms_api.domain.entities import Permission, User
from cms_api.infrastructure.models import PharmacistModel
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
    UserRepository,
)
from cms_api.infrastructure.security import create_access_token, get_password_hash

DEFAULT_PASSWORD = "Secret123"
# Hash once; pbkdf2 with production rounds is slow.
_DEFAULT_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)


def make_user(session, username: str, role: str, *, display_name: str | None = None) -> User:
    """Insert a user directly, bypassing role validation."""

    return UserRepository(session).create(
        User(
            id=None,
            username=username,
            password_hash=_DEFAULT_PASSWORD_HASH,
            display_name=display_name,
            role=role,
            created_at=None,
        )
    )


def make_permissions(session, *keys: str) -> None:
    repository = PermissionRepository(session)
    for index, key in enumerate(keys):
        repository.create(
            Permission(id=None, key=key, label=key.replace("_", " "), group=None, order=index)
        )


def grant(session, role: str, *keys: str) -> None:
    RolePermissionRepository(session).replace_for_role(role, keys)


def make_pharmacist(session, **values) -> int:
    model = PharmacistModel(**values)
    session.add(model)
    session.commit()
    return model.id


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}
