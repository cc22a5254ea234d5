"""Use case for deleting a role."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.entities import is_admin_role
from cms_api.domain.exceptions import ForbiddenOperationError
from cms_api.domain.stores import UserStore
from cms_api.infrastructure.repositories import (
    RolePermissionRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


def ensure_role_deletable(users: UserStore, role: str) -> None:
    """Raise ``ForbiddenOperationError`` for the admin role or a role still held by users."""

    if is_admin_role(role):
        raise ForbiddenOperationError("The admin role cannot be deleted")

    if users.exists_with_role(role):
        raise ForbiddenOperationError(
            f'Role "{role}" is still assigned to users; reassign them first'
        )


def delete_role(session: Session, role: str) -> None:
    """Remove every grant of ``role``.

    Deleting a role without grants is a no-op.
    """

    ensure_role_deletable(UserRepository(session), role)
    RolePermissionRepository(session).delete_for_role(role)
    logger.info("Role %s deleted", role)
