"""Use case for replacing the permission set of a role."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from cms_api.domain.entities import is_admin_role, parse_role_name
from cms_api.domain.exceptions import ForbiddenOperationError
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
)

from .list_roles import role_exists
from .validators import ensure_known_permissions

logger = logging.getLogger(__name__)


def replace_role_permissions(
    session: Session,
    *,
    role: str,
    permissions: Iterable[str],
) -> list[str]:
    """Replace every grant of ``role`` with ``permissions``.

    This is a full set replacement; callers must send the complete desired
    set. A role that does not exist yet must carry a valid role name.
    Returns the keys stored afterwards.
    """

    if not role_exists(session, role):
        role = parse_role_name(role)
    if is_admin_role(role):
        raise ForbiddenOperationError(
            "The admin role always holds every permission and cannot be edited"
        )

    keys = ensure_known_permissions(PermissionRepository(session), permissions)
    repository = RolePermissionRepository(session)
    repository.replace_for_role(role, keys)
    logger.info("Permissions of role %s replaced with %s", role, keys)
    return repository.list_for_role(role)
