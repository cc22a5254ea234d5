"""Use case for creating a role."""

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_api.config import get_settings
from cms_api.domain.entities import RoleSummary, is_admin_role, parse_role_name
from cms_api.domain.exceptions import ConflictError, ForbiddenOperationError
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
)

from .list_roles import role_exists
from .validators import ensure_known_permissions

logger = logging.getLogger(__name__)


def create_role(
    session: Session,
    *,
    name: str,
    permissions: Iterable[str] = (),
) -> RoleSummary:
    """Make ``name`` observably exist by granting it at least one permission.

    An empty request seeds the configured baseline permission, since a role
    without grants or users is indistinguishable from no role at all.
    """

    role = parse_role_name(name)
    if is_admin_role(role):
        raise ForbiddenOperationError("The admin role is built in")
    if role_exists(session, role):
        raise ConflictError(f'Role "{role}" already exists')

    keys = ensure_known_permissions(PermissionRepository(session), permissions)
    if not keys:
        keys = [get_settings().baseline_permission_key]

    repository = RolePermissionRepository(session)
    try:
        repository.add_for_role(role, keys)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info("Role %s created with permissions %s", role, keys)
    return RoleSummary(name=role, permissions=sorted(keys), user_count=0)
