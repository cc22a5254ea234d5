"""Use case for seeding the default permission catalog."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_api.domain.exceptions import ConflictError
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
)

from .defaults import DEFAULT_PERMISSIONS, DEFAULT_ROLE_GRANTS

logger = logging.getLogger(__name__)


def seed_permissions(session: Session) -> int:
    """Insert the default catalog and role grants; return the catalog size.

    Refused once the catalog holds any permission.
    """

    permission_repository = PermissionRepository(session)
    role_repository = RolePermissionRepository(session)

    if not permission_repository.is_empty():
        raise ConflictError("Permissions already exist; seeding is not needed")

    try:
        permission_repository.add_many(DEFAULT_PERMISSIONS)
        for role, keys in DEFAULT_ROLE_GRANTS.items():
            role_repository.add_for_role(role, keys)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info(
        "Seeded %d permissions and grants for roles %s",
        len(DEFAULT_PERMISSIONS),
        ", ".join(DEFAULT_ROLE_GRANTS),
    )
    return len(DEFAULT_PERMISSIONS)
