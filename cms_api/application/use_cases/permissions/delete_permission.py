"""Use case for removing a permission from the catalog."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.exceptions import NotFoundError
from cms_api.infrastructure.repositories import (
    PermissionRepository,
    RolePermissionRepository,
)

logger = logging.getLogger(__name__)


def delete_permission(session: Session, key: str) -> None:
    """Delete ``key`` from the catalog and from every role holding it.

    Grants left behind by a key that is no longer in the catalog are
    removed as well; only a key unknown to both raises ``NotFoundError``.
    """

    repository = PermissionRepository(session)
    if not repository.exists(key) and not RolePermissionRepository(session).references_key(key):
        raise NotFoundError(f'Permission "{key}" not found')
    repository.delete(key)
    logger.info("Permission %s deleted along with its role grants", key)
