"""Use case for adding a permission to the catalog."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.entities import Permission
from cms_api.domain.exceptions import ConflictError
from cms_api.infrastructure.repositories import PermissionRepository

logger = logging.getLogger(__name__)


def create_permission(
    session: Session,
    *,
    key: str,
    label: str,
    group: str | None = None,
    order: int = 0,
) -> Permission:
    """Create a catalog permission with a unique ``key``.

    No grant is written for the administrator role, which already resolves to
    the whole catalog.
    """

    key = key.strip()
    label = label.strip()
    if not key or not label:
        raise ValueError("Permission key and label are required")

    repository = PermissionRepository(session)
    if repository.exists(key):
        raise ConflictError(f'Permission "{key}" already exists')

    permission = repository.create(
        Permission(id=None, key=key, label=label, group=group or None, order=order)
    )
    logger.info("Permission %s created", permission.key)
    return permission
