"""Use case for listing the permission catalog."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cms_api.domain.entities import Permission
from cms_api.infrastructure.repositories import PermissionRepository


def list_permissions(session: Session) -> Sequence[Permission]:
    """Return every permission ordered for display."""

    return PermissionRepository(session).list_all()
