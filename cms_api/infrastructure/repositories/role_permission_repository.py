"""Persistence layer for role permission grants."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_api.infrastructure.models import RolePermissionModel


class RolePermissionRepository:
    """Read and replace the permission keys granted to a role."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_role(self, role: str) -> list[str]:
        rows = (
            self.session.query(RolePermissionModel.permission_key)
            .filter(RolePermissionModel.role == role)
            .order_by(RolePermissionModel.id)
            .all()
        )
        return list(dict.fromkeys(key for (key,) in rows))

    def list_roles(self) -> set[str]:
        """Return every role referenced by at least one grant."""

        rows = self.session.query(RolePermissionModel.role).distinct().all()
        return {role for (role,) in rows}

    def has_role(self, role: str) -> bool:
        return (
            self.session.query(RolePermissionModel.id)
            .filter(RolePermissionModel.role == role)
            .first()
            is not None
        )

    def references_key(self, key: str) -> bool:
        """Return ``True`` while any grant still names ``key``."""

        return (
            self.session.query(RolePermissionModel.id)
            .filter(RolePermissionModel.permission_key == key)
            .first()
            is not None
        )

    def replace_for_role(self, role: str, keys: Iterable[str]) -> None:
        """Discard the grants of ``role`` and insert ``keys`` in one transaction."""

        try:
            self._delete_rows(role)
            self.add_for_role(role, keys)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def add_for_role(self, role: str, keys: Iterable[str]) -> None:
        """Stage grants for ``role`` in the current transaction without committing."""

        self.session.add_all(
            RolePermissionModel(role=role, permission_key=key)
            for key in dict.fromkeys(keys)
        )

    def delete_for_role(self, role: str) -> None:
        try:
            self._delete_rows(role)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _delete_rows(self, role: str) -> None:
        self.session.query(RolePermissionModel).filter(
            RolePermissionModel.role == role
        ).delete(synchronize_session=False)


__all__ = ["RolePermissionRepository"]
