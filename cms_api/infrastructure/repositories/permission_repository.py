"""Persistence layer for the permission catalog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_api.domain.entities import Permission
from cms_api.infrastructure.models import PermissionModel, RolePermissionModel


class PermissionRepository:
    """Provide CRUD operations for catalog permissions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> Sequence[Permission]:
        query = self.session.query(PermissionModel).order_by(
            PermissionModel.order, PermissionModel.key
        )
        return [self._to_entity(model) for model in query.all()]

    def list_keys(self) -> set[str]:
        return {key for (key,) in self.session.query(PermissionModel.key).all()}

    def exists(self, key: str) -> bool:
        return (
            self.session.query(PermissionModel.id).filter_by(key=key).first()
            is not None
        )

    def is_empty(self) -> bool:
        return self.session.query(PermissionModel.id).first() is None

    def create(self, permission: Permission) -> Permission:
        model = PermissionModel(
            key=permission.key,
            label=permission.label,
            group=permission.group,
            order=permission.order,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def add_many(self, permissions: Iterable[Permission]) -> None:
        """Stage ``permissions`` in the current transaction without committing."""

        self.session.add_all(
            PermissionModel(
                key=permission.key,
                label=permission.label,
                group=permission.group,
                order=permission.order,
            )
            for permission in permissions
        )

    def delete(self, key: str) -> None:
        """Delete ``key`` after removing every grant that references it."""

        try:
            self.session.query(RolePermissionModel).filter(
                RolePermissionModel.permission_key == key
            ).delete(synchronize_session=False)
            self.session.query(PermissionModel).filter(
                PermissionModel.key == key
            ).delete(synchronize_session=False)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _to_entity(model: PermissionModel) -> Permission:
        return Permission(
            id=model.id,
            key=model.key,
            label=model.label,
            group=model.group,
            order=model.order or 0,
        )


__all__ = ["PermissionRepository"]
