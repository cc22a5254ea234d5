"""SQLAlchemy model for role to permission grants."""

from sqlalchemy import Column, Integer, String

from cms_api.infrastructure.database import Base


class RolePermissionModel(Base):
    """A row exists iff ``role`` is granted ``permission_key``.

    ``permission_key`` intentionally carries no foreign key to the catalog.
    """

    __tablename__ = "role_permissions"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(50), nullable=False, index=True)
    permission_key = Column(String(100), nullable=False, index=True)


__all__ = ["RolePermissionModel"]
