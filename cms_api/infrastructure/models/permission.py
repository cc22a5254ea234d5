"""SQLAlchemy model for the permission catalog."""

from sqlalchemy import Column, Integer, String

from cms_api.infrastructure.database import Base


class PermissionModel(Base):
    """Database representation of a grantable capability."""

    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(100), nullable=False, unique=True)
    label = Column(String(255), nullable=False)
    group = Column(String(100), nullable=True)
    order = Column(Integer, nullable=False, default=0)


__all__ = ["PermissionModel"]
