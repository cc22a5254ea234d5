"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String, func

from cms_api.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an admin console user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    display_name = Column(String(100), nullable=True)
    # Free-form label shared with ``role_permissions.role``; no foreign key.
    role = Column(String(50), nullable=False, default="viewer", index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
