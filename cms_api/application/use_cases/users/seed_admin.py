"""Use case for creating the first administrator."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.entities import ADMIN_ROLE, User
from cms_api.domain.exceptions import ForbiddenOperationError
from cms_api.infrastructure.repositories import UserRepository
from cms_api.infrastructure.security import get_password_hash

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_DISPLAY_NAME = "ผู้ดูแลระบบ"


def seed_admin(session: Session, *, password: str) -> User:
    """Create the ``admin`` account; only allowed while no user exists."""

    repository = UserRepository(session)
    if repository.any_exists():
        raise ForbiddenOperationError("Users already exist; the first admin was seeded")

    user = repository.create(
        User(
            id=None,
            username=ADMIN_USERNAME,
            password_hash=get_password_hash(password),
            display_name=ADMIN_DISPLAY_NAME,
            role=ADMIN_ROLE,
            created_at=None,
        )
    )
    logger.warning("Initial admin account seeded; change its password immediately")
    return user
