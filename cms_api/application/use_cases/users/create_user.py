"""Use case for creating users."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.entities import User
from cms_api.domain.exceptions import ConflictError
from cms_api.infrastructure.repositories import UserRepository
from cms_api.infrastructure.security import get_password_hash

from .validators import ensure_assignable_role, ensure_valid_username

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "viewer"


def create_user(
    session: Session,
    *,
    username: str,
    password: str,
    display_name: str | None = None,
    role: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and an existing role."""

    username = ensure_valid_username(username)
    if not password:
        raise ValueError("Password is required")

    repository = UserRepository(session)
    if repository.get_by_username(username):
        raise ConflictError("Username is already registered")

    user_role = ensure_assignable_role(session, role or DEFAULT_ROLE)

    user = repository.create(
        User(
            id=None,
            username=username,
            password_hash=get_password_hash(password),
            display_name=display_name or username,
            role=user_role,
            created_at=None,
        )
    )
    logger.info("User %s created with role %s", user.username, user.role)
    return user
