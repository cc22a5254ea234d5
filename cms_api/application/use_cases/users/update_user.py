"""Use case for updating user information."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from cms_api.domain.entities import User
from cms_api.infrastructure.security import get_password_hash
from cms_api.infrastructure.repositories import UserRepository

from .get_user import get_user
from .validators import ensure_assignable_role

logger = logging.getLogger(__name__)


def update_user(
    session: Session,
    *,
    user_id: int,
    display_name: str | None = None,
    password: str | None = None,
    role: str | None = None,
) -> User:
    """Update the provided user with the new values."""

    current_user = get_user(session, user_id)

    new_role = current_user.role
    if role is not None and role != current_user.role:
        new_role = ensure_assignable_role(session, role)

    updated_user = replace(
        current_user,
        display_name=display_name if display_name is not None else current_user.display_name,
        role=new_role,
    )
    if password:
        updated_user = replace(updated_user, password_hash=get_password_hash(password))

    user = UserRepository(session).update(updated_user)
    if new_role != current_user.role:
        logger.info(
            "User %s moved from role %s to %s", user.username, current_user.role, new_role
        )
    return user
