"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from cms_api.domain.entities import User
from cms_api.domain.exceptions import NotFoundError
from cms_api.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
