"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from cms_api.domain.entities import User
from cms_api.infrastructure.repositories import UserRepository
from cms_api.infrastructure.security import verify_password


def authenticate_user(session: Session, username: str, password: str) -> User | None:
    """Return the user when ``password`` matches, otherwise ``None``.

    Unknown usernames and wrong passwords are indistinguishable to callers.
    """

    user = UserRepository(session).get_by_username(username)
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
