"""Use case for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cms_api.domain.entities import User
from cms_api.infrastructure.repositories import UserRepository


def list_users(session: Session) -> Sequence[User]:
    return UserRepository(session).list()
