"""Use case for deleting a user."""

import logging

from sqlalchemy.orm import Session

from cms_api.domain.exceptions import ForbiddenOperationError
from cms_api.infrastructure.repositories import UserRepository

from .get_user import get_user

logger = logging.getLogger(__name__)


def delete_user(session: Session, user_id: int, *, acting_user_id: int | None) -> None:
    """Delete the specified user; users may not delete themselves."""

    if acting_user_id is not None and user_id == acting_user_id:
        raise ForbiddenOperationError("You cannot delete your own account")

    user = get_user(session, user_id)
    UserRepository(session).delete(user_id)
    logger.info("User %s deleted", user.username)
