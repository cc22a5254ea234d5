"""FastAPI dependency utilities."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from cms_api.application.authorization import authorize_any_of
from cms_api.application.use_cases.permissions import get_authorization_resolver
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.infrastructure.repositories import UserRepository
from cms_api.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

FORBIDDEN_DETAIL = "Forbidden: you do not have permission to perform this action"


def _unauthorized(detail: str = "Unauthorized: invalid or expired token") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token.

    The role stored in the database wins over the one embedded in the token.
    """

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthorized() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized("Unauthorized: user not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user holds the administrator role."""

    if not current_user.is_admin():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL)
    return current_user


def require_permission(*permission_keys: str) -> Callable[..., User]:
    """Build a dependency admitting users whose role holds *any* of ``permission_keys``."""

    if not permission_keys:
        raise ValueError("require_permission needs at least one permission key")

    def dependency(
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> User:
        resolver = get_authorization_resolver(db)
        if not authorize_any_of(resolver, current_user.role, *permission_keys):
            # Same detail for every denial; the required keys are not disclosed.
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL
            )
        return current_user

    return dependency
