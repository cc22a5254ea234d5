"""Endpoints for logging in and bootstrapping the first administrator."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from cms_api.application.use_cases.permissions import resolve_permissions
from cms_api.application.use_cases.users import authenticate_user, seed_admin
from cms_api.config import get_settings
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.infrastructure.security import create_access_token
from cms_api.interfaces.api.dependencies import get_current_user
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import (
    CurrentUserRead,
    LoginRequest,
    LoginResponse,
    SeedAdminResponse,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid username or password"


def _issue_token(user: User) -> str:
    return create_access_token(
        data={
            "sub": str(user.id),
            "role": user.role,
            "display_name": user.visible_name,
        }
    )


def _authenticate_or_401(db: Session, username: str, password: str) -> User:
    user = authenticate_user(db, username, password)
    if user is None:
        logger.info("Failed login attempt for %s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_INVALID_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def _current_user_read(db: Session, user: User) -> CurrentUserRead:
    return CurrentUserRead(
        id=user.id,
        username=user.username,
        display_name=user.visible_name,
        role=user.role,
        created_at=user.created_at,
        permissions=resolve_permissions(db, user.role),
    )


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    """Authenticate with username and password and return a bearer token."""

    user = _authenticate_or_401(db, payload.username, payload.password)
    return LoginResponse(token=_issue_token(user), user=_current_user_read(db, user))


# Form based variant used by the interactive OpenAPI docs.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    user = _authenticate_or_401(db, form_data.username, form_data.password)
    return Token(access_token=_issue_token(user))


@router.get("/me", response_model=CurrentUserRead)
def read_current_user(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CurrentUserRead:
    """Return the authenticated user with their effective permissions."""

    return _current_user_read(db, current_user)


@router.post("/seed", response_model=SeedAdminResponse)
def seed_first_admin(db: Session = Depends(get_db)) -> SeedAdminResponse:
    """Create the first administrator while the users table is empty."""

    try:
        user = seed_admin(db, password=get_settings().seed_admin_password)
    except ValueError as exc:
        raise to_http_exception(exc) from exc

    return SeedAdminResponse(
        message="Admin created; change the password immediately",
        user=UserRead.model_validate(user),
    )
