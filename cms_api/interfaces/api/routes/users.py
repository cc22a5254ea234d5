"""Routes for administering admin console users."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from cms_api.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.dependencies import require_permission
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import (
    MessageResponse,
    UserCreate,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/auth/users", tags=["users"])

require_user_manager = require_permission("manage_users")


@router.get("", response_model=list[UserRead])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(require_user_manager),
):
    return [UserRead.model_validate(user) for user in list_users_uc(db)]


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_user_manager),
):
    """Create a user; the role defaults to ``viewer``."""

    try:
        user = create_user_uc(
            db,
            username=user_in.username,
            password=user_in.password,
            display_name=user_in.display_name,
            role=user_in.role,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_user_manager),
):
    """Change a user's display name, password or role."""

    try:
        user = update_user_uc(
            db,
            user_id=user_id,
            display_name=user_in.display_name,
            password=user_in.password,
            role=user_in.role,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user_manager),
):
    try:
        delete_user_uc(db, user_id, acting_user_id=current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="User deleted")
