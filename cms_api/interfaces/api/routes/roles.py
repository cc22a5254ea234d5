"""Routes for listing, creating and deleting roles."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from cms_api.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    list_roles as list_roles_uc,
)
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.dependencies import require_permission
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import MessageResponse, RoleCreate, RoleRead

router = APIRouter(prefix="/roles", tags=["roles"])

require_role_manager = require_permission("manage_roles")


@router.get("", response_model=list[RoleRead])
def list_roles(
    db: Session = Depends(get_db),
    _: User = Depends(require_role_manager),
):
    return [RoleRead.model_validate(role) for role in list_roles_uc(db)]


@router.post("", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
def create_role(
    payload: RoleCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_role_manager),
):
    """Create a role; an empty permission list grants the baseline permission."""

    try:
        role = create_role_uc(db, name=payload.name, permissions=payload.permissions)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return RoleRead.model_validate(role)


@router.delete("/{role}", response_model=MessageResponse)
def delete_role(
    role: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_role_manager),
):
    try:
        delete_role_uc(db, role)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message=f'Role "{role}" deleted')
