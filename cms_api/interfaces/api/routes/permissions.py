"""Routes for the permission catalog and per-role grants."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from cms_api.application.use_cases.permissions import (
    create_permission as create_permission_uc,
    delete_permission as delete_permission_uc,
    get_role_permissions,
    list_permissions as list_permissions_uc,
    resolve_permissions,
    seed_permissions as seed_permissions_uc,
)
from cms_api.application.use_cases.roles import replace_role_permissions
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.dependencies import get_current_user, require_admin
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import (
    MessageResponse,
    PermissionCreate,
    PermissionRead,
    PermissionSeedResponse,
    RolePermissionsRead,
    RolePermissionsUpdate,
)

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.get("", response_model=list[PermissionRead])
def list_permissions(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return [PermissionRead.model_validate(item) for item in list_permissions_uc(db)]


@router.post("", response_model=PermissionRead, status_code=status.HTTP_201_CREATED)
def create_permission(
    payload: PermissionCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        permission = create_permission_uc(
            db,
            key=payload.key,
            label=payload.label,
            group=payload.group,
            order=payload.order,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PermissionRead.model_validate(permission)


@router.post("/seed", response_model=PermissionSeedResponse)
def seed_permissions(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Create the default catalog and role grants on an empty catalog."""

    try:
        count = seed_permissions_uc(db)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PermissionSeedResponse(message="Default permissions seeded", count=count)


@router.get("/my", response_model=list[str])
def read_my_permissions(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return the effective permission keys of the authenticated user."""

    return resolve_permissions(db, current_user.role)


@router.get("/roles/{role}", response_model=list[str])
def read_role_permissions(
    role: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Return the keys stored for ``role``; admin is implicit and has none stored."""

    return get_role_permissions(db, role)


@router.put("/roles/{role}", response_model=RolePermissionsRead)
def update_role_permissions(
    role: str,
    payload: RolePermissionsUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Replace the whole permission set of ``role``."""

    try:
        permissions = replace_role_permissions(db, role=role, permissions=payload.permissions)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return RolePermissionsRead(role=role, permissions=permissions)


@router.delete("/{key}", response_model=MessageResponse)
def delete_permission(
    key: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Delete ``key`` and revoke it from every role."""

    try:
        delete_permission_uc(db, key)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message=f'Permission "{key}" deleted')
