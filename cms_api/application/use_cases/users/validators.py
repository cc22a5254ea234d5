"""Common validation helpers for user use cases."""

from sqlalchemy.orm import Session

from cms_api.domain.entities import RoleName, parse_role_name

from ..roles import role_exists

USERNAME_MAX_LENGTH = 50


def ensure_valid_username(username: str) -> str:
    """Return the stripped ``username`` or raise ``ValueError``."""

    normalized = (username or "").strip()
    if not normalized:
        raise ValueError("Username is required")
    if len(normalized) > USERNAME_MAX_LENGTH:
        raise ValueError(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
    return normalized


def ensure_assignable_role(session: Session, role: str) -> RoleName:
    """Return ``role`` when it is the admin role or an existing role."""

    parsed = parse_role_name(role)
    if not role_exists(session, parsed):
        raise ValueError(f'Role "{parsed}" does not exist')
    return parsed
