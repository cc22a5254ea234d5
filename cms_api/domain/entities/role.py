"""Role labels shared by users and role permission grants.

Roles are not stored as records of their own. A role exists implicitly while
any user carries it or any grant references it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NewType

ADMIN_ROLE = "admin"
ROLE_NAME_MAX_LENGTH = 50

RoleName = NewType("RoleName", str)

_ROLE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def parse_role_name(value: str) -> RoleName:
    """Return ``value`` as a validated :class:`RoleName` or raise ``ValueError``."""

    normalized = (value or "").strip()
    if not normalized:
        raise ValueError("Role name must not be empty")
    if len(normalized) > ROLE_NAME_MAX_LENGTH:
        raise ValueError(f"Role name must be at most {ROLE_NAME_MAX_LENGTH} characters")
    if not _ROLE_NAME_PATTERN.match(normalized):
        raise ValueError(
            "Role name may only contain letters, digits, underscores and hyphens"
        )
    return RoleName(normalized)


def is_admin_role(role: str) -> bool:
    """Return ``True`` for the distinguished administrator role (case-sensitive)."""

    return role == ADMIN_ROLE


@dataclass
class RoleSummary:
    """A role as observed through users and grants at query time."""

    name: str
    permissions: list[str] = field(default_factory=list)
    user_count: int = 0

    @property
    def is_admin(self) -> bool:
        return is_admin_role(self.name)


__all__ = [
    "ADMIN_ROLE",
    "ROLE_NAME_MAX_LENGTH",
    "RoleName",
    "RoleSummary",
    "is_admin_role",
    "parse_role_name",
]
