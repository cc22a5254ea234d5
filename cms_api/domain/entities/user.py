"""Domain entity representing an admin console user."""

from dataclasses import dataclass
from datetime import datetime

from .role import is_admin_role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    password_hash: str
    display_name: str | None
    role: str
    created_at: datetime | None

    @property
    def visible_name(self) -> str:
        """Return the display name, falling back to the username."""

        return self.display_name or self.username

    def is_admin(self) -> bool:
        """Return ``True`` when the user holds the administrator role."""

        return is_admin_role(self.role)


__all__ = ["User"]
