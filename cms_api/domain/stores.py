"""Persistence interfaces consumed by the authorization resolver and role use cases."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .entities import Permission


class PermissionCatalogStore(Protocol):
    def list_all(self) -> Sequence[Permission]:
        """Return every permission in the catalog."""

    def exists(self, key: str) -> bool:
        """Return ``True`` when ``key`` is in the catalog."""

    def delete(self, key: str) -> None:
        """Remove ``key`` and every grant referencing it."""


class RolePermissionStore(Protocol):
    def list_for_role(self, role: str) -> list[str]:
        """Return the permission keys granted to exactly ``role``."""

    def replace_for_role(self, role: str, keys: Iterable[str]) -> None:
        """Atomically replace every grant of ``role`` with ``keys``."""

    def delete_for_role(self, role: str) -> None:
        """Remove every grant of ``role``."""


class UserStore(Protocol):
    def exists_with_role(self, role: str) -> bool:
        """Return ``True`` while any user holds ``role``."""


__all__ = ["PermissionCatalogStore", "RolePermissionStore", "UserStore"]
