"""Domain entity representing a catalog permission."""

from dataclasses import dataclass


@dataclass
class Permission:
    """A single grantable capability identified by a stable ``key``."""

    id: int | None
    key: str
    label: str
    group: str | None
    order: int = 0


__all__ = ["Permission"]
