"""Common validation helpers for role use cases."""

from collections.abc import Iterable

from cms_api.infrastructure.repositories import PermissionRepository


def ensure_known_permissions(
    repository: PermissionRepository,
    keys: Iterable[str],
) -> list[str]:
    """Return ``keys`` deduplicated in order or raise ``ValueError`` for unknown keys."""

    requested = list(dict.fromkeys(key.strip() for key in keys if key and key.strip()))
    unknown = sorted(set(requested) - repository.list_keys())
    if unknown:
        raise ValueError(f"Unknown permission keys: {', '.join(unknown)}")
    return requested
