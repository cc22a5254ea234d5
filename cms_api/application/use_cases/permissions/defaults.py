"""Default permission catalog and role grants used when seeding."""

from __future__ import annotations

from typing import Final

from cms_api.domain.entities import Permission

WEBSITE_GROUP: Final[str] = "เว็บไซต์"
SYSTEM_GROUP: Final[str] = "ระบบ"

_CATALOG: Final[tuple[tuple[str, str, str], ...]] = (
    ("manage_home", "จัดการหน้าแรก", WEBSITE_GROUP),
    ("manage_news", "จัดการข่าวสาร", WEBSITE_GROUP),
    ("manage_council", "จัดการกรรมการสภา", WEBSITE_GROUP),
    ("manage_history", "จัดการทำเนียบ", WEBSITE_GROUP),
    ("manage_agency", "จัดการหน่วยงาน", WEBSITE_GROUP),
    ("manage_law", "จัดการกฎหมาย", WEBSITE_GROUP),
    ("manage_web_settings", "ตั้งค่าเว็บไซต์", WEBSITE_GROUP),
    ("manage_register", "จัดการทะเบียน", SYSTEM_GROUP),
    ("view_dashboard", "ดู Dashboard", SYSTEM_GROUP),
    ("manage_users", "จัดการผู้ใช้", SYSTEM_GROUP),
    ("manage_roles", "จัดการสิทธิ์", SYSTEM_GROUP),
)

DEFAULT_PERMISSIONS: Final[tuple[Permission, ...]] = tuple(
    Permission(id=None, key=key, label=label, group=group, order=index)
    for index, (key, label, group) in enumerate(_CATALOG)
)

_WEBSITE_EDITING: Final[tuple[str, ...]] = (
    "manage_home",
    "manage_news",
    "manage_council",
    "manage_history",
    "manage_agency",
    "manage_law",
    "manage_web_settings",
    "view_dashboard",
)

# Admin is absent on purpose: it resolves to the whole catalog.
DEFAULT_ROLE_GRANTS: Final[dict[str, tuple[str, ...]]] = {
    "editor": _WEBSITE_EDITING,
    "web_editor": _WEBSITE_EDITING,
    "viewer": ("view_dashboard",),
}

__all__ = ["DEFAULT_PERMISSIONS", "DEFAULT_ROLE_GRANTS", "SYSTEM_GROUP", "WEBSITE_GROUP"]
