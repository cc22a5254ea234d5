"""Use cases for the public web-site settings."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from cms_api.domain.entities import WebSettings
from cms_api.infrastructure.repositories import WebSettingsRepository

logger = logging.getLogger(__name__)


def get_web_settings(session: Session) -> WebSettings:
    """Return the stored settings, or the defaults when none were saved yet."""

    return WebSettingsRepository(session).get() or WebSettings()


def update_web_settings(session: Session, changes: Mapping[str, str | None]) -> WebSettings:
    """Merge ``changes`` into the singleton settings record."""

    editable = set(WebSettings.editable_fields())
    unknown = sorted(set(changes) - editable)
    if unknown:
        raise ValueError(f"Unknown settings fields: {', '.join(unknown)}")

    values = {name: value or "" for name, value in changes.items()}
    current = get_web_settings(session)
    updated = replace(
        current,
        **values,
        updated_at=datetime.now(timezone.utc).replace(tzinfo=None),
    )
    saved = WebSettingsRepository(session).save(updated)
    logger.info("Web settings updated: %s", ", ".join(sorted(values)) or "no fields")
    return saved


__all__ = ["get_web_settings", "update_web_settings"]
