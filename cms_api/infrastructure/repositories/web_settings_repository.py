"""Persistence layer for the singleton web-site settings row."""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy.orm import Session

from cms_api.domain.entities import WebSettings
from cms_api.infrastructure.models import WebSettingsModel

SINGLETON_ID = 1


class WebSettingsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self) -> WebSettings | None:
        model = self.session.query(WebSettingsModel).order_by(WebSettingsModel.id).first()
        return self._to_entity(model) if model else None

    def save(self, settings: WebSettings) -> WebSettings:
        """Update the existing row, or insert it with the fixed singleton id."""

        model = self.session.query(WebSettingsModel).order_by(WebSettingsModel.id).first()
        if model is None:
            model = WebSettingsModel(id=SINGLETON_ID)
        values = asdict(settings)
        for name in WebSettings.editable_fields():
            setattr(model, name, values[name])
        model.updated_at = settings.updated_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: WebSettingsModel) -> WebSettings:
        values = {
            name: getattr(model, name) or "" for name in WebSettings.editable_fields()
        }
        return WebSettings(**values, updated_at=model.updated_at)


__all__ = ["SINGLETON_ID", "WebSettingsRepository"]
