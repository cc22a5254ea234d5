"""Routes for the public web-site settings."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cms_api.application.use_cases.web_settings import (
    get_web_settings,
    update_web_settings,
)
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.dependencies import require_permission
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import WebSettingsRead, WebSettingsUpdate

router = APIRouter(prefix="/web-settings", tags=["web-settings"])


@router.get("", response_model=WebSettingsRead)
def read_web_settings(db: Session = Depends(get_db)):
    """Return the stored settings or the built-in defaults."""

    return WebSettingsRead.model_validate(get_web_settings(db))


@router.put("", response_model=WebSettingsRead)
def save_web_settings(
    payload: WebSettingsUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_permission("manage_web_settings")),
):
    try:
        settings = update_web_settings(db, payload.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return WebSettingsRead.model_validate(settings)
