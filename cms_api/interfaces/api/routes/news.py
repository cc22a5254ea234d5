"""Routes for public news listing and editor management."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from cms_api.application.use_cases.news import (
    create_news as create_news_uc,
    delete_news as delete_news_uc,
    get_news as get_news_uc,
    list_news as list_news_uc,
    update_news as update_news_uc,
)
from cms_api.domain.entities import User
from cms_api.infrastructure.database import get_db
from cms_api.interfaces.api.dependencies import require_permission
from cms_api.interfaces.api.routes_helpers import to_http_exception
from cms_api.interfaces.api.schemas import (
    MessageResponse,
    NewsCreate,
    NewsRead,
    NewsUpdate,
)

router = APIRouter(prefix="/news", tags=["news"])

require_news_editor = require_permission("manage_news")


@router.get("", response_model=list[NewsRead])
def list_news(
    category: str | None = Query(None, description="news, activity or announcement"),
    status_filter: str | None = Query(None, alias="status", description="draft or published"),
    db: Session = Depends(get_db),
):
    """Return articles ordered by display order, optionally filtered."""

    items = list_news_uc(db, category=category, status=status_filter)
    return [NewsRead.model_validate(item) for item in items]


@router.get("/{news_id}", response_model=NewsRead)
def read_news(news_id: int, db: Session = Depends(get_db)):
    try:
        news = get_news_uc(db, news_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return NewsRead.model_validate(news)


@router.post("", response_model=NewsRead, status_code=status.HTTP_201_CREATED)
def create_news(
    payload: NewsCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_news_editor),
):
    try:
        news = create_news_uc(db, **payload.model_dump())
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return NewsRead.model_validate(news)


@router.put("/{news_id}", response_model=NewsRead)
def update_news(
    news_id: int,
    payload: NewsUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_news_editor),
):
    try:
        news = update_news_uc(db, news_id=news_id, **payload.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return NewsRead.model_validate(news)


@router.delete("/{news_id}", response_model=MessageResponse)
def delete_news(
    news_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_news_editor),
):
    try:
        delete_news_uc(db, news_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="News deleted")
