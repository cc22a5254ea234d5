"""Use cases for managing news articles."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from cms_api.domain.entities import NEWS_CATEGORIES, NEWS_STATUSES, News
from cms_api.domain.exceptions import ConflictError, NotFoundError
from cms_api.infrastructure.repositories import NewsRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _ensure_choice(value: str, choices: Sequence[str], field: str) -> str:
    if value not in choices:
        raise ValueError(f"{field} must be one of: {', '.join(choices)}")
    return value


def _ensure_free_order(
    repository: NewsRepository, order: int, *, news_id: int | None = None
) -> None:
    holder = repository.get_by_order(order)
    if holder is not None and holder.id != news_id:
        raise ConflictError(f"Display order {order} is already used by another article")


def list_news(
    session: Session, *, category: str | None = None, status: str | None = None
) -> Sequence[News]:
    return NewsRepository(session).list(category=category, status=status)


def get_news(session: Session, news_id: int) -> News:
    news = NewsRepository(session).get(news_id)
    if news is None:
        raise NotFoundError("News not found")
    return news


def create_news(
    session: Session,
    *,
    title: str,
    content: str,
    category: str = "news",
    status: str = "draft",
    order: int = 0,
) -> News:
    """Create an article; publishing it stamps ``published_at``."""

    if not title or not content:
        raise ValueError("Title and content are required")
    _ensure_choice(category, NEWS_CATEGORIES, "category")
    _ensure_choice(status, NEWS_STATUSES, "status")

    repository = NewsRepository(session)
    _ensure_free_order(repository, order)

    news = repository.create(
        News(
            id=None,
            order=order,
            title=title,
            content=content,
            status=status,
            category=category,
            created_at=None,
            updated_at=None,
            published_at=_utcnow() if status == "published" else None,
        )
    )
    logger.info("News %s created (%s)", news.id, news.status)
    return news


def update_news(
    session: Session,
    *,
    news_id: int,
    title: str | None = None,
    content: str | None = None,
    category: str | None = None,
    status: str | None = None,
    order: int | None = None,
) -> News:
    """Apply a partial update. ``published_at`` is only set the first time."""

    repository = NewsRepository(session)
    current = get_news(session, news_id)

    changes: dict = {"updated_at": _utcnow()}
    if title:
        changes["title"] = title
    if content:
        changes["content"] = content
    if category:
        changes["category"] = _ensure_choice(category, NEWS_CATEGORIES, "category")
    if status:
        changes["status"] = _ensure_choice(status, NEWS_STATUSES, "status")
        if status == "published" and current.published_at is None:
            changes["published_at"] = changes["updated_at"]
    if order is not None:
        _ensure_free_order(repository, order, news_id=news_id)
        changes["order"] = order

    return repository.update(replace(current, **changes))


def delete_news(session: Session, news_id: int) -> None:
    get_news(session, news_id)
    NewsRepository(session).delete(news_id)
    logger.info("News %s deleted", news_id)


__all__ = ["create_news", "delete_news", "get_news", "list_news", "update_news"]
