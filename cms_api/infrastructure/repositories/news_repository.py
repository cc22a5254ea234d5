"""Persistence layer for news articles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cms_api.domain.entities import News
from cms_api.infrastructure.models import NewsModel


class NewsRepository:
    """Provide CRUD operations for news entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self, *, category: str | None = None, status: str | None = None
    ) -> Sequence[News]:
        query = self.session.query(NewsModel)
        if category:
            query = query.filter(NewsModel.category == category)
        if status:
            query = query.filter(NewsModel.status == status)
        return [self._to_entity(model) for model in query.order_by(NewsModel.order).all()]

    def get(self, news_id: int) -> News | None:
        model = self.session.get(NewsModel, news_id)
        return self._to_entity(model) if model else None

    def get_by_order(self, order: int) -> News | None:
        model = self.session.query(NewsModel).filter_by(order=order).first()
        return self._to_entity(model) if model else None

    def create(self, news: News) -> News:
        model = NewsModel()
        self._apply_entity_to_model(model, news)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, news: News) -> News:
        model = self.session.get(NewsModel, news.id)
        if model is None:
            msg = f"News with id {news.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, news)
        model.updated_at = news.updated_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, news_id: int) -> None:
        model = self.session.get(NewsModel, news_id)
        if model is None:
            msg = f"News with id {news_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: NewsModel) -> News:
        return News(
            id=model.id,
            order=model.order,
            title=model.title,
            content=model.content,
            status=model.status,
            category=model.category,
            created_at=model.created_at,
            updated_at=model.updated_at,
            published_at=model.published_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: NewsModel, news: News) -> None:
        model.order = news.order
        model.title = news.title
        model.content = news.content
        model.status = news.status
        model.category = news.category
        model.published_at = news.published_at


__all__ = ["NewsRepository"]
