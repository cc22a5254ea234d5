"""SQLAlchemy model for news articles."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from cms_api.infrastructure.database import Base


class NewsModel(Base):
    """Database representation of a news article."""

    __tablename__ = "news"

    id = Column(Integer, primary_key=True, index=True)
    order = Column(Integer, nullable=False, default=0, unique=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="draft")
    category = Column(String(20), nullable=False, default="news")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
    published_at = Column(DateTime, nullable=True)


__all__ = ["NewsModel"]
