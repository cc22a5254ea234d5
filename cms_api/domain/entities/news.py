"""Domain entity representing a news article."""

from dataclasses import dataclass
from datetime import datetime

NEWS_CATEGORIES = ("news", "activity", "announcement")
NEWS_STATUSES = ("draft", "published")


@dataclass
class News:
    id: int | None
    order: int
    title: str
    content: str
    status: str
    category: str
    created_at: datetime | None
    updated_at: datetime | None
    published_at: datetime | None


__all__ = ["NEWS_CATEGORIES", "NEWS_STATUSES", "News"]
