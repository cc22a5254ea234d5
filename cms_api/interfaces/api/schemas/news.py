"""News schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

NewsCategory = Literal["news", "activity", "announcement"]
NewsStatus = Literal["draft", "published"]


class NewsRead(BaseModel):
    id: int
    order: int
    title: str
    content: str
    status: str
    category: str
    created_at: datetime | None
    updated_at: datetime | None
    published_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NewsCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    category: NewsCategory = "news"
    status: NewsStatus = "draft"
    order: int = 0


class NewsUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
    category: NewsCategory | None = None
    status: NewsStatus | None = None
    order: int | None = None

    model_config = ConfigDict(extra="forbid")
