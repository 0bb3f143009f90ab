import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    name: str
    title: str
    lead: Optional[str] = None
    published: datetime.date
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None


class PostDetail(PostSummary):
    body: str  # Markdown body without front matter


class TagCount(BaseModel):
    tag: str
    slug: str
    count: int
