"""
Feed I/O models.

Every feed entry is a ``FeedPost`` whatever it wraps. For reposts the
``content`` is the reposted item, ``author`` is the reposter and
``original_author`` is the creator of the item.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from unthink.core.models.domain import ContentKind, FeedPostType

from .common import AuthorSummary, TrendingTopic


class FeedContent(BaseModel):
    """The item shown in a feed card. Fields not relevant to ``kind`` are None."""

    id: str
    kind: ContentKind
    user_id: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime

    # essays and Sparks
    title: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    tldr: Optional[str] = None
    post_type: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list)

    # hot takes
    statement: Optional[str] = None

    # belief cards
    previous_belief: Optional[str] = None
    current_belief: Optional[str] = None
    explanation: Optional[str] = None
    date_changed: Optional[date] = None


class FeedPost(BaseModel):
    id: str = Field(description="Id of the essay, hot take or repost row")
    type: FeedPostType
    content: FeedContent
    author: AuthorSummary
    created_at: datetime
    hearts_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_hearted: bool = False
    repost_comment: Optional[str] = None
    original_author: Optional[AuthorSummary] = None


class FeedResponse(BaseModel):
    posts: List[FeedPost]
    trending_topics: List[TrendingTopic]
