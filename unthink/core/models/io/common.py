"""
Shared I/O models used across several endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

ANONYMOUS = "Anonymous"


class AuthorSummary(BaseModel):
    """Author information attached to posts and comments."""

    id: str = Field(description="Auth user id of the author")
    display_name: str = Field(default=ANONYMOUS, description="Public name, 'Anonymous' when unset")
    avatar_url: Optional[str] = Field(default=None)


class EngagementSummary(BaseModel):
    """Per-item counters and the viewer's own heart."""

    hearts_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_hearted: bool = False


class TrendingTopic(BaseModel):
    tag: str
    count: int


class TagSuggestions(BaseModel):
    query: str
    suggestions: List[str]
