"""
Essay I/O models for API requests and responses.

One request model serves both the long-form editor and the Spark composer;
``post_type`` decides which content rule applies.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from unthink.content.tags import normalize_tags
from unthink.content.text import blank_to_none
from unthink.core.models.domain import PostType

from .common import AuthorSummary

ESSAY_MIN_CONTENT_LENGTH = 100


def check_content_length(post_type: PostType, content: str) -> None:
    """Long-form essays need a real body; Sparks only need something."""
    if post_type == PostType.essay and len(content) < ESSAY_MIN_CONTENT_LENGTH:
        raise ValueError(f"Essay content must be at least {ESSAY_MIN_CONTENT_LENGTH} characters")


class EssayCreate(BaseModel):
    """Schema for creating an essay or Spark."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200, examples=["Why I stopped trusting productivity advice"])
    content: str = Field(min_length=1, description="Body text (at least 100 characters for essays)")
    excerpt: Optional[str] = Field(default=None, description="Preview text; derived from content when omitted")
    tldr: Optional[str] = Field(default=None, max_length=300)
    tags: List[str] = Field(default_factory=list, description="Up to 10 topic tags")
    image_urls: List[str] = Field(default_factory=list)
    post_type: PostType = Field(default=PostType.essay)
    published: bool = Field(default=False, description="False saves a draft")
    paid_only: bool = False
    email_subscribers: bool = False

    @field_validator("excerpt", "tldr")
    @classmethod
    def _blank_optional(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)

    @model_validator(mode="after")
    def _check_body(self) -> "EssayCreate":
        check_content_length(self.post_type, self.content)
        return self


class EssayUpdate(BaseModel):
    """Schema for editing an essay. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = None
    tldr: Optional[str] = Field(default=None, max_length=300)
    tags: Optional[List[str]] = None
    image_urls: Optional[List[str]] = None
    post_type: Optional[PostType] = None
    published: Optional[bool] = None
    paid_only: Optional[bool] = None
    email_subscribers: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return None if value is None else normalize_tags(value)


class EssayRead(BaseModel):
    """Schema for reading an essay from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    content: str
    excerpt: Optional[str] = None
    tldr: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    image_urls: List[str] = Field(default_factory=list)
    post_type: str
    published: bool
    paid_only: bool
    email_subscribers: bool
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> str:
        return "published" if self.published else "draft"


class ArticleRead(EssayRead):
    """A single essay page: the essay with its author and engagement."""

    author: AuthorSummary
    hearts_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_hearted: bool = False
