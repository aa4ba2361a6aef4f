"""
Hot take I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unthink.content.tags import normalize_tags

from .common import AuthorSummary


class HotTakeCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    statement: str = Field(min_length=10, max_length=500, examples=["Most meetings should be documents."])
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)


class HotTakeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    statement: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class HotTakeDetail(HotTakeRead):
    author: AuthorSummary
    hearts_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_hearted: bool = False
