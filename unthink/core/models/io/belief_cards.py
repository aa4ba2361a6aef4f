"""
Belief card I/O models.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unthink.content.tags import normalize_tags
from unthink.content.text import blank_to_none

from .common import AuthorSummary


class BeliefCardCreate(BaseModel):
    """Schema for recording a change of mind."""

    model_config = ConfigDict(str_strip_whitespace=True)

    previous_belief: str = Field(min_length=10, examples=["Remote work kills collaboration."])
    current_belief: str = Field(min_length=10, examples=["Remote work changes how collaboration happens."])
    explanation: Optional[str] = Field(default=None, max_length=500)
    date_changed: Optional[date] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("explanation")
    @classmethod
    def _blank_explanation(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)


class BeliefCardRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    previous_belief: str
    current_belief: str
    explanation: Optional[str] = None
    date_changed: Optional[date] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class BeliefCardDetail(BeliefCardRead):
    author: AuthorSummary
    hearts_count: int = 0
    comments_count: int = 0
    reposts_count: int = 0
    is_hearted: bool = False
