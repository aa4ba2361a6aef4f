"""
Engagement I/O models: hearts, reposts, reading list and follows.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unthink.content.text import blank_to_none

from .common import AuthorSummary
from .essays import EssayRead

HeartTarget = Literal["essay", "hot_take", "belief_card", "comment"]
RepostTarget = Literal["essay", "hot_take", "belief_card"]


class HeartToggle(BaseModel):
    target_kind: HeartTarget
    target_id: str


class HeartToggleResult(BaseModel):
    hearted: bool = Field(description="Whether the caller's heart is now present")
    hearts_count: int


class RepostCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    target_kind: RepostTarget
    target_id: str
    comment_text: Optional[str] = Field(default=None, max_length=500)

    @field_validator("comment_text")
    @classmethod
    def _blank_comment(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class RepostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    essay_id: Optional[str] = None
    hot_take_id: Optional[str] = None
    belief_card_id: Optional[str] = None
    comment_text: Optional[str] = None
    created_at: datetime


class ReadingListItem(BaseModel):
    id: str
    saved_at: datetime
    essay: EssayRead
    author: AuthorSummary


class FollowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    follower_id: str
    following_id: str
    created_at: datetime
