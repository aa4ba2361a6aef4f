"""
Comment I/O models.

``CommentRead`` is the flat shape loaded from storage; ``CommentNode`` is the
same comment with its nested replies, as returned by the thread endpoint.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import AuthorSummary

CommentTarget = Literal["essay", "hot_take", "belief_card"]


class CommentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    target_kind: CommentTarget = Field(description="What is being commented on")
    target_id: str
    content: str = Field(min_length=1, max_length=5000)


class ReplyCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(min_length=1, max_length=5000)


class CommentRead(BaseModel):
    id: str
    user_id: str
    content: str
    essay_id: Optional[str] = None
    hot_take_id: Optional[str] = None
    belief_card_id: Optional[str] = None
    parent_id: Optional[str] = None
    thread_id: Optional[str] = None
    depth: int = 0
    created_at: datetime
    updated_at: datetime
    author: AuthorSummary
    hearts_count: int = 0
    is_hearted: bool = False


class CommentNode(CommentRead):
    replies: List["CommentNode"] = Field(default_factory=list)
