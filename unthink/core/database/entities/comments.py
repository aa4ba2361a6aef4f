"""
Comment entity model.

Comments attach to exactly one of an essay, a hot take or a belief card.
Replies point at their parent and share the ``thread_id`` of the root
comment. ``depth`` is 0 for roots and is capped at 3 for replies.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Comment(Base, table=True):
    """Threaded comment.

    Table: comments
    """

    __tablename__ = "comments"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="Author user id")
    content: str = Field(sa_column=Column(Text, nullable=False))

    # Target (exactly one is set)
    essay_id: Optional[str] = Field(default=None, foreign_key="essays.id", index=True)
    hot_take_id: Optional[str] = Field(default=None, foreign_key="hot_takes.id", index=True)
    belief_card_id: Optional[str] = Field(default=None, foreign_key="belief_cards.id", index=True)

    # Threading
    parent_id: Optional[str] = Field(default=None, index=True)
    thread_id: Optional[str] = Field(default=None, index=True)
    depth: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Comment(id={self.id}, parent_id={self.parent_id}, depth={self.depth})"
