"""
Repost entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Repost(Base, table=True):
    """A share of someone's essay, hot take or belief card, with an optional comment.

    Table: reposts
    """

    __tablename__ = "reposts"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="User who reposted")

    essay_id: Optional[str] = Field(default=None, foreign_key="essays.id", index=True)
    hot_take_id: Optional[str] = Field(default=None, foreign_key="hot_takes.id", index=True)
    belief_card_id: Optional[str] = Field(default=None, foreign_key="belief_cards.id", index=True)

    comment_text: Optional[str] = Field(default=None, description="Comment added by the reposter")

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Repost(id={self.id}, user_id={self.user_id})"
