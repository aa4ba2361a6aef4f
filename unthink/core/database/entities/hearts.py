"""
Heart entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Heart(Base, table=True):
    """A user's heart on an essay, hot take, belief card or comment.

    Exactly one target column is set. A user hearts a target at most once.

    Table: hearts
    """

    __tablename__ = "hearts"
    __table_args__ = (
        UniqueConstraint("user_id", "essay_id", name="uq_hearts_user_essay"),
        UniqueConstraint("user_id", "hot_take_id", name="uq_hearts_user_hot_take"),
        UniqueConstraint("user_id", "belief_card_id", name="uq_hearts_user_belief_card"),
        UniqueConstraint("user_id", "comment_id", name="uq_hearts_user_comment"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True)

    essay_id: Optional[str] = Field(default=None, foreign_key="essays.id", index=True)
    hot_take_id: Optional[str] = Field(default=None, foreign_key="hot_takes.id", index=True)
    belief_card_id: Optional[str] = Field(default=None, foreign_key="belief_cards.id", index=True)
    comment_id: Optional[str] = Field(default=None, foreign_key="comments.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Heart(id={self.id}, user_id={self.user_id})"
