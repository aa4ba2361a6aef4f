"""
Belief card entity model.

A belief card records a change of mind: what the author used to believe,
what they believe now, and optionally why and when it changed.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class BeliefCard(Base, table=True):
    """Before/after record of a belief.

    Table: belief_cards
    """

    __tablename__ = "belief_cards"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="Author user id")

    previous_belief: str = Field(sa_column=Column(Text, nullable=False))
    current_belief: str = Field(sa_column=Column(Text, nullable=False))
    explanation: Optional[str] = Field(default=None, description="What changed the author's mind")
    date_changed: Optional[date] = Field(default=None, description="When the belief changed")
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"BeliefCard(id={self.id}, user_id={self.user_id})"
