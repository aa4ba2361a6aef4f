"""
Follow entity model.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Follow(Base, table=True):
    """``follower_id`` follows ``following_id``.

    Table: follows
    """

    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follows_pair"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    follower_id: str = Field(index=True)
    following_id: str = Field(index=True)

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Follow(follower_id={self.follower_id}, following_id={self.following_id})"
