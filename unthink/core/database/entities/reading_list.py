"""
Reading list entity model.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class ReadingListEntry(Base, table=True):
    """An essay a user saved for later.

    Table: reading_list
    """

    __tablename__ = "reading_list"
    __table_args__ = (
        UniqueConstraint("user_id", "essay_id", name="uq_reading_list_user_essay"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True)
    essay_id: str = Field(foreign_key="essays.id", index=True)

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"ReadingListEntry(user_id={self.user_id}, essay_id={self.essay_id})"
