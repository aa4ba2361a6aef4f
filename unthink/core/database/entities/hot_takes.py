"""
Hot take entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class HotTake(Base, table=True):
    """Short, provocative statement.

    Table: hot_takes
    """

    __tablename__ = "hot_takes"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="Author user id")

    statement: str = Field(max_length=500, description="The hot take itself")
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"HotTake(id={self.id}, user_id={self.user_id})"
