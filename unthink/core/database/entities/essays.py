"""
Essay entity model.

Essays cover both long-form writing and Sparks: a Spark is an essay row whose
``post_type`` is one of the short formats (text, thread, audio, video, image,
notes). Unpublished essays are drafts and only visible to their author.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Essay(Base, table=True):
    """Long-form post or Spark.

    Table: essays
    """

    __tablename__ = "essays"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="Author user id")

    title: str = Field(max_length=200, description="Essay title")
    content: str = Field(sa_column=Column(Text, nullable=False), description="Essay body")
    excerpt: Optional[str] = Field(default=None, description="Short preview shown in feeds")
    tldr: Optional[str] = Field(default=None, description="One-paragraph summary")
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    image_urls: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    post_type: str = Field(default="essay", description="essay or a Spark subtype")

    published: bool = Field(default=False, index=True, description="False for drafts")
    paid_only: bool = Field(default=False, description="Only visible to paying subscribers")
    email_subscribers: bool = Field(default=False, description="Whether it was sent as a newsletter")

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Essay(id={self.id}, title={self.title}, published={self.published})"
