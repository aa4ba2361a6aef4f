"""
Podcast and episode entity models.

A podcast is a show owned by one user; episodes belong to a podcast and carry
either an uploaded/generated ``audio_url`` or an ``external_audio_url``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Podcast(Base, table=True):
    """Podcast show.

    Table: podcasts
    """

    __tablename__ = "podcasts"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, description="Owner user id")

    title: str = Field(description="Show title")
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    cover_image_url: Optional[str] = Field(default=None)
    category: str = Field(description="Directory category")
    language: str = Field(default="en", description="ISO 639-1 language code")
    explicit: bool = Field(default=False)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Podcast(id={self.id}, title={self.title})"


class Episode(Base, table=True):
    """Single podcast episode.

    Table: episodes
    """

    __tablename__ = "episodes"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    podcast_id: str = Field(foreign_key="podcasts.id", index=True)
    user_id: str = Field(index=True, description="Owner user id")

    title: str = Field(description="Episode title")
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    content: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True), description="Show notes")
    audio_url: Optional[str] = Field(default=None, description="Uploaded or generated audio")
    external_audio_url: Optional[str] = Field(default=None, description="Audio hosted elsewhere")
    duration: int = Field(default=0, description="Length in seconds")

    episode_number: Optional[int] = Field(default=None)
    season_number: int = Field(default=1)
    published: bool = Field(default=False)
    publish_date: Optional[date] = Field(default=None)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Episode(id={self.id}, podcast_id={self.podcast_id}, title={self.title})"
