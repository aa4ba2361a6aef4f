"""
Podcast and episode I/O models.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from unthink.content.durations import format_duration
from unthink.content.tags import normalize_tags
from unthink.content.text import blank_to_none
from unthink.core.models.domain import AudioMethod, PodcastCategory, PodcastLanguage


class PodcastCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200, examples=["Changing Minds"])
    description: Optional[str] = None
    category: PodcastCategory = Field(examples=[PodcastCategory.society_culture])
    language: PodcastLanguage = PodcastLanguage.en
    explicit: bool = False
    tags: List[str] = Field(default_factory=list)
    cover_image_url: Optional[str] = None

    @field_validator("description")
    @classmethod
    def _blank_description(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)


class PodcastUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[PodcastCategory] = None
    language: Optional[PodcastLanguage] = None
    explicit: Optional[bool] = None
    tags: Optional[List[str]] = None
    cover_image_url: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return None if value is None else normalize_tags(value)


class PodcastRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    category: str
    language: str
    explicit: bool
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    episode_count: int = 0


class EpisodeCreate(BaseModel):
    """Schema for adding an episode to a podcast."""

    model_config = ConfigDict(str_strip_whitespace=True)

    podcast_id: str
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    content: Optional[str] = Field(default=None, description="Show notes")
    episode_number: Optional[int] = Field(default=None, ge=1)
    season_number: int = Field(default=1, ge=1)
    published: bool = False
    publish_date: Optional[date] = None
    tags: List[str] = Field(default_factory=list)
    audio_method: AudioMethod = Field(default=AudioMethod.upload, description="upload, generate or url")
    audio_url: Optional[str] = Field(default=None, description="Used with the upload and generate methods")
    external_audio_url: Optional[str] = Field(default=None, description="Used with the url method")
    duration: Optional[Union[int, str]] = Field(default=None, description="Seconds, MM:SS or HH:MM:SS")

    @field_validator("description", "content", "audio_url", "external_audio_url")
    @classmethod
    def _blank_optional(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)


class EpisodeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    podcast_id: str
    user_id: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    audio_url: Optional[str] = None
    external_audio_url: Optional[str] = None
    duration: int = 0
    episode_number: Optional[int] = None
    season_number: int = 1
    published: bool = False
    publish_date: Optional[date] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration)


class RecentEpisodeRead(EpisodeRead):
    podcast_title: Optional[str] = None
