"""
Profile I/O models for API requests and responses.

Covers the caller's own profile, the onboarding flow and the public creator
page.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unthink.content.tags import normalize_tags
from unthink.content.text import blank_to_none

from .essays import EssayRead


class ProfileRead(BaseModel):
    """Schema for reading a profile from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    belief_areas: List[str] = Field(default_factory=list)
    profile_completed: bool = False
    onboarding_completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    """Schema for editing the caller's profile. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    display_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    bio: Optional[str] = Field(default=None, max_length=500)
    belief_areas: Optional[List[str]] = None

    @field_validator("belief_areas")
    @classmethod
    def _normalize_areas(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return None if value is None else normalize_tags(value)


class OnboardingComplete(BaseModel):
    """Answers collected by the onboarding steps (name, bio, topics, photo)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    display_name: str = Field(min_length=1, max_length=50, examples=["Ada Lovelace"])
    bio: Optional[str] = Field(default=None, max_length=300)
    belief_areas: List[str] = Field(description="At least one topic", examples=[["Philosophy", "AI"]])
    avatar_url: Optional[str] = None

    @field_validator("bio")
    @classmethod
    def _blank_bio(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)

    @field_validator("belief_areas")
    @classmethod
    def _require_area(cls, value: List[str]) -> List[str]:
        areas = normalize_tags(value)
        if not areas:
            raise ValueError("Select at least one belief area")
        return areas


class OnboardingStatus(BaseModel):
    profile_completed: bool
    next_step: Optional[str] = Field(default=None, description="name, bio, topics or photo; None when done")


class CreatorProfileRead(BaseModel):
    """Public creator page."""

    profile: ProfileRead
    free_posts: List[EssayRead]
    paid_posts: List[EssayRead]
    highlights: List[EssayRead]
    followers_count: int
    following_count: int
    is_following: bool
    is_own_profile: bool
