"""
Profile entity model.

A profile holds the public face of an auth user: display name, bio, avatar
and the belief areas they chose during onboarding. There is at most one
profile per user.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Profile(Base, table=True):
    """Public profile of a user.

    Table: profiles
    """

    __tablename__ = "profiles"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(unique=True, index=True, description="Auth user id")

    display_name: Optional[str] = Field(default=None, max_length=50, description="Public display name")
    bio: Optional[str] = Field(default=None, description="Short biography")
    avatar_url: Optional[str] = Field(default=None, description="Public URL of the avatar image")
    belief_areas: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False), description="Topics the user cares about"
    )

    profile_completed: bool = Field(default=False, description="Whether onboarding finished")
    onboarding_completed_at: Optional[datetime] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Profile(user_id={self.user_id}, display_name={self.display_name})"
