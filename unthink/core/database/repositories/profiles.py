"""
Profile repository.

Profiles are looked up by the auth user id far more often than by their own
primary key, so most helpers here are keyed by ``user_id``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.profiles import Profile
from .base import SQLModelRepository


class ProfileRepository(SQLModelRepository[Profile]):
    """Repository for profile data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Profile)

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        """Get the profile of a user.

        Args:
            user_id: Auth user id

        Returns:
            Profile instance or None
        """
        stmt = select(Profile).where(Profile.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_ids(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        """Batch lookup used to attach author information to lists of posts.

        Args:
            user_ids: Auth user ids (duplicates allowed)

        Returns:
            Mapping of user id to profile; users without a profile are absent
        """
        ids = list(set(user_ids))
        if not ids:
            return {}
        stmt = select(Profile).where(Profile.user_id.in_(ids))
        result = await self.session.execute(stmt)
        return {profile.user_id: profile for profile in result.scalars().all()}
