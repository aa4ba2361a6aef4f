"""
Follow repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.follows import Follow
from .base import SQLModelRepository


class FollowRepository(SQLModelRepository[Follow]):
    """Repository for follow relationship data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Follow)

    async def get_pair(self, follower_id: str, following_id: str) -> Optional[Follow]:
        """Get the follow row linking two users, if any."""
        stmt = select(Follow).where((Follow.follower_id == follower_id) & (Follow.following_id == following_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def following_ids(self, user_id: str) -> List[str]:
        """Ids of the users ``user_id`` follows, most recent first."""
        stmt = select(Follow.following_id).where(Follow.follower_id == user_id).order_by(Follow.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def follower_ids(self, user_id: str) -> List[str]:
        """Ids of the users following ``user_id``, most recent first."""
        stmt = select(Follow.follower_id).where(Follow.following_id == user_id).order_by(Follow.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_followers(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Follow).where(Follow.following_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_following(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
