"""
Podcast and episode repositories.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.podcasts import Episode, Podcast
from .base import QueryBuilder, SQLModelRepository


class PodcastRepository(SQLModelRepository[Podcast]):
    """Repository for podcast shows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Podcast)

    async def list_for_user(self, user_id: str) -> List[Podcast]:
        """List a user's podcasts, newest first."""
        stmt = select(Podcast).where(Podcast.user_id == user_id).order_by(Podcast.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class EpisodeRepository(SQLModelRepository[Episode]):
    """Repository for podcast episodes."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Episode)

    async def list_for_podcast(self, podcast_id: str) -> List[Episode]:
        """List a podcast's episodes, newest first."""
        stmt = select(Episode).where(Episode.podcast_id == podcast_id).order_by(Episode.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_recent_for_user(self, user_id: str, limit: Optional[int] = 5) -> List[Episode]:
        """List a user's most recent episodes across all their podcasts."""
        stmt = select(Episode).where(Episode.user_id == user_id).order_by(Episode.created_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
