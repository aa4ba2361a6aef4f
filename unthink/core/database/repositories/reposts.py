"""
Repost repository.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.reposts import Repost
from .base import QueryBuilder, SQLModelRepository


class RepostRepository(SQLModelRepository[Repost]):
    """Repository for repost data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Repost)

    async def list_by_users(self, user_ids: Sequence[str], limit: Optional[int] = None) -> List[Repost]:
        """List reposts made by any of the given users, newest first."""
        if not user_ids:
            return []
        stmt = select(Repost).where(Repost.user_id.in_(list(user_ids))).order_by(Repost.created_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
