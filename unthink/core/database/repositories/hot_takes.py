"""
Hot take repository.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.hot_takes import HotTake
from .base import QueryBuilder, SQLModelRepository


class HotTakeRepository(SQLModelRepository[HotTake]):
    """Repository for hot take data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HotTake)

    async def list_recent(
        self,
        author_ids: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[HotTake]:
        """List hot takes newest first, optionally restricted to some authors."""
        stmt = select(HotTake)
        if author_ids is not None:
            stmt = stmt.where(HotTake.user_id.in_(list(author_ids)))
        stmt = stmt.order_by(HotTake.created_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
