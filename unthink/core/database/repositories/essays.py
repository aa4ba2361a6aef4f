"""
Essay repository.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.essays import Essay
from .base import QueryBuilder, SQLModelRepository


class EssayRepository(SQLModelRepository[Essay]):
    """Repository for essay and Spark data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Essay)

    async def list_published(
        self,
        author_ids: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Essay]:
        """List published essays, newest first.

        Args:
            author_ids: Restrict to these authors (None means everyone)
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Essay instances
        """
        stmt = select(Essay).where(Essay.published == True)  # noqa: E712
        if author_ids is not None:
            stmt = stmt.where(Essay.user_id.in_(list(author_ids)))
        stmt = stmt.order_by(Essay.created_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_drafts(self, user_id: str) -> List[Essay]:
        """List a user's unpublished essays, most recently edited first."""
        stmt = (
            select(Essay)
            .where((Essay.user_id == user_id) & (Essay.published == False))  # noqa: E712
            .order_by(Essay.updated_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
