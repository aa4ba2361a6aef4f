"""
Belief card repository.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.belief_cards import BeliefCard
from .base import QueryBuilder, SQLModelRepository


class BeliefCardRepository(SQLModelRepository[BeliefCard]):
    """Repository for belief card data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BeliefCard)

    async def list_recent(
        self,
        author_ids: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[BeliefCard]:
        """List belief cards newest first, optionally restricted to some authors."""
        stmt = select(BeliefCard)
        if author_ids is not None:
            stmt = stmt.where(BeliefCard.user_id.in_(list(author_ids)))
        stmt = stmt.order_by(BeliefCard.created_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
