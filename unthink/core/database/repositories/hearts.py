"""
Heart repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unthink.core.models.domain import ContentKind

from ..entities.hearts import Heart
from .base import SQLModelRepository


class HeartRepository(SQLModelRepository[Heart]):
    """Repository for heart data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Heart)

    async def get_for_user(self, user_id: str, kind: ContentKind, target_id: str) -> Optional[Heart]:
        """Find the heart a user left on a target, if any.

        Args:
            user_id: User who hearted
            kind: Target kind
            target_id: Target row id

        Returns:
            Heart instance or None
        """
        stmt = select(Heart).where((Heart.user_id == user_id) & (getattr(Heart, kind.column) == target_id))
        result = await self.session.execute(stmt)
        return result.scalars().first()
