"""
Reading list repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.reading_list import ReadingListEntry
from .base import SQLModelRepository


class ReadingListRepository(SQLModelRepository[ReadingListEntry]):
    """Repository for saved-for-later essays."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ReadingListEntry)

    async def get_entry(self, user_id: str, essay_id: str) -> Optional[ReadingListEntry]:
        stmt = select(ReadingListEntry).where(
            (ReadingListEntry.user_id == user_id) & (ReadingListEntry.essay_id == essay_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> List[ReadingListEntry]:
        """List a user's saved essays, most recently saved first."""
        stmt = (
            select(ReadingListEntry)
            .where(ReadingListEntry.user_id == user_id)
            .order_by(ReadingListEntry.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
