"""
Comment repository.

Comments are always read per target (an essay, hot take or belief card) in
chronological order; the threaded shape is built in memory by
``unthink.content.comment_tree``.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unthink.core.models.domain import ContentKind

from ..entities.comments import Comment
from .base import SQLModelRepository


class CommentRepository(SQLModelRepository[Comment]):
    """Repository for comment data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Comment)

    async def list_for_target(self, kind: ContentKind, target_id: str) -> List[Comment]:
        """List every comment of a target, oldest first.

        Args:
            kind: Target kind (essay, hot_take, belief_card)
            target_id: Target row id

        Returns:
            Flat list of comments including replies
        """
        stmt = (
            select(Comment)
            .where(getattr(Comment, kind.column) == target_id)
            .order_by(Comment.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_thread(self, thread_id: str) -> List[Comment]:
        """List every comment sharing a thread (the root and all its replies)."""
        stmt = select(Comment).where(Comment.thread_id == thread_id).order_by(Comment.created_at.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
