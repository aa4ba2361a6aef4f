"""
Comment Service.

Comments are stored flat. Root comments start their own thread
(``thread_id`` is their id) and replies inherit the thread and target of
their parent, one level deeper up to ``MAX_COMMENT_DEPTH``.
"""

from __future__ import annotations

from typing import List, Optional

from unthink.content.comment_tree import build_comment_tree, reply_depth
from unthink.core.database.entities import Comment
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import NotFoundError, PermissionDeniedError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import ContentKind
from unthink.core.models.io import CommentCreate, CommentNode, CommentRead, ReplyCreate
from unthink.core.monitoring import log_content_created
from unthink.server.core.security import AuthenticatedUser

from .engagement import EngagementService, comment_target

logger = get_logger(__name__)


class CommentService:
    def __init__(self, repos: SqlRepoBundle, engagement: EngagementService) -> None:
        self.repos = repos
        self.engagement = engagement

    async def _read_models(self, comments: List[Comment], viewer_id: Optional[str]) -> List[CommentRead]:
        authors = await self.engagement.authors(comment.user_id for comment in comments)
        summaries = await self.engagement.summaries(
            ContentKind.comment, [comment.id for comment in comments], viewer_id
        )
        return [
            CommentRead(
                **comment.model_dump(),
                author=authors[comment.user_id],
                hearts_count=summaries[comment.id].hearts_count,
                is_hearted=summaries[comment.id].is_hearted,
            )
            for comment in comments
        ]

    async def add_comment(self, user: AuthenticatedUser, payload: CommentCreate) -> CommentRead:
        """Start a new thread on an essay, hot take or belief card."""
        kind = ContentKind(payload.target_kind)
        await self.engagement.get_target(kind, payload.target_id, user.id)

        comment = Comment(user_id=user.id, content=payload.content, depth=0, **{kind.column: payload.target_id})
        comment.thread_id = comment.id
        comment = await self.repos.comments.create(comment)
        log_content_created(ContentKind.comment.value, comment.id, user.id)
        return (await self._read_models([comment], user.id))[0]

    async def add_reply(self, user: AuthenticatedUser, parent_id: str, payload: ReplyCreate) -> CommentRead:
        """Reply to a comment. The reply lands on the parent's item and thread."""
        parent = await self.repos.comments.get_by_id(parent_id)
        if parent is None:
            raise NotFoundError("Comment", parent_id)
        kind = comment_target(parent)
        target_id = getattr(parent, kind.column)
        await self.engagement.get_target(kind, target_id, user.id)

        reply = Comment(
            user_id=user.id,
            content=payload.content,
            parent_id=parent.id,
            thread_id=parent.thread_id or parent.id,
            depth=reply_depth(parent.depth),
            **{kind.column: target_id},
        )
        reply = await self.repos.comments.create(reply)
        log_content_created(ContentKind.comment.value, reply.id, user.id)
        return (await self._read_models([reply], user.id))[0]

    async def list_comments(
        self, kind: ContentKind, target_id: str, viewer: Optional[AuthenticatedUser] = None
    ) -> List[CommentNode]:
        """All comments of an item arranged into threads, oldest first."""
        viewer_id = viewer.id if viewer else None
        await self.engagement.get_target(kind, target_id, viewer_id)
        comments = await self.repos.comments.list_for_target(kind, target_id)
        return build_comment_tree(await self._read_models(comments, viewer_id))

    async def delete_comment(self, user: AuthenticatedUser, comment_id: str) -> None:
        """Delete a comment together with every reply below it."""
        comment = await self.repos.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        if comment.user_id != user.id:
            raise PermissionDeniedError("You can only delete your own comments")

        removed = {comment.id}
        if comment.thread_id:
            thread = await self.repos.comments.list_thread(comment.thread_id)
            # Thread rows are chronological, so a parent is always seen before its replies.
            for row in thread:
                if row.parent_id in removed:
                    removed.add(row.id)
        await self.engagement.purge_comments(list(removed))
        logger.info(f"Comment deleted: id={comment.id} removed={len(removed)}")
