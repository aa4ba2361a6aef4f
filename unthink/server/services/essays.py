"""
Essay Service.

Creation, editing and reading of essays and Sparks. Drafts are private to
their author; everyone else gets a 404 for them.
"""

from __future__ import annotations

from typing import List, Optional

from unthink.content.text import blank_to_none, make_excerpt
from unthink.core.database.entities import Essay
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import ContentValidationError, NotFoundError, PermissionDeniedError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import ContentKind, PostType
from unthink.core.models.io import ArticleRead, EssayCreate, EssayRead, EssayUpdate
from unthink.core.models.io.essays import check_content_length
from unthink.core.monitoring import log_content_created
from unthink.server.core.security import AuthenticatedUser

from .engagement import EngagementService

logger = get_logger(__name__)


class EssayService:
    def __init__(self, repos: SqlRepoBundle, engagement: EngagementService) -> None:
        self.repos = repos
        self.engagement = engagement

    async def create(self, user: AuthenticatedUser, payload: EssayCreate) -> Essay:
        """Publish an essay or save it as a draft."""
        essay = Essay(
            user_id=user.id,
            title=payload.title,
            content=payload.content,
            excerpt=payload.excerpt or make_excerpt(payload.content),
            tldr=payload.tldr,
            tags=payload.tags,
            image_urls=payload.image_urls,
            post_type=payload.post_type.value,
            published=payload.published,
            paid_only=payload.paid_only,
            email_subscribers=payload.email_subscribers,
        )
        essay = await self.repos.essays.create(essay)
        log_content_created(ContentKind.essay.value, essay.id, user.id)
        return essay

    async def get_owned(self, user: AuthenticatedUser, essay_id: str) -> Essay:
        """Load an essay the caller may modify.

        Raises:
            NotFoundError: if the essay does not exist or is someone else's draft
            PermissionDeniedError: if the essay belongs to another user
        """
        essay = await self.engagement.get_target(ContentKind.essay, essay_id, user.id)
        if essay.user_id != user.id:
            raise PermissionDeniedError("You can only modify your own essays")
        return essay

    async def get_article(self, essay_id: str, viewer: Optional[AuthenticatedUser] = None) -> ArticleRead:
        """A single essay page with its author and engagement counters."""
        viewer_id = viewer.id if viewer else None
        essay = await self.engagement.get_target(ContentKind.essay, essay_id, viewer_id)
        authors = await self.engagement.authors([essay.user_id])
        summary = (await self.engagement.summaries(ContentKind.essay, [essay.id], viewer_id))[essay.id]
        return ArticleRead(
            **EssayRead.model_validate(essay).model_dump(exclude={"status"}),
            author=authors[essay.user_id],
            **summary.model_dump(),
        )

    async def list_published(
        self,
        author_id: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Essay]:
        """Published essays, newest first.

        The tag filter runs on the loaded page because tags are stored as JSON.
        """
        author_ids = [author_id] if author_id else None
        essays = await self.repos.essays.list_published(author_ids=author_ids, limit=limit, offset=offset)
        if tag:
            essays = [essay for essay in essays if tag in essay.tags]
        return essays

    async def list_drafts(self, user: AuthenticatedUser) -> List[Essay]:
        return await self.repos.essays.list_drafts(user.id)

    async def update(self, user: AuthenticatedUser, essay_id: str, payload: EssayUpdate) -> Essay:
        """Apply a partial update, re-checking the body rule against the resulting post type."""
        essay = await self.get_owned(user, essay_id)
        changes = payload.model_dump(exclude_unset=True)

        if "post_type" in changes:
            if changes["post_type"] is None:
                raise ContentValidationError("post_type cannot be null")
            changes["post_type"] = PostType(changes["post_type"]).value
        for field in ("title", "content", "published", "paid_only", "email_subscribers"):
            if field in changes and changes[field] is None:
                raise ContentValidationError(f"{field} cannot be null")

        content = changes.get("content", essay.content)
        post_type = PostType(changes.get("post_type", essay.post_type))
        if "content" in changes or "post_type" in changes:
            try:
                check_content_length(post_type, content)
            except ValueError as e:
                raise ContentValidationError(str(e)) from e

        if "tldr" in changes:
            changes["tldr"] = blank_to_none(changes["tldr"])
        if "excerpt" in changes:
            changes["excerpt"] = blank_to_none(changes["excerpt"]) or make_excerpt(content)
        elif "content" in changes:
            changes["excerpt"] = make_excerpt(content)
        for field in ("tags", "image_urls"):
            if field in changes and changes[field] is None:
                changes[field] = []

        for field, value in changes.items():
            setattr(essay, field, value)
        essay = await self.repos.essays.update(essay)
        logger.debug(f"Essay updated: id={essay.id} fields={sorted(changes)}")
        return essay

    async def delete(self, user: AuthenticatedUser, essay_id: str) -> None:
        essay = await self.get_owned(user, essay_id)
        await self.engagement.purge_targets(ContentKind.essay, [essay.id])
        await self.repos.essays.delete(essay.id)
        logger.info(f"Essay deleted: id={essay.id} user={user.id}")
