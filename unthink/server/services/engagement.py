"""
Engagement Service.

Hearts, reposts, the reading list and follows, plus the batched helpers every
listing endpoint uses to attach authors and counters to rows.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from unthink.core.database.entities import Comment, Follow, Heart, ReadingListEntry, Repost
from unthink.core.database.entities.profiles import Profile
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import ConflictError, ContentValidationError, NotFoundError, PermissionDeniedError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import COMMENTABLE_KINDS, ContentKind
from unthink.core.models.io import (
    AuthorSummary,
    EngagementSummary,
    EssayRead,
    HeartToggleResult,
    ReadingListItem,
    RepostCreate,
)
from unthink.core.models.io.common import ANONYMOUS
from unthink.server.core.security import AuthenticatedUser

logger = get_logger(__name__)

_TARGET_LABELS = {
    ContentKind.essay: "Essay",
    ContentKind.hot_take: "Hot take",
    ContentKind.belief_card: "Belief card",
    ContentKind.comment: "Comment",
}


def author_summary(user_id: str, profile: Optional[Profile]) -> AuthorSummary:
    """Public author info, falling back to 'Anonymous' for users without a name."""
    if profile is None:
        return AuthorSummary(id=user_id)
    return AuthorSummary(
        id=user_id,
        display_name=profile.display_name or ANONYMOUS,
        avatar_url=profile.avatar_url,
    )


def comment_target(comment: Comment) -> ContentKind:
    """The kind of item a stored comment belongs to."""
    for kind in COMMENTABLE_KINDS:
        if getattr(comment, kind.column):
            return kind
    raise ContentValidationError(f"Comment {comment.id} has no target")


class EngagementService:
    """Engagement operations on top of the repository bundle."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    def target_repo(self, kind: ContentKind):
        return {
            ContentKind.essay: self.repos.essays,
            ContentKind.hot_take: self.repos.hot_takes,
            ContentKind.belief_card: self.repos.belief_cards,
            ContentKind.comment: self.repos.comments,
        }[kind]

    # ------------------------------------------------------------------
    # Shared lookups
    # ------------------------------------------------------------------

    async def get_target(self, kind: ContentKind, target_id: str, viewer_id: Optional[str] = None):
        """Load an engagement target, hiding other people's drafts.

        A comment is only reachable while the item it was left on is.

        Raises:
            NotFoundError: if the row is missing, is an unpublished essay of another user,
                or is a comment on such an essay
        """
        entity = await self.target_repo(kind).get_by_id(target_id)
        if entity is None:
            raise NotFoundError(_TARGET_LABELS[kind], target_id)
        if kind == ContentKind.essay and not entity.published and entity.user_id != viewer_id:
            raise NotFoundError(_TARGET_LABELS[kind], target_id)
        if kind == ContentKind.comment:
            parent_kind = comment_target(entity)
            try:
                await self.get_target(parent_kind, getattr(entity, parent_kind.column), viewer_id)
            except NotFoundError:
                raise NotFoundError(_TARGET_LABELS[kind], target_id) from None
        return entity

    async def authors(self, user_ids: Iterable[str]) -> Dict[str, AuthorSummary]:
        """Author summaries for a batch of users, fetched with one query."""
        ids = set(user_ids)
        profiles = await self.repos.profiles.get_by_user_ids(ids)
        return {user_id: author_summary(user_id, profiles.get(user_id)) for user_id in ids}

    async def summaries(
        self, kind: ContentKind, target_ids: Sequence[str], viewer_id: Optional[str] = None
    ) -> Dict[str, EngagementSummary]:
        """Counters for a batch of targets using one grouped query per table.

        Comments only collect hearts; their comment and repost counts stay 0.
        """
        ids = list(dict.fromkeys(target_ids))
        if not ids:
            return {}
        column = kind.column

        hearts = await self.repos.hearts.count_grouped(column, ids)
        comments: Dict[str, int] = {}
        reposts: Dict[str, int] = {}
        if kind in COMMENTABLE_KINDS:
            comments = await self.repos.comments.count_grouped(column, ids)
            reposts = await self.repos.reposts.count_grouped(column, ids)

        hearted = set()
        if viewer_id:
            hearted = await self.repos.hearts.values_where(column, user_id=viewer_id, **{column: ids})

        return {
            target_id: EngagementSummary(
                hearts_count=hearts.get(target_id, 0),
                comments_count=comments.get(target_id, 0),
                reposts_count=reposts.get(target_id, 0),
                is_hearted=target_id in hearted,
            )
            for target_id in ids
        }

    async def purge_targets(self, kind: ContentKind, target_ids: Sequence[str]) -> None:
        """Remove hearts, comments, reposts and reading list entries pointing at targets."""
        if not target_ids:
            return
        column = kind.column
        if kind in COMMENTABLE_KINDS:
            comment_ids = await self.repos.comments.values_where("id", **{column: list(target_ids)})
            await self.purge_comments(list(comment_ids))
            await self.repos.reposts.delete_where(column, target_ids)
        if kind == ContentKind.essay:
            await self.repos.reading_list.delete_where("essay_id", target_ids)
        await self.repos.hearts.delete_where(column, target_ids)

    async def purge_comments(self, comment_ids: Sequence[str]) -> None:
        await self.repos.hearts.delete_where(ContentKind.comment.column, comment_ids)
        await self.repos.comments.delete_where("id", comment_ids)

    # ------------------------------------------------------------------
    # Hearts
    # ------------------------------------------------------------------

    async def toggle_heart(self, user: AuthenticatedUser, kind: ContentKind, target_id: str) -> HeartToggleResult:
        """Add the caller's heart to a target, or remove it if already there."""
        await self.get_target(kind, target_id, user.id)

        existing = await self.repos.hearts.get_for_user(user.id, kind, target_id)
        if existing:
            await self.repos.hearts.delete(existing.id)
            hearted = False
        else:
            try:
                await self.repos.hearts.create(Heart(user_id=user.id, **{kind.column: target_id}))
            except IntegrityError:
                # A concurrent toggle inserted the same heart first
                logger.debug(f"Heart already present: user={user.id} {kind.value}={target_id}")
            hearted = True

        counts = await self.repos.hearts.count_grouped(kind.column, [target_id])
        logger.debug(f"Heart toggled: user={user.id} {kind.value}={target_id} hearted={hearted}")
        return HeartToggleResult(hearted=hearted, hearts_count=counts.get(target_id, 0))

    # ------------------------------------------------------------------
    # Reposts
    # ------------------------------------------------------------------

    async def repost(self, user: AuthenticatedUser, payload: RepostCreate) -> Repost:
        kind = ContentKind(payload.target_kind)
        await self.get_target(kind, payload.target_id, user.id)
        repost = Repost(user_id=user.id, comment_text=payload.comment_text, **{kind.column: payload.target_id})
        return await self.repos.reposts.create(repost)

    async def delete_repost(self, user: AuthenticatedUser, repost_id: str) -> None:
        repost = await self.repos.reposts.get_by_id(repost_id)
        if repost is None:
            raise NotFoundError("Repost", repost_id)
        if repost.user_id != user.id:
            raise PermissionDeniedError("You can only delete your own reposts")
        await self.repos.reposts.delete(repost_id)

    # ------------------------------------------------------------------
    # Reading list
    # ------------------------------------------------------------------

    async def save_to_reading_list(self, user: AuthenticatedUser, essay_id: str) -> ReadingListEntry:
        await self.get_target(ContentKind.essay, essay_id, user.id)
        if await self.repos.reading_list.get_entry(user.id, essay_id):
            raise ConflictError("Essay is already in your reading list")
        try:
            return await self.repos.reading_list.create(ReadingListEntry(user_id=user.id, essay_id=essay_id))
        except IntegrityError:
            raise ConflictError("Essay is already in your reading list") from None

    async def remove_from_reading_list(self, user: AuthenticatedUser, essay_id: str) -> None:
        entry = await self.repos.reading_list.get_entry(user.id, essay_id)
        if entry is None:
            raise NotFoundError("Reading list entry", essay_id)
        await self.repos.reading_list.delete(entry.id)

    async def list_reading_list(self, user: AuthenticatedUser) -> List[ReadingListItem]:
        """Saved essays, most recently saved first. Essays that were unpublished are skipped."""
        entries = await self.repos.reading_list.list_for_user(user.id)
        essays = await self.repos.essays.get_many(entry.essay_id for entry in entries)
        visible = {
            essay_id: essay
            for essay_id, essay in essays.items()
            if essay.published or essay.user_id == user.id
        }
        authors = await self.authors(essay.user_id for essay in visible.values())
        return [
            ReadingListItem(
                id=entry.id,
                saved_at=entry.created_at,
                essay=EssayRead.model_validate(visible[entry.essay_id]),
                author=authors[visible[entry.essay_id].user_id],
            )
            for entry in entries
            if entry.essay_id in visible
        ]

    # ------------------------------------------------------------------
    # Follows
    # ------------------------------------------------------------------

    async def follow(self, user: AuthenticatedUser, user_id: str) -> Follow:
        if user_id == user.id:
            raise ContentValidationError("You cannot follow yourself")
        if await self.repos.follows.get_pair(user.id, user_id):
            raise ConflictError("Already following this user")
        try:
            follow = await self.repos.follows.create(Follow(follower_id=user.id, following_id=user_id))
        except IntegrityError:
            raise ConflictError("Already following this user") from None
        logger.info(f"User {user.id} followed {user_id}")
        return follow

    async def unfollow(self, user: AuthenticatedUser, user_id: str) -> None:
        follow = await self.repos.follows.get_pair(user.id, user_id)
        if follow is None:
            raise NotFoundError("Follow", user_id)
        await self.repos.follows.delete(follow.id)

    async def list_followers(self, user_id: str) -> List[AuthorSummary]:
        ids = await self.repos.follows.follower_ids(user_id)
        authors = await self.authors(ids)
        return [authors[i] for i in ids]

    async def list_following(self, user_id: str) -> List[AuthorSummary]:
        ids = await self.repos.follows.following_ids(user_id)
        authors = await self.authors(ids)
        return [authors[i] for i in ids]
