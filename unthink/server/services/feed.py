"""
Feed Service.

Builds the home timeline. The ``following`` tab shows essays, hot takes and
reposts from the people the viewer follows; ``discover`` shows the newest
essays and hot takes from everyone. Authors and counters are attached with
batched queries, one per table and content kind.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set, Union

from unthink.content.feed import filter_by_tags, merge_feed, trending_topics
from unthink.core.database.entities import BeliefCard, Essay, HotTake, Repost
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import REPOSTABLE_KINDS, ContentKind, FeedPostType, FeedTab
from unthink.core.models.io import EngagementSummary, FeedContent, FeedPost, FeedResponse
from unthink.server.core.security import AuthenticatedUser

from .engagement import EngagementService

logger = get_logger(__name__)

FOLLOWING_LIMIT = 10
DISCOVER_LIMIT = 20

FeedItem = Union[Essay, HotTake, BeliefCard]


def feed_content(kind: ContentKind, item: FeedItem) -> FeedContent:
    """Flatten an essay, hot take or belief card into the feed card shape."""
    data = item.model_dump()
    data.pop("updated_at", None)
    return FeedContent(kind=kind, **data)


class FeedService:
    def __init__(self, repos: SqlRepoBundle, engagement: EngagementService) -> None:
        self.repos = repos
        self.engagement = engagement

    async def _load_repost_targets(self, reposts: Sequence[Repost]) -> Dict[ContentKind, Dict[str, FeedItem]]:
        wanted: Dict[ContentKind, Set[str]] = defaultdict(set)
        for repost in reposts:
            for kind in REPOSTABLE_KINDS:
                target_id = getattr(repost, kind.column)
                if target_id:
                    wanted[kind].add(target_id)
        targets: Dict[ContentKind, Dict[str, FeedItem]] = {}
        for kind, ids in wanted.items():
            targets[kind] = await self.engagement.target_repo(kind).get_many(ids)
        return targets

    async def get_feed(
        self,
        tab: FeedTab,
        viewer: Optional[AuthenticatedUser] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> FeedResponse:
        """
        Build one feed tab.

        Args:
            tab: ``following`` or ``discover``; following needs a viewer
            viewer: The signed-in user, if any
            tags: Optional tag selection; posts must share at least one tag

        Returns:
            Posts newest first plus trending topics of the unfiltered posts
        """
        viewer_id = viewer.id if viewer else None
        reposts: List[Repost] = []

        if tab == FeedTab.following:
            author_ids = await self.repos.follows.following_ids(viewer_id) if viewer_id else []
            if not author_ids:
                return FeedResponse(posts=[], trending_topics=[])
            essays = await self.repos.essays.list_published(author_ids=author_ids, limit=FOLLOWING_LIMIT)
            hot_takes = await self.repos.hot_takes.list_recent(author_ids=author_ids, limit=FOLLOWING_LIMIT)
            reposts = await self.repos.reposts.list_by_users(author_ids, limit=FOLLOWING_LIMIT)
        else:
            essays = await self.repos.essays.list_published(limit=DISCOVER_LIMIT)
            hot_takes = await self.repos.hot_takes.list_recent(limit=DISCOVER_LIMIT)

        # (kind, item, repost) triples; repost is None for original posts
        entries: List[tuple] = [(ContentKind.essay, essay, None) for essay in essays]
        entries += [(ContentKind.hot_take, hot_take, None) for hot_take in hot_takes]

        targets = await self._load_repost_targets(reposts)
        for repost in reposts:
            for kind in REPOSTABLE_KINDS:
                target = targets.get(kind, {}).get(getattr(repost, kind.column) or "")
                if target is None:
                    continue
                if kind == ContentKind.essay and not target.published:
                    continue
                entries.append((kind, target, repost))
                break

        user_ids: Set[str] = set()
        ids_by_kind: Dict[ContentKind, List[str]] = defaultdict(list)
        for kind, item, repost in entries:
            user_ids.add(item.user_id)
            if repost is not None:
                user_ids.add(repost.user_id)
            ids_by_kind[kind].append(item.id)

        authors = await self.engagement.authors(user_ids)
        summaries: Dict[ContentKind, Dict[str, EngagementSummary]] = {}
        for kind, ids in ids_by_kind.items():
            summaries[kind] = await self.engagement.summaries(kind, ids, viewer_id)

        posts: List[FeedPost] = []
        for kind, item, repost in entries:
            counts = summaries[kind][item.id].model_dump()
            if repost is None:
                posts.append(
                    FeedPost(
                        id=item.id,
                        type=FeedPostType(kind.value),
                        content=feed_content(kind, item),
                        author=authors[item.user_id],
                        created_at=item.created_at,
                        **counts,
                    )
                )
            else:
                posts.append(
                    FeedPost(
                        id=repost.id,
                        type=FeedPostType.repost,
                        content=feed_content(kind, item),
                        author=authors[repost.user_id],
                        created_at=repost.created_at,
                        repost_comment=repost.comment_text,
                        original_author=authors[item.user_id],
                        **counts,
                    )
                )

        timeline = merge_feed(posts)
        if tags:
            timeline = filter_by_tags(timeline, tags)
        topics = trending_topics(timeline)
        logger.debug(f"Feed built: tab={tab.value} viewer={viewer_id} posts={len(timeline)}")
        return FeedResponse(posts=timeline, trending_topics=topics)
