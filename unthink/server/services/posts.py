"""
Hot Take and Belief Card Services.

Both are short, append-only post types: they can be created, read and
deleted by their author, but not edited.
"""

from __future__ import annotations

from typing import List, Optional

from unthink.core.database.entities import BeliefCard, HotTake
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import PermissionDeniedError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import ContentKind
from unthink.core.models.io import (
    BeliefCardCreate,
    BeliefCardDetail,
    BeliefCardRead,
    HotTakeCreate,
    HotTakeDetail,
    HotTakeRead,
)
from unthink.core.monitoring import log_content_created
from unthink.server.core.security import AuthenticatedUser

from .engagement import EngagementService

logger = get_logger(__name__)


class HotTakeService:
    def __init__(self, repos: SqlRepoBundle, engagement: EngagementService) -> None:
        self.repos = repos
        self.engagement = engagement

    async def create(self, user: AuthenticatedUser, payload: HotTakeCreate) -> HotTake:
        hot_take = await self.repos.hot_takes.create(
            HotTake(user_id=user.id, statement=payload.statement, tags=payload.tags)
        )
        log_content_created(ContentKind.hot_take.value, hot_take.id, user.id)
        return hot_take

    async def get(self, hot_take_id: str, viewer: Optional[AuthenticatedUser] = None) -> HotTakeDetail:
        viewer_id = viewer.id if viewer else None
        hot_take = await self.engagement.get_target(ContentKind.hot_take, hot_take_id, viewer_id)
        authors = await self.engagement.authors([hot_take.user_id])
        summary = (await self.engagement.summaries(ContentKind.hot_take, [hot_take.id], viewer_id))[hot_take.id]
        return HotTakeDetail(
            **HotTakeRead.model_validate(hot_take).model_dump(),
            author=authors[hot_take.user_id],
            **summary.model_dump(),
        )

    async def list(
        self, author_id: Optional[str] = None, tag: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> List[HotTake]:
        author_ids = [author_id] if author_id else None
        hot_takes = await self.repos.hot_takes.list_recent(author_ids=author_ids, limit=limit, offset=offset)
        if tag:
            hot_takes = [hot_take for hot_take in hot_takes if tag in hot_take.tags]
        return hot_takes

    async def delete(self, user: AuthenticatedUser, hot_take_id: str) -> None:
        hot_take = await self.engagement.get_target(ContentKind.hot_take, hot_take_id, user.id)
        if hot_take.user_id != user.id:
            raise PermissionDeniedError("You can only delete your own hot takes")
        await self.engagement.purge_targets(ContentKind.hot_take, [hot_take.id])
        await self.repos.hot_takes.delete(hot_take.id)


class BeliefCardService:
    def __init__(self, repos: SqlRepoBundle, engagement: EngagementService) -> None:
        self.repos = repos
        self.engagement = engagement

    async def create(self, user: AuthenticatedUser, payload: BeliefCardCreate) -> BeliefCard:
        card = await self.repos.belief_cards.create(
            BeliefCard(
                user_id=user.id,
                previous_belief=payload.previous_belief,
                current_belief=payload.current_belief,
                explanation=payload.explanation,
                date_changed=payload.date_changed,
                tags=payload.tags,
            )
        )
        log_content_created(ContentKind.belief_card.value, card.id, user.id)
        return card

    async def get(self, card_id: str, viewer: Optional[AuthenticatedUser] = None) -> BeliefCardDetail:
        viewer_id = viewer.id if viewer else None
        card = await self.engagement.get_target(ContentKind.belief_card, card_id, viewer_id)
        authors = await self.engagement.authors([card.user_id])
        summary = (await self.engagement.summaries(ContentKind.belief_card, [card.id], viewer_id))[card.id]
        return BeliefCardDetail(
            **BeliefCardRead.model_validate(card).model_dump(),
            author=authors[card.user_id],
            **summary.model_dump(),
        )

    async def list(
        self, author_id: Optional[str] = None, tag: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> List[BeliefCard]:
        author_ids = [author_id] if author_id else None
        cards = await self.repos.belief_cards.list_recent(author_ids=author_ids, limit=limit, offset=offset)
        if tag:
            cards = [card for card in cards if tag in card.tags]
        return cards

    async def delete(self, user: AuthenticatedUser, card_id: str) -> None:
        card = await self.engagement.get_target(ContentKind.belief_card, card_id, user.id)
        if card.user_id != user.id:
            raise PermissionDeniedError("You can only delete your own belief cards")
        await self.engagement.purge_targets(ContentKind.belief_card, [card.id])
        await self.repos.belief_cards.delete(card.id)
