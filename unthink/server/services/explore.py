"""
Explore Service.

Search over published essays and belief cards. The tag cloud is built from
everything loaded, before the search filters are applied.
"""

from __future__ import annotations

from typing import Optional

from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.models.io import BeliefCardRead, EssayRead, ExploreResponse

EXPLORE_LIMIT = 100


def _matches(query: str, *fields: Optional[str]) -> bool:
    return any(query in (field or "").lower() for field in fields)


class ExploreService:
    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def explore(self, query: Optional[str] = None, tag: Optional[str] = None) -> ExploreResponse:
        essays = await self.repos.essays.list_published(limit=EXPLORE_LIMIT)
        cards = await self.repos.belief_cards.list_recent(limit=EXPLORE_LIMIT)

        seen = [t for essay in essays for t in essay.tags] + [t for card in cards for t in card.tags]
        all_tags = list(dict.fromkeys(seen))

        needle = (query or "").strip().lower()
        if needle:
            essays = [essay for essay in essays if _matches(needle, essay.title, essay.content)]
            cards = [card for card in cards if _matches(needle, card.previous_belief, card.current_belief)]
        if tag:
            essays = [essay for essay in essays if tag in essay.tags]
            cards = [card for card in cards if tag in card.tags]

        return ExploreResponse(
            essays=[EssayRead.model_validate(essay) for essay in essays],
            belief_cards=[BeliefCardRead.model_validate(card) for card in cards],
            all_tags=all_tags,
        )
