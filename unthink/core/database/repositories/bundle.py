"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and API endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .belief_cards import BeliefCardRepository
from .comments import CommentRepository
from .essays import EssayRepository
from .follows import FollowRepository
from .hearts import HeartRepository
from .hot_takes import HotTakeRepository
from .payment_settings import PaymentSettingsRepository
from .podcasts import EpisodeRepository, PodcastRepository
from .profiles import ProfileRepository
from .reading_list import ReadingListRepository
from .reposts import RepostRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    profiles: ProfileRepository
    essays: EssayRepository
    hot_takes: HotTakeRepository
    belief_cards: BeliefCardRepository
    comments: CommentRepository
    hearts: HeartRepository
    reposts: RepostRepository
    follows: FollowRepository
    reading_list: ReadingListRepository
    podcasts: PodcastRepository
    episodes: EpisodeRepository
    payment_settings: PaymentSettingsRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        profiles=ProfileRepository(session),
        essays=EssayRepository(session),
        hot_takes=HotTakeRepository(session),
        belief_cards=BeliefCardRepository(session),
        comments=CommentRepository(session),
        hearts=HeartRepository(session),
        reposts=RepostRepository(session),
        follows=FollowRepository(session),
        reading_list=ReadingListRepository(session),
        podcasts=PodcastRepository(session),
        episodes=EpisodeRepository(session),
        payment_settings=PaymentSettingsRepository(session),
    )
