"""
Database repository layer using SQLModel.

This package contains all repository classes, one per table. Each module
provides async data access operations for its corresponding SQLModel entity.

Modules:
- base: BaseRepository interface, shared SQLModelRepository and QueryBuilder
- profiles, essays, hot_takes, belief_cards, comments: content tables
- hearts, reposts, follows, reading_list: engagement tables
- podcasts: podcast and episode tables
- payment_settings: creator pricing
- bundle: SqlRepoBundle for dependency injection
"""

from .base import BaseRepository, QueryBuilder, SQLModelRepository
from .belief_cards import BeliefCardRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session
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

__all__ = [
    "BaseRepository",
    "BeliefCardRepository",
    "CommentRepository",
    "EpisodeRepository",
    "EssayRepository",
    "FollowRepository",
    "HeartRepository",
    "HotTakeRepository",
    "PaymentSettingsRepository",
    "PodcastRepository",
    "ProfileRepository",
    "QueryBuilder",
    "ReadingListRepository",
    "RepostRepository",
    "SQLModelRepository",
    "SqlRepoBundle",
    "build_sql_repos_from_session",
]
