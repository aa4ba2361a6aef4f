"""
Database entity models using SQLModel.

One module per table. Importing this package registers every table on
``Base.metadata``.
"""

from .belief_cards import BeliefCard
from .comments import Comment
from .essays import Essay
from .follows import Follow
from .hearts import Heart
from .hot_takes import HotTake
from .payment_settings import PaymentSettings
from .podcasts import Episode, Podcast
from .profiles import Profile
from .reading_list import ReadingListEntry
from .reposts import Repost

__all__ = [
    "BeliefCard",
    "Comment",
    "Episode",
    "Essay",
    "Follow",
    "Heart",
    "HotTake",
    "PaymentSettings",
    "Podcast",
    "Profile",
    "ReadingListEntry",
    "Repost",
]
