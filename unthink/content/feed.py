"""Feed aggregation helpers.

The feed service loads essays, hot takes and reposts separately; these pure
functions merge them into one timeline, apply the tag filter and compute the
trending topics sidebar.
"""

from __future__ import annotations

from collections import Counter
from itertools import chain
from typing import Iterable, List, Sequence

from unthink.core.models.io.common import TrendingTopic
from unthink.core.models.io.feed import FeedPost

TRENDING_TOPICS_LIMIT = 12


def merge_feed(*sources: Iterable[FeedPost]) -> List[FeedPost]:
    """Merge post lists into one timeline, newest first."""
    return sorted(chain.from_iterable(sources), key=lambda post: post.created_at, reverse=True)


def filter_by_tags(posts: Sequence[FeedPost], tags: Iterable[str]) -> List[FeedPost]:
    """Keep posts sharing at least one tag with ``tags``. An empty selection keeps everything."""
    selected = set(tags)
    if not selected:
        return list(posts)
    return [post for post in posts if selected.intersection(post.content.tags)]


def trending_topics(posts: Sequence[FeedPost], limit: int = TRENDING_TOPICS_LIMIT) -> List[TrendingTopic]:
    """Most used tags across ``posts``; ties keep the order tags were first seen."""
    counts = Counter(tag for post in posts for tag in post.content.tags)
    return [TrendingTopic(tag=tag, count=count) for tag, count in counts.most_common(limit)]
