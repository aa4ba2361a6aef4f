"""Unit tests for FeedService and ExploreService."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from unthink.core.database.entities import BeliefCard, Essay, Follow, Heart, HotTake, Profile, Repost
from unthink.core.models.domain import ContentKind, FeedPostType, FeedTab
from unthink.server.core.security import AuthenticatedUser
from unthink.server.services.engagement import EngagementService
from unthink.server.services.explore import ExploreService
from unthink.server.services.feed import FeedService, feed_content

BASE_TIME = datetime(2026, 1, 1, 8, 0, 0)
BODY = "A considered paragraph about changing one's mind. " * 3


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


def _essay(user_id: str, minutes: int, published: bool = True, tags=(), **kwargs) -> Essay:
    return Essay(
        user_id=user_id,
        title=kwargs.pop("title", f"Essay {minutes}"),
        content=kwargs.pop("content", BODY),
        tags=list(tags),
        published=published,
        created_at=_at(minutes),
        updated_at=_at(minutes),
        **kwargs,
    )


def _viewer(user_id: str) -> AuthenticatedUser:
    return AuthenticatedUser(id=user_id, email=f"{user_id}@example.com")


def _hot_take(user_id: str, minutes: int, tags=()) -> HotTake:
    return HotTake(
        user_id=user_id,
        statement=f"Hot take {minutes}",
        tags=list(tags),
        created_at=_at(minutes),
        updated_at=_at(minutes),
    )


@pytest.fixture
def feed(repos) -> FeedService:
    return FeedService(repos, EngagementService(repos))


def test_feed_content_flattens_items():
    hot_take = _hot_take("alice", 1, tags=["Work"])

    content = feed_content(ContentKind.hot_take, hot_take)

    assert content.kind == ContentKind.hot_take
    assert content.statement == "Hot take 1"
    assert content.tags == ["Work"]
    assert content.title is None


class TestDiscover:
    async def test_newest_first_without_drafts(self, feed, repos):
        await repos.essays.create(_essay("alice", 1))
        await repos.essays.create(_essay("alice", 5, published=False))
        await repos.hot_takes.create(_hot_take("bob", 3))

        response = await feed.get_feed(FeedTab.discover)

        assert [post.created_at for post in response.posts] == [_at(3), _at(1)]
        assert [post.type for post in response.posts] == [FeedPostType.hot_take, FeedPostType.essay]

    async def test_authors_and_counts(self, feed, repos):
        await repos.profiles.create(Profile(user_id="alice", display_name="Alice"))
        essay = await repos.essays.create(_essay("alice", 1))
        await repos.hearts.create(Heart(user_id="bob", essay_id=essay.id))

        viewer_response = await feed.get_feed(FeedTab.discover, viewer=_viewer("bob"))
        post = viewer_response.posts[0]

        assert post.author.display_name == "Alice"
        assert post.hearts_count == 1
        assert post.is_hearted is True
        assert post.content.excerpt is None
        assert post.content.title == "Essay 1"

    async def test_tag_filter_narrows_trending(self, feed, repos):
        await repos.essays.create(_essay("alice", 1, tags=["Art", "Career"]))
        await repos.essays.create(_essay("alice", 2, tags=["Career"]))
        await repos.hot_takes.create(_hot_take("bob", 3, tags=["Parenting"]))
        await repos.essays.create(_essay("carol", 4, tags=["Art"]))

        response = await feed.get_feed(FeedTab.discover, tags=["Art", "Parenting"])

        assert [post.created_at for post in response.posts] == [_at(4), _at(3), _at(1)]
        assert [(topic.tag, topic.count) for topic in response.trending_topics] == [
            ("Art", 2),
            ("Parenting", 1),
            ("Career", 1),
        ]

    async def test_empty(self, feed):
        response = await feed.get_feed(FeedTab.discover)

        assert response.posts == []
        assert response.trending_topics == []


class TestFollowing:
    async def test_requires_viewer_and_follows(self, feed, repos):
        await repos.essays.create(_essay("alice", 1))

        assert (await feed.get_feed(FeedTab.following)).posts == []
        assert (await feed.get_feed(FeedTab.following, viewer=_viewer("bob"))).posts == []

    async def test_only_followed_authors(self, feed, repos):
        await repos.follows.create(Follow(follower_id="bob", following_id="alice"))
        await repos.essays.create(_essay("alice", 1))
        await repos.hot_takes.create(_hot_take("alice", 2))
        await repos.essays.create(_essay("carol", 3))
        await repos.essays.create(_essay("bob", 4))

        response = await feed.get_feed(FeedTab.following, viewer=_viewer("bob"))

        assert {post.author.id for post in response.posts} == {"alice"}
        assert len(response.posts) == 2

    async def test_reposts_of_followed_users(self, feed, repos):
        await repos.profiles.create(Profile(user_id="alice", display_name="Alice"))
        await repos.profiles.create(Profile(user_id="carol", display_name="Carol"))
        await repos.follows.create(Follow(follower_id="bob", following_id="alice"))
        original = await repos.essays.create(_essay("carol", 1, tags=["Art"]))
        card = await repos.belief_cards.create(
            BeliefCard(
                user_id="carol",
                previous_belief="Talent is innate.",
                current_belief="Practice beats talent.",
                created_at=_at(2),
                updated_at=_at(2),
            )
        )
        repost = await repos.reposts.create(
            Repost(user_id="alice", essay_id=original.id, comment_text="Read this", created_at=_at(5))
        )
        await repos.reposts.create(Repost(user_id="alice", belief_card_id=card.id, created_at=_at(4)))

        response = await feed.get_feed(FeedTab.following, viewer=_viewer("bob"))

        assert [post.type for post in response.posts] == [FeedPostType.repost, FeedPostType.repost]
        first = response.posts[0]
        assert first.id == repost.id
        assert first.created_at == _at(5)
        assert first.author.display_name == "Alice"
        assert first.original_author.display_name == "Carol"
        assert first.repost_comment == "Read this"
        assert first.content.id == original.id
        assert first.reposts_count == 1
        assert response.posts[1].content.kind == ContentKind.belief_card
        assert response.posts[1].content.current_belief == "Practice beats talent."

    async def test_reposts_of_missing_or_unpublished_targets_are_skipped(self, feed, repos):
        await repos.follows.create(Follow(follower_id="bob", following_id="alice"))
        draft = await repos.essays.create(_essay("carol", 1, published=False))
        await repos.reposts.create(Repost(user_id="alice", essay_id=draft.id, created_at=_at(2)))
        await repos.reposts.create(Repost(user_id="alice", hot_take_id="gone", created_at=_at(3)))

        response = await feed.get_feed(FeedTab.following, viewer=_viewer("bob"))

        assert response.posts == []


class TestExplore:
    async def test_tags_search_and_filter(self, repos):
        await repos.essays.create(_essay("alice", 1, title="Learning to paint", tags=["Art", "Career"]))
        await repos.essays.create(_essay("alice", 2, title="Quitting my job", tags=["Career"]))
        await repos.essays.create(_essay("alice", 3, published=False, tags=["Secret"]))
        await repos.belief_cards.create(
            BeliefCard(
                user_id="bob",
                previous_belief="Art is a luxury.",
                current_belief="Art is how I think.",
                tags=["Art", "Mindfulness"],
            )
        )
        explore = ExploreService(repos)

        everything = await explore.explore()
        by_query = await explore.explore(query="  PAINT ")
        by_belief = await explore.explore(query="luxury")
        by_tag = await explore.explore(tag="Career")

        assert everything.all_tags == ["Career", "Art", "Mindfulness"]
        assert len(everything.essays) == 2
        assert [essay.title for essay in by_query.essays] == ["Learning to paint"]
        assert by_query.belief_cards == []
        assert by_query.all_tags == everything.all_tags
        assert by_belief.essays == [] and len(by_belief.belief_cards) == 1
        assert len(by_tag.essays) == 2 and by_tag.belief_cards == []
