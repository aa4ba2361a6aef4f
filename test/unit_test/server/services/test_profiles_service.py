"""Unit tests for ProfileService and the onboarding flow."""

from __future__ import annotations

import pytest

from unthink.core.database.entities import Essay, Follow, Profile
from unthink.core.errors import NotFoundError, UnsupportedMediaTypeError
from unthink.core.models.io import OnboardingComplete, ProfileUpdate
from unthink.server.core.security import AuthenticatedUser
from unthink.server.services.profiles import ProfileService, default_display_name, next_onboarding_step

BODY = "A considered paragraph about changing one's mind. " * 3


@pytest.fixture
def profiles(repos, storage_client) -> ProfileService:
    return ProfileService(repos, storage_client)


class TestHelpers:
    def test_default_display_name(self):
        assert default_display_name(AuthenticatedUser(id="u", email="ada@example.com", display_name="Ada")) == "Ada"
        assert default_display_name(AuthenticatedUser(id="u", email="ada@example.com")) == "ada"
        assert default_display_name(AuthenticatedUser(id="u")) is None

    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({}, "name"),
            ({"display_name": "Ada"}, "bio"),
            ({"display_name": "Ada", "bio": "Writer"}, "topics"),
            ({"display_name": "Ada", "bio": "Writer", "belief_areas": ["AI"]}, "photo"),
            ({"display_name": "Ada", "bio": "Writer", "belief_areas": ["AI"], "avatar_url": "http://a"}, "photo"),
            ({"profile_completed": True}, None),
        ],
    )
    def test_next_onboarding_step(self, fields, expected):
        assert next_onboarding_step(Profile(user_id="u", **fields)) == expected


class TestMyProfile:
    async def test_created_lazily_once(self, profiles, user_factory):
        alice = user_factory("alice")

        first = await profiles.get_my_profile(alice)
        second = await profiles.get_my_profile(alice)

        assert first.id == second.id
        assert first.display_name == "alice"
        assert first.profile_completed is False

    async def test_update_partial(self, profiles, user_factory):
        alice = user_factory("alice", display_name="Alice")
        await profiles.get_my_profile(alice)

        updated = await profiles.update_my_profile(alice, ProfileUpdate(bio="Writer", belief_areas=["AI", "AI"]))
        unchanged_name = await profiles.update_my_profile(alice, ProfileUpdate(display_name=None))
        cleared = await profiles.update_my_profile(alice, ProfileUpdate(belief_areas=None))

        assert updated.display_name == "Alice"
        assert updated.bio == "Writer"
        assert updated.belief_areas == ["AI"]
        assert unchanged_name.display_name == "Alice"
        assert cleared.belief_areas == []


class TestOnboarding:
    async def test_status_then_complete(self, profiles, user_factory):
        bob = user_factory("bob")

        status = await profiles.onboarding_status(bob)
        assert status.profile_completed is False
        assert status.next_step == "bio"

        profile = await profiles.complete_onboarding(
            bob, OnboardingComplete(display_name="Bob", bio="  ", belief_areas=["Philosophy"])
        )

        assert profile.profile_completed is True
        assert profile.onboarding_completed_at is not None
        assert profile.bio is None
        assert profile.avatar_url is None
        status = await profiles.onboarding_status(bob)
        assert (status.profile_completed, status.next_step) == (True, None)

    async def test_complete_keeps_existing_avatar(self, profiles, repos, user_factory):
        await repos.profiles.create(Profile(user_id="bob", avatar_url="http://old"))

        profile = await profiles.complete_onboarding(
            user_factory("bob"), OnboardingComplete(display_name="Bob", belief_areas=["AI"])
        )

        assert profile.avatar_url == "http://old"


class TestAvatar:
    async def test_upload_avatar(self, profiles, storage_stub, user_factory):
        profile = await profiles.upload_avatar(
            user_factory("alice"), b"\x89PNG", filename="me.PNG", content_type="image/png"
        )

        assert profile.avatar_url == "http://mock-storage/storage/v1/object/public/profiles/alice/avatar.png"
        request = storage_stub.requests[0]
        assert request.url.path == "/storage/v1/object/profiles/alice/avatar.png"
        assert request.headers["x-upsert"] == "true"
        assert request.headers["content-type"] == "image/png"

    async def test_upload_rejects_non_images(self, profiles, storage_stub, user_factory):
        with pytest.raises(UnsupportedMediaTypeError):
            await profiles.upload_avatar(
                user_factory("alice"), b"%PDF", filename="cv.pdf", content_type="application/pdf"
            )

        assert storage_stub.requests == []


class TestCreatorProfile:
    async def test_creator_page(self, profiles, repos, user_factory):
        await repos.profiles.create(Profile(user_id="alice", display_name="Alice"))
        for index in range(4):
            await repos.essays.create(
                Essay(user_id="alice", title=f"Free {index}", content=BODY, published=True)
            )
        await repos.essays.create(Essay(user_id="alice", title="Paid", content=BODY, published=True, paid_only=True))
        await repos.essays.create(Essay(user_id="alice", title="Draft", content=BODY, published=False))
        await repos.follows.create(Follow(follower_id="bob", following_id="alice"))
        await repos.follows.create(Follow(follower_id="alice", following_id="carol"))

        page = await profiles.creator_profile("alice", user_factory("bob"))

        assert page.profile.display_name == "Alice"
        assert len(page.free_posts) == 4
        assert [essay.title for essay in page.paid_posts] == ["Paid"]
        assert len(page.highlights) == 3
        assert (page.followers_count, page.following_count) == (1, 1)
        assert page.is_following is True
        assert page.is_own_profile is False

    async def test_own_and_anonymous_views(self, profiles, repos, user_factory):
        await repos.profiles.create(Profile(user_id="alice"))

        own = await profiles.creator_profile("alice", user_factory("alice"))
        anonymous = await profiles.creator_profile("alice")

        assert (own.is_own_profile, own.is_following) == (True, False)
        assert (anonymous.is_own_profile, anonymous.is_following) == (False, False)

    async def test_missing_profile(self, profiles):
        with pytest.raises(NotFoundError):
            await profiles.creator_profile("nobody")
