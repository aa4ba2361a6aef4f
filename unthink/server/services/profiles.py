"""
Profile Service.

A profile row is created lazily the first time a signed-in user asks for it.
Onboarding walks the user through name, bio, topics and photo; only the name
and at least one topic are required to finish.
"""

from __future__ import annotations

from typing import Optional

from unthink.core.database.base import utc_now
from unthink.core.database.entities import Profile
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import NotFoundError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import PROFILES_BUCKET, MediaBucket
from unthink.core.models.io import (
    CreatorProfileRead,
    EssayRead,
    OnboardingComplete,
    OnboardingStatus,
    ProfileRead,
    ProfileUpdate,
)
from unthink.integrations import StorageClient
from unthink.server.core.security import AuthenticatedUser

from .media import check_upload, file_extension

logger = get_logger(__name__)

ONBOARDING_STEPS = ("name", "bio", "topics", "photo")
HIGHLIGHTS_COUNT = 3


def default_display_name(user: AuthenticatedUser) -> Optional[str]:
    if user.display_name:
        return user.display_name
    if user.email:
        return user.email.split("@", 1)[0]
    return None


def next_onboarding_step(profile: Profile) -> Optional[str]:
    """First onboarding step with missing data; None once onboarding is done."""
    if profile.profile_completed:
        return None
    missing = {
        "name": not profile.display_name,
        "bio": not profile.bio,
        "topics": not profile.belief_areas,
        "photo": not profile.avatar_url,
    }
    for step in ONBOARDING_STEPS:
        if missing[step]:
            return step
    return ONBOARDING_STEPS[-1]


class ProfileService:
    def __init__(self, repos: SqlRepoBundle, storage: Optional[StorageClient] = None) -> None:
        self.repos = repos
        self.storage = storage

    async def get_my_profile(self, user: AuthenticatedUser) -> Profile:
        profile = await self.repos.profiles.get_by_user_id(user.id)
        if profile is None:
            profile = await self.repos.profiles.create(
                Profile(user_id=user.id, display_name=default_display_name(user))
            )
            logger.info(f"Profile created for user {user.id}")
        return profile

    async def update_my_profile(self, user: AuthenticatedUser, payload: ProfileUpdate) -> Profile:
        profile = await self.get_my_profile(user)
        for field, value in payload.model_dump(exclude_unset=True).items():
            if field == "display_name" and value is None:
                continue
            if field == "belief_areas" and value is None:
                value = []
            setattr(profile, field, value)
        return await self.repos.profiles.update(profile)

    async def complete_onboarding(self, user: AuthenticatedUser, payload: OnboardingComplete) -> Profile:
        """Store the onboarding answers and mark the profile as completed."""
        profile = await self.get_my_profile(user)
        profile.display_name = payload.display_name
        profile.bio = payload.bio
        profile.belief_areas = payload.belief_areas
        if payload.avatar_url:
            profile.avatar_url = payload.avatar_url
        profile.profile_completed = True
        profile.onboarding_completed_at = utc_now()
        profile = await self.repos.profiles.update(profile)
        logger.info(f"Onboarding completed for user {user.id}")
        return profile

    async def onboarding_status(self, user: AuthenticatedUser) -> OnboardingStatus:
        profile = await self.get_my_profile(user)
        return OnboardingStatus(profile_completed=profile.profile_completed, next_step=next_onboarding_step(profile))

    async def upload_avatar(
        self, user: AuthenticatedUser, data: bytes, *, filename: Optional[str], content_type: Optional[str]
    ) -> Profile:
        """Store a profile photo at ``{user_id}/avatar.{ext}``, replacing any previous one."""
        content_type = check_upload(MediaBucket.images, content_type, len(data))
        path = f"{user.id}/avatar.{file_extension(filename, content_type)}"
        await self.storage.upload(PROFILES_BUCKET, path, data, content_type=content_type, upsert=True)

        profile = await self.get_my_profile(user)
        profile.avatar_url = self.storage.public_url(PROFILES_BUCKET, path)
        return await self.repos.profiles.update(profile)

    async def creator_profile(self, user_id: str, viewer: Optional[AuthenticatedUser] = None) -> CreatorProfileRead:
        """Public creator page: published posts split by access, highlights and follow counts."""
        profile = await self.repos.profiles.get_by_user_id(user_id)
        if profile is None:
            raise NotFoundError("Profile", user_id)

        essays = [EssayRead.model_validate(e) for e in await self.repos.essays.list_published(author_ids=[user_id])]
        is_following = False
        if viewer and viewer.id != user_id:
            is_following = await self.repos.follows.get_pair(viewer.id, user_id) is not None

        return CreatorProfileRead(
            profile=ProfileRead.model_validate(profile),
            free_posts=[essay for essay in essays if not essay.paid_only],
            paid_posts=[essay for essay in essays if essay.paid_only],
            highlights=essays[:HIGHLIGHTS_COUNT],
            followers_count=await self.repos.follows.count_followers(user_id),
            following_count=await self.repos.follows.count_following(user_id),
            is_following=is_following,
            is_own_profile=viewer is not None and viewer.id == user_id,
        )
