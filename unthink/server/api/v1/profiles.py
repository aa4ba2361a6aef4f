"""
Profile Endpoints.

The caller's own profile, the onboarding flow, avatar uploads and public
creator pages.
"""

from __future__ import annotations

from fastapi import APIRouter, File, UploadFile

from unthink.core.logging_config import get_logger
from unthink.core.models.domain import MediaBucket
from unthink.core.models.io import (
    CreatorProfileRead,
    OnboardingComplete,
    OnboardingStatus,
    ProfileRead,
    ProfileUpdate,
)
from unthink.server.services.deps import CurrentUser, OptionalUser, ProfileServiceDep
from unthink.server.services.media import read_upload

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/me",
    response_model=ProfileRead,
    summary="Get My Profile",
    description="Return the caller's profile, creating an empty one on first access.",
    response_description="The caller's profile.",
    responses={401: {"description": "Not authenticated"}},
)
async def get_my_profile(user: CurrentUser, service: ProfileServiceDep):
    """
    Get the caller's profile.

    New profiles take their display name from the account metadata, or the
    local part of the email address when none was set at sign-up.
    """
    return await service.get_my_profile(user)


@router.patch(
    "/me",
    response_model=ProfileRead,
    summary="Update My Profile",
    description="Edit the caller's display name, bio or belief areas.",
    response_description="The updated profile.",
)
async def update_my_profile(payload: ProfileUpdate, user: CurrentUser, service: ProfileServiceDep):
    """
    Update the caller's profile.

    - **display_name**: 1 to 50 characters after trimming.
    - **bio**: Up to 500 characters.
    - **belief_areas**: Topics, normalized like tags.
    """
    return await service.update_my_profile(user, payload)


@router.post(
    "/me/onboarding",
    response_model=ProfileRead,
    summary="Complete Onboarding",
    description="Store the onboarding answers and mark the profile as completed.",
    response_description="The completed profile.",
    responses={422: {"description": "Missing name or topics"}},
)
async def complete_onboarding(payload: OnboardingComplete, user: CurrentUser, service: ProfileServiceDep):
    """
    Finish onboarding.

    - **display_name**: Required, 1 to 50 characters.
    - **bio**: Optional, up to 300 characters.
    - **belief_areas**: At least one topic.
    - **avatar_url**: Optional photo URL, usually from the avatar upload endpoint.

    Completing again is allowed and refreshes the completion timestamp.
    """
    return await service.complete_onboarding(user, payload)


@router.get(
    "/me/onboarding",
    response_model=OnboardingStatus,
    summary="Get Onboarding Status",
    description="Whether onboarding is done and which step to show next.",
)
async def onboarding_status(user: CurrentUser, service: ProfileServiceDep):
    return await service.onboarding_status(user)


@router.post(
    "/me/avatar",
    response_model=ProfileRead,
    summary="Upload Avatar",
    description="Upload a profile photo (image files up to 5 MB). Replaces the previous photo.",
    response_description="The profile with its new avatar URL.",
    responses={
        413: {"description": "File larger than 5 MB"},
        415: {"description": "File is not an image"},
        502: {"description": "Object storage rejected the upload"},
    },
)
async def upload_avatar(user: CurrentUser, service: ProfileServiceDep, file: UploadFile = File(...)):
    data = await read_upload(MediaBucket.images, file)
    return await service.upload_avatar(user, data, filename=file.filename, content_type=file.content_type)


@router.get(
    "/{user_id}",
    response_model=CreatorProfileRead,
    summary="Get Creator Profile",
    description="Public creator page with published posts, highlights and follow counts.",
    response_description="The creator page.",
    responses={404: {"description": "Profile not found"}},
)
async def get_creator_profile(user_id: str, viewer: OptionalUser, service: ProfileServiceDep):
    """
    Get a creator's public page.

    - **free_posts** / **paid_posts**: Published essays split by ``paid_only``, newest first.
    - **highlights**: The three newest published essays.
    - **is_following**: Whether the caller follows this creator.
    """
    return await service.creator_profile(user_id, viewer)
