"""
Follow Endpoints.

Following a user puts their essays, hot takes and reposts in the caller's
``following`` feed.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from unthink.core.models.io import AuthorSummary, FollowRead
from unthink.server.services.deps import CurrentUser, EngagementDep

router = APIRouter()


@router.post(
    "/{user_id}",
    response_model=FollowRead,
    status_code=status.HTTP_201_CREATED,
    summary="Follow User",
    description="Start following another user.",
    response_description="The follow relationship.",
    responses={
        409: {"description": "Already following this user"},
        422: {"description": "Users cannot follow themselves"},
    },
)
async def follow_user(user_id: str, user: CurrentUser, engagement: EngagementDep):
    return await engagement.follow(user, user_id)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unfollow User",
    description="Stop following a user.",
    responses={404: {"description": "Not following this user"}},
)
async def unfollow_user(user_id: str, user: CurrentUser, engagement: EngagementDep) -> None:
    await engagement.unfollow(user, user_id)


@router.get(
    "/{user_id}/followers",
    response_model=List[AuthorSummary],
    summary="List Followers",
    description="Users following the given user, most recent first.",
)
async def list_followers(user_id: str, engagement: EngagementDep):
    return await engagement.list_followers(user_id)


@router.get(
    "/{user_id}/following",
    response_model=List[AuthorSummary],
    summary="List Following",
    description="Users the given user follows, most recent first.",
)
async def list_following(user_id: str, engagement: EngagementDep):
    return await engagement.list_following(user_id)
