"""
Repost Endpoints.

A repost shares someone's essay, hot take or belief card with the reposter's
followers, optionally with a comment of their own.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from unthink.core.models.io import RepostCreate, RepostRead
from unthink.server.services.deps import CurrentUser, EngagementDep

router = APIRouter()


@router.post(
    "",
    response_model=RepostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Repost",
    description="Repost an essay, hot take or belief card.",
    response_description="The created repost.",
    responses={404: {"description": "Target not found"}},
)
async def create_repost(payload: RepostCreate, user: CurrentUser, engagement: EngagementDep):
    """
    Create a repost.

    - **target_kind**: ``essay``, ``hot_take`` or ``belief_card``.
    - **target_id**: Id of the reposted item.
    - **comment_text**: Optional comment, up to 500 characters; blank means none.
    """
    return await engagement.repost(user, payload)


@router.delete(
    "/{repost_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Repost",
    description="Remove one of the caller's reposts.",
    responses={403: {"description": "Not the reposter"}, 404: {"description": "Repost not found"}},
)
async def delete_repost(repost_id: str, user: CurrentUser, engagement: EngagementDep) -> None:
    await engagement.delete_repost(user, repost_id)
