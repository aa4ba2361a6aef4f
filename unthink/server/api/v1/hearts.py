"""
Heart Endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from unthink.core.models.domain import ContentKind
from unthink.core.models.io import HeartToggle, HeartToggleResult
from unthink.server.services.deps import CurrentUser, EngagementDep

router = APIRouter()


@router.post(
    "/toggle",
    response_model=HeartToggleResult,
    summary="Toggle Heart",
    description="Heart an essay, hot take, belief card or comment, or remove the caller's heart if present.",
    response_description="Whether the item is now hearted and its heart count.",
    responses={404: {"description": "Target not found"}},
)
async def toggle_heart(payload: HeartToggle, user: CurrentUser, engagement: EngagementDep):
    """
    Toggle a heart.

    - **target_kind**: ``essay``, ``hot_take``, ``belief_card`` or ``comment``.
    - **target_id**: Id of the item.
    """
    return await engagement.toggle_heart(user, ContentKind(payload.target_kind), payload.target_id)
