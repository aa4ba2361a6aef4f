"""
Reading List Endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from unthink.core.models.io import ReadingListItem
from unthink.server.services.deps import CurrentUser, EngagementDep

router = APIRouter()


@router.get(
    "",
    response_model=List[ReadingListItem],
    summary="List Reading List",
    description="Essays the caller saved for later, most recently saved first.",
)
async def list_reading_list(user: CurrentUser, engagement: EngagementDep):
    return await engagement.list_reading_list(user)


@router.post(
    "/{essay_id}",
    status_code=status.HTTP_201_CREATED,
    summary="Save Essay",
    description="Add an essay to the caller's reading list.",
    responses={404: {"description": "Essay not found"}, 409: {"description": "Already saved"}},
)
async def save_essay(essay_id: str, user: CurrentUser, engagement: EngagementDep):
    entry = await engagement.save_to_reading_list(user, essay_id)
    return {"id": entry.id, "essay_id": entry.essay_id, "saved_at": entry.created_at}


@router.delete(
    "/{essay_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Essay",
    description="Remove an essay from the caller's reading list.",
    responses={404: {"description": "Essay is not in the reading list"}},
)
async def remove_essay(essay_id: str, user: CurrentUser, engagement: EngagementDep) -> None:
    await engagement.remove_from_reading_list(user, essay_id)
