"""
Hot Take Endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from unthink.core.models.io import HotTakeCreate, HotTakeDetail, HotTakeRead
from unthink.server.services.deps import CurrentUser, OptionalUser, get_hot_take_service
from unthink.server.services.posts import HotTakeService

router = APIRouter()


@router.post(
    "",
    response_model=HotTakeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Hot Take",
    description="Post a short, provocative statement.",
    response_description="The created hot take.",
    responses={422: {"description": "Statement shorter than 10 or longer than 500 characters"}},
)
async def create_hot_take(
    payload: HotTakeCreate,
    user: CurrentUser,
    service: HotTakeService = Depends(get_hot_take_service),
):
    """
    Create a hot take.

    - **statement**: 10 to 500 characters after trimming.
    - **tags**: Up to 10 tags.
    """
    return await service.create(user, payload)


@router.get(
    "",
    response_model=List[HotTakeRead],
    summary="List Hot Takes",
    description="Hot takes newest first, optionally filtered by author or tag.",
)
async def list_hot_takes(
    author_id: Optional[str] = None,
    tag: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: HotTakeService = Depends(get_hot_take_service),
):
    return await service.list(author_id=author_id, tag=tag, limit=limit, offset=offset)


@router.get(
    "/{hot_take_id}",
    response_model=HotTakeDetail,
    summary="Get Hot Take",
    description="A hot take with its author and engagement counters.",
    responses={404: {"description": "Hot take not found"}},
)
async def get_hot_take(
    hot_take_id: str,
    viewer: OptionalUser,
    service: HotTakeService = Depends(get_hot_take_service),
):
    return await service.get(hot_take_id, viewer)


@router.delete(
    "/{hot_take_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Hot Take",
    description="Delete one of the caller's hot takes.",
    responses={403: {"description": "Not the author"}, 404: {"description": "Hot take not found"}},
)
async def delete_hot_take(
    hot_take_id: str,
    user: CurrentUser,
    service: HotTakeService = Depends(get_hot_take_service),
) -> None:
    await service.delete(user, hot_take_id)
