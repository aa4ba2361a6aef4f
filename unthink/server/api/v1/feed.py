"""
Feed Endpoints.

The home timeline in two tabs: ``following`` (people the caller follows,
sign-in required) and ``discover`` (everyone).
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from unthink.core.models.domain import FeedTab
from unthink.core.models.io import FeedResponse
from unthink.server.services.deps import FeedServiceDep, OptionalUser

router = APIRouter()


@router.get(
    "",
    response_model=FeedResponse,
    summary="Get Feed",
    description="Essays, hot takes and reposts newest first, with trending topics.",
    response_description="Feed posts and trending topics.",
    responses={401: {"description": "The following tab needs a signed-in user"}},
)
async def get_feed(
    viewer: OptionalUser,
    service: FeedServiceDep,
    tab: FeedTab = FeedTab.discover,
    tags: Optional[List[str]] = Query(None, description="Only posts sharing at least one of these tags"),
):
    """
    Get the feed.

    - **tab**: ``following`` takes the 10 newest essays, hot takes and reposts
      of followed users; ``discover`` takes the 20 newest essays and hot takes.
    - **tags**: Repeatable tag filter. Trending topics are computed before it applies.
    """
    if tab == FeedTab.following and viewer is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in to see the following feed",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return await service.get_feed(tab, viewer, tags or [])
