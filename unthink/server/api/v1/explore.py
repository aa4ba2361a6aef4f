"""
Explore Endpoints.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from unthink.core.models.io import ExploreResponse
from unthink.server.services.deps import ExploreServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=ExploreResponse,
    summary="Explore",
    description="Search published essays and belief cards by text and tag.",
    response_description="Matching essays, belief cards and every tag in use.",
)
async def explore(service: ExploreServiceDep, q: Optional[str] = None, tag: Optional[str] = None):
    """
    Explore content.

    - **q**: Case-insensitive text matched against essay titles and bodies and
      the beliefs on belief cards.
    - **tag**: Exact tag match.
    """
    return await service.explore(query=q, tag=tag)
