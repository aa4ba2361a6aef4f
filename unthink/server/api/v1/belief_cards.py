"""
Belief Card Endpoints.

A belief card records what someone used to believe, what they believe now
and, optionally, what changed their mind.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from unthink.core.models.io import BeliefCardCreate, BeliefCardDetail, BeliefCardRead
from unthink.server.services.deps import CurrentUser, OptionalUser, get_belief_card_service
from unthink.server.services.posts import BeliefCardService

router = APIRouter()


@router.post(
    "",
    response_model=BeliefCardRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Belief Card",
    description="Record a change of mind.",
    response_description="The created belief card.",
    responses={422: {"description": "A belief is shorter than 10 characters or the explanation is too long"}},
)
async def create_belief_card(
    payload: BeliefCardCreate,
    user: CurrentUser,
    service: BeliefCardService = Depends(get_belief_card_service),
):
    """
    Create a belief card.

    - **previous_belief** / **current_belief**: At least 10 characters each, trimmed.
    - **explanation**: Optional, up to 500 characters.
    - **date_changed**: Optional ISO date.
    """
    return await service.create(user, payload)


@router.get(
    "",
    response_model=List[BeliefCardRead],
    summary="List Belief Cards",
    description="Belief cards newest first, optionally filtered by author or tag.",
)
async def list_belief_cards(
    author_id: Optional[str] = None,
    tag: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: BeliefCardService = Depends(get_belief_card_service),
):
    return await service.list(author_id=author_id, tag=tag, limit=limit, offset=offset)


@router.get(
    "/{card_id}",
    response_model=BeliefCardDetail,
    summary="Get Belief Card",
    description="A belief card with its author and engagement counters.",
    responses={404: {"description": "Belief card not found"}},
)
async def get_belief_card(
    card_id: str,
    viewer: OptionalUser,
    service: BeliefCardService = Depends(get_belief_card_service),
):
    return await service.get(card_id, viewer)


@router.delete(
    "/{card_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Belief Card",
    description="Delete one of the caller's belief cards.",
    responses={403: {"description": "Not the author"}, 404: {"description": "Belief card not found"}},
)
async def delete_belief_card(
    card_id: str,
    user: CurrentUser,
    service: BeliefCardService = Depends(get_belief_card_service),
) -> None:
    await service.delete(user, card_id)
