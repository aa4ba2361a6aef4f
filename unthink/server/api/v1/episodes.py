"""
Episode Endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, status

from unthink.core.models.io import EpisodeCreate, EpisodeRead, RecentEpisodeRead
from unthink.server.services.deps import CurrentUser, PodcastServiceDep
from unthink.server.services.podcasts import RECENT_EPISODES_LIMIT

router = APIRouter()


@router.post(
    "",
    response_model=EpisodeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Episode",
    description="Add an episode to one of the caller's podcasts.",
    response_description="The created episode.",
    responses={
        403: {"description": "Not the owner of the podcast"},
        404: {"description": "Podcast not found"},
        422: {"description": "Invalid title or duration"},
    },
)
async def create_episode(payload: EpisodeCreate, user: CurrentUser, service: PodcastServiceDep):
    """
    Create an episode.

    - **audio_method**: ``upload`` or ``generate`` keep **audio_url** (an object in the
      ``audio`` bucket); ``url`` keeps **external_audio_url**.
    - **duration**: Seconds, ``MM:SS`` or ``HH:MM:SS``.
    - **publish_date**: Defaults to today for published episodes.
    """
    return await service.create_episode(user, payload)


@router.get(
    "/recent",
    response_model=List[RecentEpisodeRead],
    summary="List Recent Episodes",
    description="The caller's most recent episodes across all podcasts, with podcast titles.",
)
async def list_recent_episodes(
    user: CurrentUser,
    service: PodcastServiceDep,
    limit: int = Query(RECENT_EPISODES_LIMIT, ge=1, le=50),
):
    return await service.list_recent_episodes(user, limit=limit)


@router.delete(
    "/{episode_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Episode",
    description="Delete one of the caller's episodes.",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Episode not found"}},
)
async def delete_episode(episode_id: str, user: CurrentUser, service: PodcastServiceDep) -> None:
    await service.delete_episode(user, episode_id)
