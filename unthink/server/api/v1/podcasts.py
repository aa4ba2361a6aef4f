"""
Podcast Endpoints.

Podcast shows owned by creators. Episodes live under ``/episodes``.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from unthink.core.models.domain import PodcastCategory, PodcastLanguage
from unthink.core.models.io import EpisodeRead, PodcastCreate, PodcastRead, PodcastUpdate
from unthink.server.services.deps import CurrentUser, PodcastServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=PodcastRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Podcast",
    description="Create a podcast show.",
    response_description="The created podcast.",
    responses={422: {"description": "Missing title or unknown category or language"}},
)
async def create_podcast(payload: PodcastCreate, user: CurrentUser, service: PodcastServiceDep):
    """
    Create a podcast.

    - **title**: 1 to 200 characters.
    - **category**: One of the podcast directory categories (see ``/podcasts/categories``).
    - **language**: ``en``, ``es``, ``fr``, ``de``, ``it``, ``pt``, ``ja``, ``ko`` or ``zh``.
    - **explicit**: Whether the show contains explicit content.
    """
    return await service.create_podcast(user, payload)


@router.get(
    "",
    response_model=List[PodcastRead],
    summary="List My Podcasts",
    description="The caller's podcasts, newest first, with their episode counts.",
)
async def list_my_podcasts(user: CurrentUser, service: PodcastServiceDep):
    return await service.list_my_podcasts(user)


@router.get(
    "/categories",
    response_model=List[str],
    summary="List Categories",
    description="Categories a podcast can be filed under.",
)
async def list_categories():
    return [category.value for category in PodcastCategory]


@router.get(
    "/languages",
    response_model=List[str],
    summary="List Languages",
    description="Languages a podcast can declare.",
)
async def list_languages():
    return [language.value for language in PodcastLanguage]


@router.get(
    "/{podcast_id}",
    response_model=PodcastRead,
    summary="Get Podcast",
    description="A single podcast with its episode count.",
    responses={404: {"description": "Podcast not found"}},
)
async def get_podcast(podcast_id: str, service: PodcastServiceDep):
    return await service.get_podcast(podcast_id)


@router.patch(
    "/{podcast_id}",
    response_model=PodcastRead,
    summary="Update Podcast",
    description="Edit one of the caller's podcasts.",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Podcast not found"}},
)
async def update_podcast(podcast_id: str, payload: PodcastUpdate, user: CurrentUser, service: PodcastServiceDep):
    return await service.update_podcast(user, podcast_id, payload)


@router.delete(
    "/{podcast_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Podcast",
    description="Delete one of the caller's podcasts together with all of its episodes.",
    responses={403: {"description": "Not the owner"}, 404: {"description": "Podcast not found"}},
)
async def delete_podcast(podcast_id: str, user: CurrentUser, service: PodcastServiceDep) -> None:
    await service.delete_podcast(user, podcast_id)


@router.get(
    "/{podcast_id}/episodes",
    response_model=List[EpisodeRead],
    summary="List Episodes",
    description="Episodes of a podcast, newest first.",
    responses={404: {"description": "Podcast not found"}},
)
async def list_episodes(podcast_id: str, service: PodcastServiceDep):
    return await service.list_episodes(podcast_id)
