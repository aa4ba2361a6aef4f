"""
Podcast Service.

Shows and their episodes. Episode audio comes from one of three places: a
file uploaded to the ``audio`` bucket, speech generated from text (also in
the ``audio`` bucket), or a URL hosted elsewhere.
"""

from __future__ import annotations

from datetime import date
from typing import List

from unthink.content.durations import parse_duration
from unthink.core.database.entities import Episode, Podcast
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import NotFoundError, PermissionDeniedError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import AudioMethod
from unthink.core.models.io import (
    EpisodeCreate,
    EpisodeRead,
    PodcastCreate,
    PodcastRead,
    PodcastUpdate,
    RecentEpisodeRead,
)
from unthink.server.core.security import AuthenticatedUser

logger = get_logger(__name__)

RECENT_EPISODES_LIMIT = 5


class PodcastService:
    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def _with_counts(self, podcasts: List[Podcast]) -> List[PodcastRead]:
        counts = await self.repos.episodes.count_grouped("podcast_id", [podcast.id for podcast in podcasts])
        return [
            PodcastRead.model_validate(podcast).model_copy(update={"episode_count": counts.get(podcast.id, 0)})
            for podcast in podcasts
        ]

    async def _get_owned(self, user: AuthenticatedUser, podcast_id: str) -> Podcast:
        podcast = await self.repos.podcasts.get_by_id(podcast_id)
        if podcast is None:
            raise NotFoundError("Podcast", podcast_id)
        if podcast.user_id != user.id:
            raise PermissionDeniedError("You can only manage your own podcasts")
        return podcast

    async def create_podcast(self, user: AuthenticatedUser, payload: PodcastCreate) -> PodcastRead:
        data = payload.model_dump()
        data["category"] = payload.category.value
        data["language"] = payload.language.value
        podcast = await self.repos.podcasts.create(Podcast(user_id=user.id, **data))
        logger.info(f"Podcast created: id={podcast.id} user={user.id}")
        return PodcastRead.model_validate(podcast)

    async def list_my_podcasts(self, user: AuthenticatedUser) -> List[PodcastRead]:
        return await self._with_counts(await self.repos.podcasts.list_for_user(user.id))

    async def get_podcast(self, podcast_id: str) -> PodcastRead:
        podcast = await self.repos.podcasts.get_by_id(podcast_id)
        if podcast is None:
            raise NotFoundError("Podcast", podcast_id)
        return (await self._with_counts([podcast]))[0]

    async def update_podcast(self, user: AuthenticatedUser, podcast_id: str, payload: PodcastUpdate) -> PodcastRead:
        podcast = await self._get_owned(user, podcast_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            if value is None and field in ("title", "category", "language", "explicit"):
                continue
            if field in ("category", "language") and value is not None:
                value = getattr(value, "value", value)
            if field == "tags" and value is None:
                value = []
            setattr(podcast, field, value)
        podcast = await self.repos.podcasts.update(podcast)
        return (await self._with_counts([podcast]))[0]

    async def delete_podcast(self, user: AuthenticatedUser, podcast_id: str) -> None:
        """Delete a podcast and all of its episodes."""
        podcast = await self._get_owned(user, podcast_id)
        removed = await self.repos.episodes.delete_where("podcast_id", [podcast.id])
        await self.repos.podcasts.delete(podcast.id)
        logger.info(f"Podcast deleted: id={podcast.id} episodes={removed}")

    # ------------------------------------------------------------------
    # Episodes
    # ------------------------------------------------------------------

    async def create_episode(self, user: AuthenticatedUser, payload: EpisodeCreate) -> EpisodeRead:
        """
        Add an episode to one of the caller's podcasts.

        The audio method decides which URL is kept: ``upload`` and ``generate``
        keep ``audio_url``, ``url`` keeps ``external_audio_url``.
        """
        podcast = await self._get_owned(user, payload.podcast_id)

        audio_url = payload.audio_url
        external_audio_url = payload.external_audio_url
        if payload.audio_method == AudioMethod.url:
            audio_url = None
        else:
            external_audio_url = None

        publish_date = payload.publish_date
        if payload.published and publish_date is None:
            publish_date = date.today()

        episode = await self.repos.episodes.create(
            Episode(
                podcast_id=podcast.id,
                user_id=user.id,
                title=payload.title,
                description=payload.description,
                content=payload.content,
                audio_url=audio_url,
                external_audio_url=external_audio_url,
                duration=parse_duration(payload.duration),
                episode_number=payload.episode_number,
                season_number=payload.season_number,
                published=payload.published,
                publish_date=publish_date,
                tags=payload.tags,
            )
        )
        logger.info(f"Episode created: id={episode.id} podcast={podcast.id} method={payload.audio_method.value}")
        return EpisodeRead.model_validate(episode)

    async def list_episodes(self, podcast_id: str) -> List[EpisodeRead]:
        if await self.repos.podcasts.get_by_id(podcast_id) is None:
            raise NotFoundError("Podcast", podcast_id)
        return [EpisodeRead.model_validate(e) for e in await self.repos.episodes.list_for_podcast(podcast_id)]

    async def list_recent_episodes(
        self, user: AuthenticatedUser, limit: int = RECENT_EPISODES_LIMIT
    ) -> List[RecentEpisodeRead]:
        episodes = await self.repos.episodes.list_recent_for_user(user.id, limit=limit)
        podcasts = await self.repos.podcasts.get_many(episode.podcast_id for episode in episodes)
        return [
            RecentEpisodeRead(
                **EpisodeRead.model_validate(episode).model_dump(exclude={"formatted_duration"}),
                podcast_title=podcasts[episode.podcast_id].title if episode.podcast_id in podcasts else None,
            )
            for episode in episodes
        ]

    async def delete_episode(self, user: AuthenticatedUser, episode_id: str) -> None:
        episode = await self.repos.episodes.get_by_id(episode_id)
        if episode is None:
            raise NotFoundError("Episode", episode_id)
        if episode.user_id != user.id:
            raise PermissionDeniedError("You can only delete your own episodes")
        await self.repos.episodes.delete(episode.id)
