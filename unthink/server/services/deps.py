"""
Service Dependencies.

Wires repositories, hosted service clients and services into FastAPI
dependencies. Every request gets its own session-bound repository bundle;
the HTTP clients for storage and functions are process-wide singletons.
"""

from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unthink.core.database import get_session
from unthink.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from unthink.integrations import FunctionsClient, StorageClient
from unthink.server.core.config import settings
from unthink.server.core.security import AuthenticatedUser, get_current_user, get_optional_user

from .comments import CommentService
from .engagement import EngagementService
from .essays import EssayService
from .explore import ExploreService
from .feed import FeedService
from .media import MediaService
from .newsletters import NewsletterService
from .payments import PaymentService
from .podcasts import PodcastService
from .posts import BeliefCardService, HotTakeService
from .profiles import ProfileService
from .tts import SpeechService

# Global singletons
_storage_client: Optional[StorageClient] = None
_functions_client: Optional[FunctionsClient] = None


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client is None:
        _storage_client = StorageClient(
            settings.storage.url,
            service_key=settings.storage.service_key,
            timeout=settings.storage.timeout,
        )
    return _storage_client


def get_functions_client() -> FunctionsClient:
    global _functions_client
    if _functions_client is None:
        _functions_client = FunctionsClient(
            settings.functions.url,
            service_key=settings.functions.service_key,
            timeout=settings.functions.timeout,
        )
    return _functions_client


async def close_clients() -> None:
    """Close the shared HTTP clients; called on application shutdown."""
    global _storage_client, _functions_client
    if _storage_client is not None:
        await _storage_client.aclose()
        _storage_client = None
    if _functions_client is not None:
        await _functions_client.aclose()
        _functions_client = None


def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
OptionalUser = Annotated[Optional[AuthenticatedUser], Depends(get_optional_user)]
ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]
StorageDep = Annotated[StorageClient, Depends(get_storage_client)]
FunctionsDep = Annotated[FunctionsClient, Depends(get_functions_client)]


def get_engagement_service(repos: ReposDep) -> EngagementService:
    return EngagementService(repos)


EngagementDep = Annotated[EngagementService, Depends(get_engagement_service)]


def get_essay_service(repos: ReposDep, engagement: EngagementDep) -> EssayService:
    return EssayService(repos, engagement)


def get_hot_take_service(repos: ReposDep, engagement: EngagementDep) -> HotTakeService:
    return HotTakeService(repos, engagement)


def get_belief_card_service(repos: ReposDep, engagement: EngagementDep) -> BeliefCardService:
    return BeliefCardService(repos, engagement)


def get_comment_service(repos: ReposDep, engagement: EngagementDep) -> CommentService:
    return CommentService(repos, engagement)


def get_feed_service(repos: ReposDep, engagement: EngagementDep) -> FeedService:
    return FeedService(repos, engagement)


def get_explore_service(repos: ReposDep) -> ExploreService:
    return ExploreService(repos)


def get_profile_service(repos: ReposDep, storage: StorageDep) -> ProfileService:
    return ProfileService(repos, storage)


def get_podcast_service(repos: ReposDep) -> PodcastService:
    return PodcastService(repos)


def get_media_service(storage: StorageDep) -> MediaService:
    return MediaService(storage)


def get_speech_service(functions: FunctionsDep, storage: StorageDep) -> SpeechService:
    return SpeechService(functions, storage, settings.functions.text_to_speech)


EssayServiceDep = Annotated[EssayService, Depends(get_essay_service)]


def get_newsletter_service(repos: ReposDep, essays: EssayServiceDep, functions: FunctionsDep) -> NewsletterService:
    return NewsletterService(repos, essays, functions, settings.functions.send_newsletter)


def get_payment_service(repos: ReposDep) -> PaymentService:
    return PaymentService(repos)


HotTakeServiceDep = Annotated[HotTakeService, Depends(get_hot_take_service)]
BeliefCardServiceDep = Annotated[BeliefCardService, Depends(get_belief_card_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
FeedServiceDep = Annotated[FeedService, Depends(get_feed_service)]
ExploreServiceDep = Annotated[ExploreService, Depends(get_explore_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
PodcastServiceDep = Annotated[PodcastService, Depends(get_podcast_service)]
MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
SpeechServiceDep = Annotated[SpeechService, Depends(get_speech_service)]
NewsletterServiceDep = Annotated[NewsletterService, Depends(get_newsletter_service)]
PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]
