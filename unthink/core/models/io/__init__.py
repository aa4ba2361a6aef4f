"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts, and they carry the
form validation rules (lengths, required fields, tag normalization).
"""

from .belief_cards import BeliefCardCreate, BeliefCardDetail, BeliefCardRead
from .comments import CommentCreate, CommentNode, CommentRead, ReplyCreate
from .common import AuthorSummary, EngagementSummary, TagSuggestions, TrendingTopic
from .engagement import (
    FollowRead,
    HeartToggle,
    HeartToggleResult,
    ReadingListItem,
    RepostCreate,
    RepostRead,
)
from .essays import ArticleRead, EssayCreate, EssayRead, EssayUpdate
from .explore import ExploreResponse
from .feed import FeedContent, FeedPost, FeedResponse
from .hot_takes import HotTakeCreate, HotTakeDetail, HotTakeRead
from .media import MediaUploadResult, SpeechRequest, SpeechResult, VoiceRead
from .newsletters import AudienceSizes, NewsletterPreview, NewsletterSend, NewsletterSendResult
from .payments import PaymentSettingsRead, PaymentSettingsWrite
from .podcasts import (
    EpisodeCreate,
    EpisodeRead,
    PodcastCreate,
    PodcastRead,
    PodcastUpdate,
    RecentEpisodeRead,
)
from .profiles import (
    CreatorProfileRead,
    OnboardingComplete,
    OnboardingStatus,
    ProfileRead,
    ProfileUpdate,
)

__all__ = [
    "ArticleRead",
    "AudienceSizes",
    "AuthorSummary",
    "BeliefCardCreate",
    "BeliefCardDetail",
    "BeliefCardRead",
    "CommentCreate",
    "CommentNode",
    "CommentRead",
    "CreatorProfileRead",
    "EngagementSummary",
    "EpisodeCreate",
    "EpisodeRead",
    "EssayCreate",
    "EssayRead",
    "EssayUpdate",
    "ExploreResponse",
    "FeedContent",
    "FeedPost",
    "FeedResponse",
    "FollowRead",
    "HeartToggle",
    "HeartToggleResult",
    "HotTakeCreate",
    "HotTakeDetail",
    "HotTakeRead",
    "MediaUploadResult",
    "NewsletterPreview",
    "NewsletterSend",
    "NewsletterSendResult",
    "OnboardingComplete",
    "OnboardingStatus",
    "PaymentSettingsRead",
    "PaymentSettingsWrite",
    "PodcastCreate",
    "PodcastRead",
    "PodcastUpdate",
    "ProfileRead",
    "ProfileUpdate",
    "ReadingListItem",
    "RecentEpisodeRead",
    "ReplyCreate",
    "RepostCreate",
    "RepostRead",
    "SpeechRequest",
    "SpeechResult",
    "TagSuggestions",
    "TrendingTopic",
    "VoiceRead",
]
