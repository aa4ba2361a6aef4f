"""Domain enums and constants shared by entities, I/O models and services."""

from .enums import (
    COMMENTABLE_KINDS,
    PROFILES_BUCKET,
    REPOSTABLE_KINDS,
    VOICE_DESCRIPTIONS,
    AudioMethod,
    ContentKind,
    FeedPostType,
    FeedTab,
    MediaBucket,
    NewsletterAudience,
    PodcastCategory,
    PodcastLanguage,
    PostType,
    SendType,
    Voice,
)

__all__ = [
    "COMMENTABLE_KINDS",
    "PROFILES_BUCKET",
    "REPOSTABLE_KINDS",
    "VOICE_DESCRIPTIONS",
    "AudioMethod",
    "ContentKind",
    "FeedPostType",
    "FeedTab",
    "MediaBucket",
    "NewsletterAudience",
    "PodcastCategory",
    "PodcastLanguage",
    "PostType",
    "SendType",
    "Voice",
]
