"""Domain enums for Unthink content and engagement."""

from __future__ import annotations

from enum import Enum


class ContentKind(str, Enum):
    """
    Kinds of rows that hearts, comments and reposts can point at.

    Engagement tables carry one nullable foreign key per kind
    (``essay_id``, ``hot_take_id`` ...); ``column`` names that key.
    """

    essay = "essay"
    hot_take = "hot_take"
    belief_card = "belief_card"
    comment = "comment"

    @property
    def column(self) -> str:
        return f"{self.value}_id"


# Kinds that can be commented on or reposted. Comments can only be hearted.
COMMENTABLE_KINDS = (ContentKind.essay, ContentKind.hot_take, ContentKind.belief_card)
REPOSTABLE_KINDS = COMMENTABLE_KINDS


class PostType(str, Enum):
    """Format of an essay row. ``essay`` is long-form; the rest are Spark subtypes."""

    essay = "essay"
    text = "text"
    thread = "thread"
    audio = "audio"
    video = "video"
    image = "image"
    notes = "notes"


class FeedTab(str, Enum):
    """Which population of authors the home feed draws from."""

    following = "following"
    discover = "discover"


class FeedPostType(str, Enum):
    essay = "essay"
    hot_take = "hot_take"
    repost = "repost"


class MediaBucket(str, Enum):
    """Object storage buckets accepting user uploads."""

    images = "images"
    videos = "videos"
    audio = "audio"

    @property
    def content_type_prefix(self) -> str:
        return {"images": "image/", "videos": "video/", "audio": "audio/"}[self.value]

    @property
    def max_bytes(self) -> int:
        return {
            "images": 5 * 1024 * 1024,
            "videos": 500 * 1024 * 1024,
            "audio": 100 * 1024 * 1024,
        }[self.value]


PROFILES_BUCKET = "profiles"


class Voice(str, Enum):
    """Voices offered by the text-to-speech function."""

    alloy = "alloy"
    echo = "echo"
    fable = "fable"
    onyx = "onyx"
    nova = "nova"
    shimmer = "shimmer"


VOICE_DESCRIPTIONS = {
    Voice.alloy: "Neutral and balanced",
    Voice.echo: "Clear and articulate",
    Voice.fable: "Warm and expressive",
    Voice.onyx: "Deep and authoritative",
    Voice.nova: "Bright and energetic",
    Voice.shimmer: "Soft and gentle",
}


class AudioMethod(str, Enum):
    """How an episode's audio was provided."""

    upload = "upload"
    generate = "generate"
    url = "url"


class NewsletterAudience(str, Enum):
    free = "free"
    paid = "paid"
    all = "all"


class SendType(str, Enum):
    instant = "instant"
    scheduled = "scheduled"


class PodcastCategory(str, Enum):
    """Podcast directory categories."""

    arts = "Arts"
    business = "Business"
    comedy = "Comedy"
    education = "Education"
    fiction = "Fiction"
    government = "Government"
    health_fitness = "Health & Fitness"
    history = "History"
    kids_family = "Kids & Family"
    leisure = "Leisure"
    music = "Music"
    news = "News"
    religion_spirituality = "Religion & Spirituality"
    science = "Science"
    society_culture = "Society & Culture"
    sports = "Sports"
    technology = "Technology"
    true_crime = "True Crime"
    tv_film = "TV & Film"


class PodcastLanguage(str, Enum):
    en = "en"
    es = "es"
    fr = "fr"
    de = "de"
    it = "it"
    pt = "pt"
    ja = "ja"
    ko = "ko"
    zh = "zh"
