"""Initial schema for Unthink

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

Creates the tables of the Unthink service:
- Profiles and creator payment settings
- Content (essays and Sparks, hot takes, belief cards)
- Engagement (comments, hearts, reposts, follows, reading list)
- Podcasts and episodes

Timestamps are stored as UTC without time zone.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list:
    columns = [sa.Column("created_at", sa.DateTime(), nullable=False)]
    if updated:
        columns.append(sa.Column("updated_at", sa.DateTime(), nullable=False))
    return columns


def upgrade() -> None:
    """Create all tables."""

    # Create profiles table
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(50), nullable=True),
        sa.Column("bio", sa.String(), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column("belief_areas", JSONB(), nullable=False, server_default="[]"),
        sa.Column("profile_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("onboarding_completed_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.Index("ix_profiles_user_id", "user_id"),
        sa.Index("ix_profiles_created_at", "created_at"),
    )

    # Create essays table
    op.create_table(
        "essays",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(), nullable=True),
        sa.Column("tldr", sa.String(), nullable=True),
        sa.Column("tags", JSONB(), nullable=False, server_default="[]"),
        sa.Column("image_urls", JSONB(), nullable=False, server_default="[]"),
        sa.Column("post_type", sa.String(), nullable=False, server_default="essay"),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("paid_only", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("email_subscribers", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_essays_user_id", "user_id"),
        sa.Index("ix_essays_published", "published"),
        sa.Index("ix_essays_created_at", "created_at"),
    )

    # Create hot_takes table
    op.create_table(
        "hot_takes",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("statement", sa.String(500), nullable=False),
        sa.Column("tags", JSONB(), nullable=False, server_default="[]"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_hot_takes_user_id", "user_id"),
        sa.Index("ix_hot_takes_created_at", "created_at"),
    )

    # Create belief_cards table
    op.create_table(
        "belief_cards",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("previous_belief", sa.Text(), nullable=False),
        sa.Column("current_belief", sa.Text(), nullable=False),
        sa.Column("explanation", sa.String(), nullable=True),
        sa.Column("date_changed", sa.Date(), nullable=True),
        sa.Column("tags", JSONB(), nullable=False, server_default="[]"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_belief_cards_user_id", "user_id"),
        sa.Index("ix_belief_cards_created_at", "created_at"),
    )

    # Create comments table
    op.create_table(
        "comments",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("essay_id", sa.String(), sa.ForeignKey("essays.id"), nullable=True),
        sa.Column("hot_take_id", sa.String(), sa.ForeignKey("hot_takes.id"), nullable=True),
        sa.Column("belief_card_id", sa.String(), sa.ForeignKey("belief_cards.id"), nullable=True),
        sa.Column("parent_id", sa.String(), nullable=True),
        sa.Column("thread_id", sa.String(), nullable=True),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_comments_user_id", "user_id"),
        sa.Index("ix_comments_essay_id", "essay_id"),
        sa.Index("ix_comments_hot_take_id", "hot_take_id"),
        sa.Index("ix_comments_belief_card_id", "belief_card_id"),
        sa.Index("ix_comments_parent_id", "parent_id"),
        sa.Index("ix_comments_thread_id", "thread_id"),
        sa.Index("ix_comments_created_at", "created_at"),
    )

    # Create hearts table
    op.create_table(
        "hearts",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("essay_id", sa.String(), sa.ForeignKey("essays.id"), nullable=True),
        sa.Column("hot_take_id", sa.String(), sa.ForeignKey("hot_takes.id"), nullable=True),
        sa.Column("belief_card_id", sa.String(), sa.ForeignKey("belief_cards.id"), nullable=True),
        sa.Column("comment_id", sa.String(), sa.ForeignKey("comments.id"), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "essay_id", name="uq_hearts_user_essay"),
        sa.UniqueConstraint("user_id", "hot_take_id", name="uq_hearts_user_hot_take"),
        sa.UniqueConstraint("user_id", "belief_card_id", name="uq_hearts_user_belief_card"),
        sa.UniqueConstraint("user_id", "comment_id", name="uq_hearts_user_comment"),
        sa.Index("ix_hearts_user_id", "user_id"),
        sa.Index("ix_hearts_essay_id", "essay_id"),
        sa.Index("ix_hearts_hot_take_id", "hot_take_id"),
        sa.Index("ix_hearts_belief_card_id", "belief_card_id"),
        sa.Index("ix_hearts_comment_id", "comment_id"),
    )

    # Create reposts table
    op.create_table(
        "reposts",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("essay_id", sa.String(), sa.ForeignKey("essays.id"), nullable=True),
        sa.Column("hot_take_id", sa.String(), sa.ForeignKey("hot_takes.id"), nullable=True),
        sa.Column("belief_card_id", sa.String(), sa.ForeignKey("belief_cards.id"), nullable=True),
        sa.Column("comment_text", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_reposts_user_id", "user_id"),
        sa.Index("ix_reposts_essay_id", "essay_id"),
        sa.Index("ix_reposts_hot_take_id", "hot_take_id"),
        sa.Index("ix_reposts_belief_card_id", "belief_card_id"),
        sa.Index("ix_reposts_created_at", "created_at"),
    )

    # Create follows table
    op.create_table(
        "follows",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("follower_id", sa.String(), nullable=False),
        sa.Column("following_id", sa.String(), nullable=False),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_follows_pair"),
        sa.Index("ix_follows_follower_id", "follower_id"),
        sa.Index("ix_follows_following_id", "following_id"),
    )

    # Create reading_list table
    op.create_table(
        "reading_list",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("essay_id", sa.String(), sa.ForeignKey("essays.id"), nullable=False),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "essay_id", name="uq_reading_list_user_essay"),
        sa.Index("ix_reading_list_user_id", "user_id"),
        sa.Index("ix_reading_list_essay_id", "essay_id"),
        sa.Index("ix_reading_list_created_at", "created_at"),
    )

    # Create podcasts table
    op.create_table(
        "podcasts",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cover_image_url", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("language", sa.String(), nullable=False, server_default="en"),
        sa.Column("explicit", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tags", JSONB(), nullable=False, server_default="[]"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_podcasts_user_id", "user_id"),
        sa.Index("ix_podcasts_created_at", "created_at"),
    )

    # Create episodes table
    op.create_table(
        "episodes",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("podcast_id", sa.String(), sa.ForeignKey("podcasts.id"), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("audio_url", sa.String(), nullable=True),
        sa.Column("external_audio_url", sa.String(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("episode_number", sa.Integer(), nullable=True),
        sa.Column("season_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("publish_date", sa.Date(), nullable=True),
        sa.Column("tags", JSONB(), nullable=False, server_default="[]"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_episodes_podcast_id", "podcast_id"),
        sa.Index("ix_episodes_user_id", "user_id"),
        sa.Index("ix_episodes_created_at", "created_at"),
    )

    # Create payment_settings table
    op.create_table(
        "payment_settings",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("stripe_connected", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("monthly_price", sa.Float(), nullable=False, server_default="5.0"),
        sa.Column("yearly_price", sa.Float(), nullable=False, server_default="50.0"),
        sa.Column("free_trial_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("free_trial_days", sa.Integer(), nullable=False, server_default="7"),
        sa.Column("supporter_tier_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("supporter_price", sa.Float(), nullable=False, server_default="20.0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.Index("ix_payment_settings_user_id", "user_id"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("payment_settings")
    op.drop_table("episodes")
    op.drop_table("podcasts")
    op.drop_table("reading_list")
    op.drop_table("follows")
    op.drop_table("reposts")
    op.drop_table("hearts")
    op.drop_table("comments")
    op.drop_table("belief_cards")
    op.drop_table("hot_takes")
    op.drop_table("essays")
    op.drop_table("profiles")
