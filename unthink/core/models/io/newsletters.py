"""
Newsletter I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from unthink.core.models.domain import NewsletterAudience, SendType


class AudienceSizes(BaseModel):
    free: int
    paid: int
    all: int


class NewsletterPreview(BaseModel):
    essay_id: str
    subject: str
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    formatted_date: str
    audience_sizes: AudienceSizes


class NewsletterSend(BaseModel):
    """Schema for dispatching an essay to subscribers."""

    audience: NewsletterAudience = NewsletterAudience.free
    send_type: SendType = SendType.instant
    scheduled_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_schedule(self) -> "NewsletterSend":
        if self.send_type == SendType.scheduled and self.scheduled_at is None:
            raise ValueError("scheduled_at is required for scheduled sends")
        if self.send_type == SendType.instant and self.scheduled_at is not None:
            raise ValueError("scheduled_at is only allowed for scheduled sends")
        return self


class NewsletterSendResult(BaseModel):
    status: str = Field(description="sent, scheduled or test_sent")
    audience: Optional[NewsletterAudience] = Field(default=None, description="None for test sends")
    scheduled_at: Optional[datetime] = None
