"""
Newsletter Service.

Sends a published essay to the author's subscribers through the hosted
``send-newsletter`` function. The function resolves the recipients for the
chosen audience; this service only prepares the payload and the schedule.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from unthink.content.text import format_long_date
from unthink.core.database.base import utc_now
from unthink.core.database.entities import Essay
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.errors import ContentValidationError
from unthink.core.logging_config import get_logger
from unthink.core.models.domain import SendType
from unthink.core.models.io import (
    AudienceSizes,
    NewsletterPreview,
    NewsletterSend,
    NewsletterSendResult,
)
from unthink.integrations import FunctionsClient
from unthink.server.core.security import AuthenticatedUser

from .essays import EssayService

logger = get_logger(__name__)


def to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class NewsletterService:
    def __init__(
        self,
        repos: SqlRepoBundle,
        essays: EssayService,
        functions: FunctionsClient,
        function_name: str,
    ) -> None:
        self.repos = repos
        self.essays = essays
        self.functions = functions
        self.function_name = function_name

    def _payload(self, user: AuthenticatedUser, essay: Essay) -> Dict[str, Any]:
        return {
            "essay_id": essay.id,
            "author_id": user.id,
            "subject": essay.title,
            "excerpt": essay.excerpt,
            "content": essay.content,
            "tags": essay.tags,
            "paid_only": essay.paid_only,
        }

    async def audience_sizes(self, user_id: str) -> AudienceSizes:
        free = await self.repos.follows.count_followers(user_id)
        paid = 0
        return AudienceSizes(free=free, paid=paid, all=free + paid)

    async def preview(self, user: AuthenticatedUser, essay_id: str) -> NewsletterPreview:
        essay = await self.essays.get_owned(user, essay_id)
        return NewsletterPreview(
            essay_id=essay.id,
            subject=essay.title,
            excerpt=essay.excerpt,
            tags=essay.tags,
            formatted_date=format_long_date(essay.created_at),
            audience_sizes=await self.audience_sizes(user.id),
        )

    async def send(self, user: AuthenticatedUser, essay_id: str, payload: NewsletterSend) -> NewsletterSendResult:
        """
        Send or schedule an essay for the chosen audience.

        Raises:
            ContentValidationError: if the essay is a draft or the schedule is in the past
            ExternalServiceError: if the sender function fails
        """
        essay = await self.essays.get_owned(user, essay_id)
        if not essay.published:
            raise ContentValidationError("Only published essays can be sent to subscribers")

        scheduled_at: Optional[datetime] = None
        if payload.send_type == SendType.scheduled:
            scheduled_at = to_utc_naive(payload.scheduled_at)
            if scheduled_at <= utc_now():
                raise ContentValidationError("scheduled_at must be in the future")

        body = self._payload(user, essay)
        body.update(
            audience=payload.audience.value,
            send_type=payload.send_type.value,
            scheduled_at=scheduled_at.isoformat() if scheduled_at else None,
        )
        await self.functions.invoke(self.function_name, body)

        essay.email_subscribers = True
        await self.repos.essays.update(essay)

        status = "scheduled" if scheduled_at else "sent"
        logger.info(f"Newsletter {status}: essay={essay.id} audience={payload.audience.value}")
        return NewsletterSendResult(status=status, audience=payload.audience, scheduled_at=scheduled_at)

    async def send_test_email(self, user: AuthenticatedUser, essay_id: str) -> NewsletterSendResult:
        """Send the essay only to the caller's own address."""
        essay = await self.essays.get_owned(user, essay_id)
        if not user.email:
            raise ContentValidationError("Your account has no email address")
        body = self._payload(user, essay)
        body.update(test=True, to=user.email)
        await self.functions.invoke(self.function_name, body)
        logger.info(f"Newsletter test sent: essay={essay.id}")
        return NewsletterSendResult(status="test_sent")
