"""
Newsletter Endpoints.

Send a published essay to subscribers now or at a scheduled time.
"""

from __future__ import annotations

from fastapi import APIRouter

from unthink.core.models.io import NewsletterPreview, NewsletterSend, NewsletterSendResult
from unthink.server.services.deps import CurrentUser, NewsletterServiceDep

router = APIRouter()


@router.get(
    "/{essay_id}/preview",
    response_model=NewsletterPreview,
    summary="Preview Newsletter",
    description="How the essay will look as an email, and how many subscribers each audience has.",
    responses={403: {"description": "Not the author"}, 404: {"description": "Essay not found"}},
)
async def preview_newsletter(essay_id: str, user: CurrentUser, service: NewsletterServiceDep):
    return await service.preview(user, essay_id)


@router.post(
    "/{essay_id}/send",
    response_model=NewsletterSendResult,
    summary="Send Newsletter",
    description="Send or schedule a published essay for free, paid or all subscribers.",
    responses={
        403: {"description": "Not the author"},
        404: {"description": "Essay not found"},
        422: {"description": "Draft essay or invalid schedule"},
        502: {"description": "The email sender failed"},
    },
)
async def send_newsletter(essay_id: str, payload: NewsletterSend, user: CurrentUser, service: NewsletterServiceDep):
    """
    Send a newsletter.

    - **audience**: ``free``, ``paid`` or ``all``.
    - **send_type**: ``instant`` or ``scheduled``.
    - **scheduled_at**: Required for, and only allowed with, scheduled sends; must be in the future.
    """
    return await service.send(user, essay_id, payload)


@router.post(
    "/{essay_id}/test",
    response_model=NewsletterSendResult,
    summary="Send Test Email",
    description="Send the essay only to the caller's own email address.",
    responses={502: {"description": "The email sender failed"}},
)
async def send_test_email(essay_id: str, user: CurrentUser, service: NewsletterServiceDep):
    return await service.send_test_email(user, essay_id)
