"""
Payment Settings Endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from unthink.core.models.io import PaymentSettingsRead, PaymentSettingsWrite
from unthink.server.services.deps import CurrentUser, PaymentServiceDep

router = APIRouter()


@router.get(
    "/settings",
    response_model=PaymentSettingsRead,
    summary="Get Payment Settings",
    description="The caller's subscription pricing; defaults when nothing was saved.",
)
async def get_payment_settings(user: CurrentUser, service: PaymentServiceDep):
    return await service.get_settings(user)


@router.put(
    "/settings",
    response_model=PaymentSettingsRead,
    summary="Update Payment Settings",
    description="Replace the caller's subscription pricing.",
    responses={422: {"description": "Price out of range or yearly price above twelve months"}},
)
async def update_payment_settings(payload: PaymentSettingsWrite, user: CurrentUser, service: PaymentServiceDep):
    """
    Update payment settings.

    - **monthly_price** / **yearly_price** / **supporter_price**: Above 0 and at most 1000.
    - **free_trial_days**: 1 to 30.
    - The yearly price cannot exceed twelve monthly payments.
    """
    return await service.update_settings(user, payload)


@router.post(
    "/stripe/connect",
    response_model=PaymentSettingsRead,
    summary="Connect Stripe",
    description="Mark the caller's payout account as connected.",
)
async def connect_stripe(user: CurrentUser, service: PaymentServiceDep):
    return await service.connect_stripe(user)
