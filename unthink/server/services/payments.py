"""
Payment Settings Service.

Stores a creator's subscription pricing. Processing payments happens with
the external payment processor; only the connection flag is kept here.
"""

from __future__ import annotations

from unthink.core.database.entities import PaymentSettings
from unthink.core.database.repositories import SqlRepoBundle
from unthink.core.logging_config import get_logger
from unthink.core.models.io import PaymentSettingsRead, PaymentSettingsWrite
from unthink.server.core.security import AuthenticatedUser

logger = get_logger(__name__)


class PaymentService:
    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def get_settings(self, user: AuthenticatedUser) -> PaymentSettingsRead:
        """The caller's pricing, or the defaults if nothing has been saved yet."""
        stored = await self.repos.payment_settings.get_by_user_id(user.id)
        if stored is None:
            return PaymentSettingsRead(user_id=user.id)
        return PaymentSettingsRead.model_validate(stored)

    async def update_settings(self, user: AuthenticatedUser, payload: PaymentSettingsWrite) -> PaymentSettingsRead:
        stored = await self.repos.payment_settings.get_by_user_id(user.id)
        if stored is None:
            stored = await self.repos.payment_settings.create(PaymentSettings(user_id=user.id, **payload.model_dump()))
        else:
            for field, value in payload.model_dump().items():
                setattr(stored, field, value)
            stored = await self.repos.payment_settings.update(stored)
        logger.info(f"Payment settings saved for user {user.id}")
        return PaymentSettingsRead.model_validate(stored)

    async def connect_stripe(self, user: AuthenticatedUser) -> PaymentSettingsRead:
        stored = await self.repos.payment_settings.get_by_user_id(user.id)
        if stored is None:
            stored = await self.repos.payment_settings.create(PaymentSettings(user_id=user.id, stripe_connected=True))
        else:
            stored.stripe_connected = True
            stored = await self.repos.payment_settings.update(stored)
        return PaymentSettingsRead.model_validate(stored)
