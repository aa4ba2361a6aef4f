"""
Payment settings repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.payment_settings import PaymentSettings
from .base import SQLModelRepository


class PaymentSettingsRepository(SQLModelRepository[PaymentSettings]):
    """Repository for creator payment settings."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PaymentSettings)

    async def get_by_user_id(self, user_id: str) -> Optional[PaymentSettings]:
        stmt = select(PaymentSettings).where(PaymentSettings.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
