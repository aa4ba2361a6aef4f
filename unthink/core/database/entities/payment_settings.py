"""
Payment settings entity model.

Stores how a creator wants to charge for paid posts. Card processing itself
happens at the payment processor; this row only records the creator's choices.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from ..base import Base, new_id, utc_now


class PaymentSettings(Base, table=True):
    """Subscription pricing for a creator.

    Table: payment_settings
    """

    __tablename__ = "payment_settings"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(unique=True, index=True)

    stripe_connected: bool = Field(default=False)
    monthly_price: float = Field(default=5.0)
    yearly_price: float = Field(default=50.0)
    free_trial_enabled: bool = Field(default=True)
    free_trial_days: int = Field(default=7)
    supporter_tier_enabled: bool = Field(default=False)
    supporter_price: float = Field(default=20.0)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"PaymentSettings(user_id={self.user_id}, monthly_price={self.monthly_price})"
