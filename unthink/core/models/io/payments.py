"""
Creator payment settings I/O models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PaymentSettingsWrite(BaseModel):
    """Full replacement of a creator's pricing."""

    monthly_price: float = Field(default=5.0, gt=0, le=1000)
    yearly_price: float = Field(default=50.0, gt=0, le=1000)
    free_trial_enabled: bool = True
    free_trial_days: int = Field(default=7, ge=1, le=30)
    supporter_tier_enabled: bool = False
    supporter_price: float = Field(default=20.0, gt=0, le=1000)

    @model_validator(mode="after")
    def _yearly_not_above_monthly_total(self) -> "PaymentSettingsWrite":
        if self.yearly_price > self.monthly_price * 12:
            raise ValueError("Yearly price cannot exceed twelve monthly payments")
        return self


class PaymentSettingsRead(PaymentSettingsWrite):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    stripe_connected: bool = False
