"""
Subscription module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SubscriptionKey(BaseModel):
    """
    A known API-access key.

    rate_limit is carried for client compatibility only; nothing counts
    requests against it.
    """

    key: str = Field(..., description="The key string clients send")
    is_active: bool = Field(default=True, description="Inactive keys are rejected")
    rate_limit: int = Field(default=1000, description="Nominal requests per period")
    created_at: Optional[datetime] = Field(None, description="When the key was issued")

    model_config = {"frozen": True}


class SubscriptionValidation(BaseModel):
    """Outcome of checking a subscription key."""

    valid: bool
    reason: Optional[str] = None
    key_info: Optional[SubscriptionKey] = None
