"""
Subscription gate implementation.

Validates the static API-access key every request must carry. The
registry is handed in at construction and never changes afterwards.
"""

from typing import Iterable, Optional

from .exceptions import SubscriptionKeyError
from .interfaces import ISubscriptionGate
from .models import SubscriptionKey, SubscriptionValidation

KEY_REQUIRED = "Subscription key is required"
KEY_UNKNOWN = "Invalid subscription key"
KEY_INACTIVE = "Subscription key is inactive"


class SubscriptionGate(ISubscriptionGate):
    """Pure lookup against an in-process key registry."""

    def __init__(self, keys: Iterable[SubscriptionKey]):
        self._keys: dict[str, SubscriptionKey] = {k.key: k for k in keys}

    def validate(self, key: Optional[str]) -> SubscriptionValidation:
        if key is None or not key.strip():
            return SubscriptionValidation(valid=False, reason=KEY_REQUIRED)

        info = self._keys.get(key)
        if info is None:
            return SubscriptionValidation(valid=False, reason=KEY_UNKNOWN)
        if not info.is_active:
            return SubscriptionValidation(valid=False, reason=KEY_INACTIVE, key_info=info)

        return SubscriptionValidation(valid=True, key_info=info)

    def require(self, key: Optional[str]) -> SubscriptionKey:
        result = self.validate(key)
        if not result.valid:
            raise SubscriptionKeyError(result.reason or KEY_UNKNOWN)
        return result.key_info

    def get_key_info(self, key: str) -> Optional[SubscriptionKey]:
        return self._keys.get(key)

    @classmethod
    def from_settings(cls, settings) -> "SubscriptionGate":
        """Build a gate from the subscription_keys configuration entry."""
        return cls(
            SubscriptionKey(**entry.model_dump())
            for entry in settings.subscription_keys
        )
