"""
Subscription module interface.

The request gate depends on ISubscriptionGate, so tests can swap in a
gate built from any key registry.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import SubscriptionKey, SubscriptionValidation


@runtime_checkable
class ISubscriptionGate(Protocol):
    """Interface for subscription key checks."""

    def validate(self, key: Optional[str]) -> SubscriptionValidation:
        """
        Check a key against the registry.

        Never raises; the result says whether the key is usable and why not.
        """
        ...

    def require(self, key: Optional[str]) -> SubscriptionKey:
        """
        Check a key and return its registry entry.

        Raises:
            SubscriptionKeyError: If the key is missing, unknown or inactive
        """
        ...

    def get_key_info(self, key: str) -> Optional[SubscriptionKey]:
        """Look up a key regardless of whether it is active."""
        ...
