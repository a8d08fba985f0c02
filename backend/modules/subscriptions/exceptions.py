"""
Subscription module exceptions.
"""

from shared.exceptions import AuthenticationError


class SubscriptionKeyError(AuthenticationError):
    """Raised when a request carries a missing, unknown or inactive subscription key."""

    def __init__(self, reason: str):
        super().__init__(
            f"Subscription key validation failed: {reason}",
            code="INVALID_SUBSCRIPTION_KEY",
        )
        self.reason = reason
