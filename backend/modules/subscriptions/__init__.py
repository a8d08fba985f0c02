"""
Subscription module.

Checks the static subscription key that gates all API usage,
independent of which user is calling.

Public API:
- ISubscriptionGate: Interface for key checks
- SubscriptionGate: Registry-backed implementation
- SubscriptionKey, SubscriptionValidation: Models
- SubscriptionKeyError: Raised by require()
"""

from .interfaces import ISubscriptionGate
from .models import SubscriptionKey, SubscriptionValidation
from .exceptions import SubscriptionKeyError
from .service import SubscriptionGate

__all__ = [
    "ISubscriptionGate",
    "SubscriptionGate",
    "SubscriptionKey",
    "SubscriptionValidation",
    "SubscriptionKeyError",
]
