"""
Infrastructure shared by the api package and every module.

Settings, the error base classes HTTP statuses hang off, the Supabase
client factory with its repository base, and the models that cross
module boundaries (the authenticated caller, the camelCase base).
Nothing in here knows about accounts or items.
"""

from .config import Settings, SubscriptionKeyConfig, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    AuthenticationError,
    NotFoundError,
    ShoppingListError,
    ValidationError,
)
from .models import AuthenticatedUser, CamelModel

__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "CamelModel",
    "NotFoundError",
    "Settings",
    "ShoppingListError",
    "SubscriptionKeyConfig",
    "ValidationError",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
]
