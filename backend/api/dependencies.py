"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one Settings
object, so tests can build a container with their own keys, secret
and storage.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAccountRepository, IAuthService
    from modules.auth.lockout import AccountSecurityPolicy
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.items.interfaces import IItemRepository, IItemService
    from modules.subscriptions.interfaces import ISubscriptionGate

STORAGE_MEMORY = "memory"
STORAGE_SUPABASE = "supabase"


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._subscriptions: "ISubscriptionGate | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None
        self._security: "AccountSecurityPolicy | None" = None
        self._account_repository: "IAccountRepository | None" = None
        self._item_repository: "IItemRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._item_service: "IItemService | None" = None

    @property
    def subscriptions(self) -> "ISubscriptionGate":
        """Get the subscription gate."""
        if self._subscriptions is None:
            from modules.subscriptions.service import SubscriptionGate
            self._subscriptions = SubscriptionGate.from_settings(self.settings)
        return self._subscriptions

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token service."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self.settings.effective_jwt_secret,
                issuer=self.settings.jwt_issuer,
                audience=self.settings.jwt_audience,
                lifetime=timedelta(days=self.settings.token_lifetime_days),
                algorithm=self.settings.jwt_algorithm,
            )
        return self._tokens

    @property
    def security(self) -> "AccountSecurityPolicy":
        """Get the lockout policy."""
        if self._security is None:
            from modules.auth.lockout import AccountSecurityPolicy
            self._security = AccountSecurityPolicy(
                max_failed_attempts=self.settings.max_failed_login_attempts,
                lockout_duration=timedelta(minutes=self.settings.lockout_duration_minutes),
            )
        return self._security

    @property
    def account_repository(self) -> "IAccountRepository":
        """Get the account repository for the configured storage backend."""
        if self._account_repository is None:
            if self.settings.storage_backend == STORAGE_SUPABASE:
                from modules.auth.repository import SupabaseAccountRepository
                from shared.database import get_supabase_client
                self._account_repository = SupabaseAccountRepository(
                    get_supabase_client(self.settings),
                    self.settings.accounts_table,
                )
            elif self.settings.storage_backend == STORAGE_MEMORY:
                from modules.auth.repository import InMemoryAccountRepository
                self._account_repository = InMemoryAccountRepository()
            else:
                raise ValueError(f"Unknown storage backend: {self.settings.storage_backend}")
        return self._account_repository

    @property
    def item_repository(self) -> "IItemRepository":
        """Get the item repository for the configured storage backend."""
        if self._item_repository is None:
            if self.settings.storage_backend == STORAGE_SUPABASE:
                from modules.items.repository import SupabaseItemRepository
                from shared.database import get_supabase_client
                self._item_repository = SupabaseItemRepository(
                    get_supabase_client(self.settings),
                    self.settings.items_table,
                )
            elif self.settings.storage_backend == STORAGE_MEMORY:
                from modules.items.repository import InMemoryItemRepository
                self._item_repository = InMemoryItemRepository()
            else:
                raise ValueError(f"Unknown storage backend: {self.settings.storage_backend}")
        return self._item_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                accounts=self.account_repository,
                hasher=self.password_hasher,
                tokens=self.tokens,
                security=self.security,
            )
        return self._auth_service

    @property
    def items(self) -> "IItemService":
        """Get the item service instance."""
        if self._item_service is None:
            from modules.items.service import ItemService
            self._item_service = ItemService(self.item_repository)
        return self._item_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different dependencies.
        """
        self._subscriptions = None
        self._password_hasher = None
        self._tokens = None
        self._security = None
        self._account_repository = None
        self._item_repository = None
        self._auth_service = None
        self._item_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls.
# They resolve through get_container so an app can override it.


def get_subscription_gate(
    container: ServiceContainer = Depends(get_container),
) -> "ISubscriptionGate":
    """FastAPI dependency for the subscription gate."""
    return container.subscriptions


def get_token_service(
    container: ServiceContainer = Depends(get_container),
) -> "TokenService":
    """FastAPI dependency for the token service."""
    return container.tokens


def get_auth_service(
    container: ServiceContainer = Depends(get_container),
) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_item_service(
    container: ServiceContainer = Depends(get_container),
) -> "IItemService":
    """FastAPI dependency for item service."""
    return container.items
