"""
Centralized configuration for the Shopping List backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., JWT_*, SUPABASE_*).
"""

from datetime import datetime
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# Used when JWT_SECRET is not set. Never rely on it outside local development.
DEVELOPMENT_JWT_SECRET = "development-only-secret-key-change-me-0123456789"


class SubscriptionKeyConfig(BaseModel):
    """A subscription key entry as it appears in configuration."""

    key: str
    is_active: bool = True
    rate_limit: int = 1000
    created_at: Optional[datetime] = None


def _default_subscription_keys() -> list[SubscriptionKeyConfig]:
    return [
        SubscriptionKeyConfig(key="demo-key-12345", rate_limit=1000),
        SubscriptionKeyConfig(key="premium-key-67890", rate_limit=5000),
        SubscriptionKeyConfig(key="enterprise-key-11111", rate_limit=10000),
    ]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shopping List API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization", "X-Subscription-Key"]

    # Tokens
    jwt_secret: str = ""
    jwt_issuer: str = "ShoppingListApp"
    jwt_audience: str = "ShoppingListApp"
    jwt_algorithm: str = "HS256"
    token_lifetime_days: int = 7

    # Account security
    max_failed_login_attempts: int = 5
    lockout_duration_minutes: int = 30
    bcrypt_rounds: int = 12

    # Subscription keys (JSON list in the environment)
    subscription_header: str = "X-Subscription-Key"
    subscription_keys: list[SubscriptionKeyConfig] = _default_subscription_keys()

    # Persistence
    storage_backend: str = "memory"  # "memory" or "supabase"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py
    accounts_table: str = "accounts"
    items_table: str = "list_items"

    @property
    def effective_jwt_secret(self) -> str:
        """Signing secret, falling back to the development default when unset."""
        return self.jwt_secret or DEVELOPMENT_JWT_SECRET

    @property
    def uses_development_secret(self) -> bool:
        return not self.jwt_secret


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
