"""
Supabase client factory for the durable storage backend.

Clients are cached per (url, key) pair, so containers built from the
same settings share one client.
"""

from functools import lru_cache
from typing import Optional

from supabase import create_client, Client

from .config import Settings, get_settings


@lru_cache(maxsize=4)
def _service_client(url: str, service_role_key: str) -> Client:
    return create_client(url, service_role_key)


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get the service-role Supabase client.

    The service role bypasses row level security; owner scoping is done
    by the item service instead.

    Raises:
        RuntimeError: If the URL or service role key is not configured
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase storage selected but SUPABASE_URL or "
            "SUPABASE_SERVICE_ROLE_KEY is not set"
        )
    return _service_client(settings.supabase_url, settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Drop cached clients, e.g. after settings change in tests."""
    _service_client.cache_clear()
