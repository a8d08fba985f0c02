"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test app gets its own container built from test settings, with
in-memory storage and a low bcrypt cost.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container
from shared.config import Settings, SubscriptionKeyConfig, get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"
TEST_ISSUER = "ShoppingListApp"
TEST_AUDIENCE = "ShoppingListApp"

VALID_KEY = "demo-key-12345"
INACTIVE_KEY = "retired-key-00000"


def make_settings(**overrides) -> Settings:
    """Build Settings for tests without reading .env."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "jwt_issuer": TEST_ISSUER,
        "jwt_audience": TEST_AUDIENCE,
        "bcrypt_rounds": 4,
        "storage_backend": "memory",
        "subscription_keys": [
            SubscriptionKeyConfig(key=VALID_KEY, rate_limit=1000),
            SubscriptionKeyConfig(key="premium-key-67890", rate_limit=5000),
            SubscriptionKeyConfig(key=INACTIVE_KEY, is_active=False, rate_limit=10),
        ],
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def create_test_token(
    user_id: str | None = "test-user-123",
    username: str = "tester",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    issuer: str = TEST_ISSUER,
    audience: str = TEST_AUDIENCE,
) -> str:
    """
    Create a JWT the way the token service does, with knobs for breaking it.

    Args:
        user_id: Subject claim; None leaves the claim out
        username: Username claim
        email: Email claim
        expired: If True, creates an expired token
        secret: Signing secret
        issuer: iss claim
        audience: aud claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "username": username,
        "email": email,
        "iss": issuer,
        "aud": audience,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if user_id is not None:
        payload["sub"] = user_id
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers_for(token: str, key: str = VALID_KEY) -> dict[str, str]:
    """Headers for a protected request."""
    return {"Authorization": f"Bearer {token}", "X-Subscription-Key": key}


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def container(settings: Settings) -> ServiceContainer:
    """A fresh container with in-memory storage."""
    return ServiceContainer(settings)


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app for each test."""
    return create_app(container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def subscription_headers() -> dict[str, str]:
    return {"X-Subscription-Key": VALID_KEY}


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create subscription and authorization headers with a valid token."""
    return auth_headers_for(auth_token)


def _register_user(
    client: TestClient,
    username: str,
    email: str,
    password: str = "secret1",
    first_name: str = "Test",
    last_name: str = "User",
) -> dict:
    """Register through the API and return the auth response body."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
        },
        headers={"X-Subscription-Key": VALID_KEY},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def make_token():
    """Factory for hand-built tokens (see create_test_token)."""
    return create_test_token


@pytest.fixture
def register(client: TestClient):
    """Factory that registers a user through the API."""

    def _register(username: str, email: str, **kwargs) -> dict:
        return _register_user(client, username, email, **kwargs)

    return _register


@pytest.fixture
def login(client: TestClient):
    """Factory that posts to the login endpoint and returns the raw response."""

    def _login(username: str, password: str):
        return client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
            headers={"X-Subscription-Key": VALID_KEY},
        )

    return _login


@pytest.fixture
def headers_for():
    """Factory for bearer plus subscription headers."""
    return auth_headers_for


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset the process-wide container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def make_app():
    """Factory for a client over an app built from overridden test settings."""

    def _make_app(**overrides) -> TestClient:
        return TestClient(create_app(ServiceContainer(make_settings(**overrides))))

    return _make_app
