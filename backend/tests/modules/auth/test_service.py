"""Tests for the auth service login and registration flows."""

import asyncio
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from modules.auth.exceptions import (
    AccountInactiveError,
    AccountLockedError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    RegistrationValidationError,
    UserNotFoundError,
)
from modules.auth.lockout import AccountSecurityPolicy
from modules.auth.models import AccountRole, AccountStatus, RegisterRequest
from modules.auth.passwords import PasswordHasher
from modules.auth.repository import InMemoryAccountRepository
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService

SECRET = "service-test-secret-0123456789abcdef"


class FakeClock:
    def __init__(self):
        self.now = datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def registration(**overrides) -> RegisterRequest:
    values = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret1",
        "first_name": "Alice",
        "last_name": "Smith",
    }
    values.update(overrides)
    return RegisterRequest(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(SECRET, "ShoppingListApp", "ShoppingListApp")


@pytest.fixture
def service(accounts, tokens, clock) -> AuthService:
    """Create auth service over in-memory storage and a controllable clock."""
    return AuthService(
        accounts=accounts,
        hasher=PasswordHasher(rounds=4),
        tokens=tokens,
        security=AccountSecurityPolicy(clock=clock),
    )


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_returns_token_and_profile(self, service, tokens):
        result = await service.register(registration())

        assert result.username == "alice"
        assert result.email == "alice@example.com"
        assert result.first_name == "Alice"
        assert result.last_name == "Smith"
        assert result.role == AccountRole.USER
        assert result.status == AccountStatus.ACTIVE
        assert tokens.verify(result.token).user_id == result.user_id

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_password(self, service, accounts):
        result = await service.register(registration())
        stored = accounts.get_by_id(result.user_id)

        assert stored.password_hash != "secret1"
        assert stored.failed_login_attempts == 0
        assert stored.lockout_until is None
        assert stored.created_at == stored.updated_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,overrides,message",
        [
            ("username", {"username": ""}, "Username is required"),
            ("username", {"username": "   "}, "Username is required"),
            ("email", {"email": ""}, "Email is required"),
            ("password", {"password": ""}, "Password is required"),
            ("firstName", {"first_name": ""}, "First name is required"),
            ("lastName", {"last_name": " "}, "Last name is required"),
            ("username", {"username": "ab"}, "Username must be between 3 and 50 characters"),
            ("username", {"username": "a" * 51}, "Username must be between 3 and 50 characters"),
            ("email", {"email": "not-an-email"}, "Invalid email format"),
            ("password", {"password": "12345"}, "Password must be between 6 and 100 characters"),
            ("password", {"password": "p" * 101}, "Password must be between 6 and 100 characters"),
        ],
    )
    async def test_register_validation(self, service, field, overrides, message):
        with pytest.raises(RegistrationValidationError) as exc_info:
            await service.register(registration(**overrides))
        assert exc_info.value.message == message
        assert exc_info.value.details == {"field": field}

    @pytest.mark.asyncio
    async def test_first_failing_check_wins(self, service):
        """With several problems, the earliest check in order is reported."""
        with pytest.raises(RegistrationValidationError, match="Email is required"):
            await service.register(registration(email="", password="", last_name=""))

    @pytest.mark.asyncio
    async def test_length_boundaries_accepted(self, service):
        result = await service.register(
            registration(username="abc", password="123456")
        )
        assert result.username == "abc"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, service):
        await service.register(registration())
        with pytest.raises(DuplicateUsernameError):
            await service.register(registration(email="other@example.com"))

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service):
        await service.register(registration())
        with pytest.raises(DuplicateEmailError):
            await service.register(registration(username="alice2"))

    @pytest.mark.asyncio
    async def test_usernames_are_case_sensitive(self, service):
        await service.register(registration())
        result = await service.register(
            registration(username="Alice", email="alice2@example.com")
        )
        assert result.username == "Alice"


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_by_username(self, service, tokens):
        registered = await service.register(registration())
        result = await service.login("alice", "secret1")
        assert result.user_id == registered.user_id
        assert tokens.verify(result.token).user_id == registered.user_id

    @pytest.mark.asyncio
    async def test_login_by_email(self, service):
        registered = await service.register(registration())
        result = await service.login("alice@example.com", "secret1")
        assert result.user_id == registered.user_id

    @pytest.mark.asyncio
    async def test_unknown_and_wrong_password_look_the_same(self, service):
        await service.register(registration())

        with pytest.raises(InvalidCredentialsError) as unknown:
            await service.login("nobody", "secret1")
        with pytest.raises(InvalidCredentialsError) as wrong:
            await service.login("alice", "wrong-password")

        assert unknown.value.to_dict() == wrong.value.to_dict()

    @pytest.mark.asyncio
    async def test_wrong_password_counts_failure(self, service, accounts):
        registered = await service.register(registration())
        with pytest.raises(InvalidCredentialsError):
            await service.login("alice", "wrong")
        assert accounts.get_by_id(registered.user_id).failed_login_attempts == 1

    @pytest.mark.asyncio
    async def test_success_resets_counter(self, service, accounts):
        registered = await service.register(registration())
        for _ in range(3):
            with pytest.raises(InvalidCredentialsError):
                await service.login("alice", "wrong")

        await service.login("alice", "secret1")

        stored = accounts.get_by_id(registered.user_id)
        assert stored.failed_login_attempts == 0
        assert stored.lockout_until is None

    @pytest.mark.asyncio
    async def test_fifth_failure_locks_account(self, service, accounts, clock):
        registered = await service.register(registration())
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await service.login("alice", "wrong")

        stored = accounts.get_by_id(registered.user_id)
        assert stored.failed_login_attempts == 5
        assert stored.lockout_until == clock.now + timedelta(minutes=30)

        # Even the right password is refused while locked
        with pytest.raises(AccountLockedError):
            await service.login("alice", "secret1")

    @pytest.mark.asyncio
    async def test_locked_attempts_do_not_count(self, service, accounts):
        registered = await service.register(registration())
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await service.login("alice", "wrong")
        with pytest.raises(AccountLockedError):
            await service.login("alice", "wrong")

        assert accounts.get_by_id(registered.user_id).failed_login_attempts == 5

    @pytest.mark.asyncio
    async def test_login_after_lockout_expires(self, service, accounts, clock):
        registered = await service.register(registration())
        for _ in range(5):
            with pytest.raises(InvalidCredentialsError):
                await service.login("alice", "wrong")

        clock.advance(timedelta(minutes=31))
        result = await service.login("alice", "secret1")

        assert result.user_id == registered.user_id
        assert accounts.get_by_id(registered.user_id).failed_login_attempts == 0

    @pytest.mark.asyncio
    async def test_inactive_account_with_correct_password(self, service, accounts):
        registered = await service.register(registration())
        account = accounts.get_by_id(registered.user_id)
        accounts.update(account.model_copy(update={"status": AccountStatus.SUSPENDED}))

        with pytest.raises(AccountInactiveError):
            await service.login("alice", "secret1")

    @pytest.mark.asyncio
    async def test_inactive_account_with_wrong_password(self, service, accounts):
        """A wrong password is reported as bad credentials before status is checked."""
        registered = await service.register(registration())
        account = accounts.get_by_id(registered.user_id)
        accounts.update(account.model_copy(update={"status": AccountStatus.DEACTIVATED}))

        with pytest.raises(InvalidCredentialsError):
            await service.login("alice", "wrong")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [(None, "secret1"), ("", "secret1")])
    async def test_missing_username_is_bad_credentials(self, service, username, password):
        await service.register(registration())
        with pytest.raises(InvalidCredentialsError):
            await service.login(username, password)

    @pytest.mark.asyncio
    async def test_missing_password_counts_failure(self, service, accounts):
        registered = await service.register(registration())
        with pytest.raises(InvalidCredentialsError):
            await service.login("alice", None)
        assert accounts.get_by_id(registered.user_id).failed_login_attempts == 1


class TestHashingOffEventLoop:
    """bcrypt runs in a worker thread so concurrent requests don't serialize."""

    @pytest.mark.asyncio
    async def test_register_and_login_hash_in_thread(self, service):
        with patch("modules.auth.service.asyncio.to_thread", wraps=asyncio.to_thread) as to_thread:
            await service.register(registration())
            await service.login("alice", "secret1")

        called = [c.args[0].__name__ for c in to_thread.call_args_list]
        assert called == ["hash", "verify"]

    @pytest.mark.asyncio
    async def test_concurrent_logins(self, service):
        await service.register(registration())
        results = await asyncio.gather(
            *(service.login("alice", "secret1") for _ in range(3))
        )
        assert len({r.user_id for r in results}) == 1


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_returns_profile(self, service):
        registered = await service.register(registration())
        profile = await service.get_profile(registered.user_id)
        assert profile.user_id == registered.user_id
        assert profile.username == "alice"
        assert profile.first_name == "Alice"

    @pytest.mark.asyncio
    async def test_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            await service.get_profile("missing")

    @pytest.mark.asyncio
    async def test_inactive_user(self, service, accounts):
        registered = await service.register(registration())
        account = accounts.get_by_id(registered.user_id)
        accounts.update(
            account.model_copy(update={"status": AccountStatus.PENDING_VERIFICATION})
        )
        with pytest.raises(AccountInactiveError):
            await service.get_profile(registered.user_id)
