"""
Authentication service implementation.

Orchestrates login and registration over the account repository, the
password hasher, the lockout policy and the token service.
"""

import asyncio
import logging
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .exceptions import (
    AccountInactiveError,
    AccountLockedError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    RegistrationValidationError,
    UserNotFoundError,
)
from .interfaces import IAccountRepository, IAuthService
from .lockout import AccountSecurityPolicy
from .models import (
    Account,
    AccountRole,
    AccountStatus,
    AuthResponse,
    RegisterRequest,
    UserProfile,
)
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The read-modify-write on an account during login is not guarded:
    two concurrent failures can both read the same counter value.
    """

    def __init__(
        self,
        accounts: IAccountRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        security: AccountSecurityPolicy,
    ):
        self._accounts = accounts
        self._hasher = hasher
        self._tokens = tokens
        self._security = security

    async def login(
        self, username_or_email: Optional[str], password: Optional[str]
    ) -> AuthResponse:
        account = None
        if username_or_email:
            account = self._accounts.get_by_username(username_or_email)
            if account is None:
                account = self._accounts.get_by_email(username_or_email)
        if account is None:
            logger.info("Login failed: no account matches the given name")
            raise InvalidCredentialsError()

        if self._security.is_locked(account):
            logger.warning("Login refused for locked account %s", account.id)
            raise AccountLockedError()

        # bcrypt is CPU-bound; keep it off the event loop
        verified = await asyncio.to_thread(
            self._hasher.verify, password or "", account.password_hash
        )
        if not verified:
            account = self._security.register_failure(account)
            self._accounts.update(account)
            logger.info(
                "Login failed for account %s (%d failed attempts)",
                account.id,
                account.failed_login_attempts,
            )
            raise InvalidCredentialsError()

        if account.status != AccountStatus.ACTIVE:
            logger.info("Login refused for inactive account %s", account.id)
            raise AccountInactiveError()

        account = self._security.register_success(account)
        self._accounts.update(account)
        logger.info("Login succeeded for account %s", account.id)
        return self._auth_response(account)

    async def register(self, request: RegisterRequest) -> AuthResponse:
        self._validate_registration(request)

        if self._accounts.get_by_username(request.username) is not None:
            raise DuplicateUsernameError()
        if self._accounts.get_by_email(request.email) is not None:
            raise DuplicateEmailError()

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)
        now = self._security.now()
        account = Account(
            username=request.username,
            email=request.email,
            password_hash=password_hash,
            first_name=request.first_name,
            last_name=request.last_name,
            status=AccountStatus.ACTIVE,
            role=AccountRole.USER,
            failed_login_attempts=0,
            created_at=now,
            updated_at=now,
        )
        account = self._accounts.create(account)
        logger.info("Registered account %s", account.id)
        return self._auth_response(account)

    async def get_profile(self, user_id: str) -> UserProfile:
        account = self._accounts.get_by_id(user_id)
        if account is None:
            raise UserNotFoundError(user_id)
        if account.status != AccountStatus.ACTIVE:
            raise AccountInactiveError()
        return UserProfile.from_account(account)

    def _auth_response(self, account: Account) -> AuthResponse:
        return AuthResponse(
            token=self._tokens.issue(account),
            user_id=account.id,
            username=account.username,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=account.role,
            status=account.status,
        )

    @staticmethod
    def _validate_registration(request: RegisterRequest) -> None:
        """Check fields in a fixed order and stop at the first problem."""
        required = [
            ("username", request.username, "Username is required"),
            ("email", request.email, "Email is required"),
            ("password", request.password, "Password is required"),
            ("firstName", request.first_name, "First name is required"),
            ("lastName", request.last_name, "Last name is required"),
        ]
        for field, value, message in required:
            if _blank(value):
                raise RegistrationValidationError(message, field)

        if not USERNAME_MIN_LENGTH <= len(request.username) <= USERNAME_MAX_LENGTH:
            raise RegistrationValidationError(
                f"Username must be between {USERNAME_MIN_LENGTH} and "
                f"{USERNAME_MAX_LENGTH} characters",
                "username",
            )
        if not _is_valid_email(request.email):
            raise RegistrationValidationError("Invalid email format", "email")
        if not PASSWORD_MIN_LENGTH <= len(request.password) <= PASSWORD_MAX_LENGTH:
            raise RegistrationValidationError(
                f"Password must be between {PASSWORD_MIN_LENGTH} and "
                f"{PASSWORD_MAX_LENGTH} characters",
                "password",
            )
