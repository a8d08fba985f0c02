"""
Authentication module interfaces.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and swapping storage without touching
the login flow.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Account, AuthResponse, RegisterRequest, UserProfile


@runtime_checkable
class IAccountRepository(Protocol):
    """
    Storage contract for accounts.

    Implementations do no business checks; uniqueness and lockout rules
    live in the auth service.
    """

    def get_by_id(self, account_id: str) -> Optional[Account]:
        ...

    def get_by_username(self, username: str) -> Optional[Account]:
        ...

    def get_by_email(self, email: str) -> Optional[Account]:
        ...

    def create(self, account: Account) -> Account:
        ...

    def update(self, account: Account) -> Account:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def login(
        self, username_or_email: Optional[str], password: Optional[str]
    ) -> AuthResponse:
        """
        Authenticate with a username (or email) and password.

        Args:
            username_or_email: Tried as a username first, then as an email
            password: Plain-text password

        Returns:
            AuthResponse with a fresh token and the public account fields

        Raises:
            InvalidCredentialsError: Unknown account or wrong password
            AccountLockedError: The account is inside its lockout window
            AccountInactiveError: Correct password but status is not Active
        """
        ...

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign it in.

        Args:
            request: Registration fields

        Returns:
            AuthResponse for the new account

        Raises:
            RegistrationValidationError: A field is missing or malformed
            DuplicateUsernameError: Username already registered
            DuplicateEmailError: Email already registered
        """
        ...

    async def get_profile(self, user_id: str) -> UserProfile:
        """
        Load the public profile of the account a token names.

        Raises:
            UserNotFoundError: No account with this ID
            AccountInactiveError: Account exists but is not Active
        """
        ...
