"""
Authentication module.

Handles registration, login with failed-attempt lockout, password
hashing, and access token issuing and verification.

Public API:
- IAuthService, IAccountRepository: Interfaces
- AuthService: Login/registration orchestration
- PasswordHasher, TokenService, AccountSecurityPolicy: Building blocks
- Account, TokenClaims, AuthResponse, UserProfile: Models
- Auth exceptions: InvalidCredentialsError, AccountLockedError, etc.
"""

from .interfaces import IAccountRepository, IAuthService
from .models import (
    Account,
    AccountRole,
    AccountStatus,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    UserProfile,
)
from .exceptions import (
    AccountInactiveError,
    AccountLockedError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    RegistrationValidationError,
    UserNotFoundError,
)
from .lockout import AccountSecurityPolicy
from .passwords import PasswordHasher
from .tokens import TokenService
from .service import AuthService

__all__ = [
    # Interfaces
    "IAccountRepository",
    "IAuthService",
    # Implementations
    "AuthService",
    "AccountSecurityPolicy",
    "PasswordHasher",
    "TokenService",
    # Models
    "Account",
    "AccountRole",
    "AccountStatus",
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenClaims",
    "UserProfile",
    # Exceptions
    "AccountInactiveError",
    "AccountLockedError",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "RegistrationValidationError",
    "UserNotFoundError",
]
