"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, ValidationError


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails verification or has no subject."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no usable Authorization: Bearer header is provided."""

    def __init__(self, message: str = "Authorization header required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when a verified token names an account that doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised for an unknown login name or a wrong password.

    Both causes produce the same payload so callers cannot probe for
    registered usernames.
    """

    def __init__(self):
        super().__init__("Invalid username or password", code="INVALID_CREDENTIALS")


class AccountLockedError(AuthenticationError):
    """Raised while an account is inside its lockout window."""

    def __init__(self):
        super().__init__(
            "Account is temporarily locked due to too many failed login attempts",
            code="ACCOUNT_LOCKED",
        )


class AccountInactiveError(AuthenticationError):
    """Raised when the account exists but its status is not Active."""

    def __init__(self):
        super().__init__("Account is not active", code="ACCOUNT_INACTIVE")


class RegistrationValidationError(ValidationError):
    """Raised when a registration field is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={"field": field} if field else None,
        )


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that is already taken."""

    def __init__(self):
        super().__init__(
            "Username already exists",
            code="USERNAME_EXISTS",
            details={"field": "username"},
        )


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__(
            "Email already exists",
            code="EMAIL_EXISTS",
            details={"field": "email"},
        )
