"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from shared.models import CamelModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AccountStatus(str, Enum):
    """Lifecycle state of an account. Only ACTIVE accounts can sign in."""

    ACTIVE = "Active"
    PENDING_VERIFICATION = "PendingVerification"
    SUSPENDED = "Suspended"
    DEACTIVATED = "Deactivated"


class AccountRole(str, Enum):
    """Role carried on the account and in auth responses. Not enforced."""

    USER = "User"
    ADMIN = "Admin"


class Account(BaseModel):
    """
    A registered user account as stored.

    failed_login_attempts and lockout_until belong to the login flow;
    nothing else writes them.
    """

    id: str = Field(default_factory=lambda: str(uuid4()), description="Account ID")
    username: str = Field(..., description="Unique, case-sensitive")
    email: str = Field(..., description="Unique, case-sensitive")
    password_hash: str = Field(..., description="bcrypt hash, never the plaintext")
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    status: AccountStatus = Field(default=AccountStatus.ACTIVE)
    role: AccountRole = Field(default=AccountRole.USER)
    failed_login_attempts: int = Field(default=0, ge=0)
    lockout_until: Optional[datetime] = Field(None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TokenClaims(BaseModel):
    """
    Verified claims from an access token.

    Every claim is optional so a token that verifies but lacks a subject
    comes back as a value with sub=None, which the request gate rejects.
    """

    sub: Optional[str] = Field(None, description="Subject (account ID)")
    username: Optional[str] = Field(None, description="Account username")
    email: Optional[str] = Field(None, description="Account email")
    iss: Optional[str] = Field(None, description="Issuer")
    aud: Optional[str] = Field(None, description="Audience")
    exp: Optional[int] = Field(None, description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def user_id(self) -> Optional[str]:
        """The subject, or None when the claim is absent or empty."""
        return self.sub or None


class RegisterRequest(CamelModel):
    """
    Registration payload.

    Fields default to empty strings so missing values reach the service's
    ordered field checks instead of failing schema validation.
    """

    username: str = ""
    email: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""


class LoginRequest(CamelModel):
    """Login payload. The username field also accepts an email address."""

    username: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(CamelModel):
    """Result of a successful login or registration."""

    token: str
    user_id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: AccountRole
    status: AccountStatus


class UserProfile(CamelModel):
    """Public projection of an account, returned by token validation."""

    user_id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: AccountRole
    status: AccountStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "UserProfile":
        return cls(
            user_id=account.id,
            username=account.username,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=account.role,
            status=account.status,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
