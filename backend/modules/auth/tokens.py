"""
Access token issuing and verification.

Tokens are HS256 JWTs signed with a process-wide secret. They are not
refreshable and not revocable; expiry is the only way one stops working.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .models import Account, TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = timedelta(days=7)


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Secret, issuer and audience are fixed when the service is built.
    The clock is used for issuance; verification checks expiry against
    the wall clock with no leeway.
    """

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._lifetime = lifetime
        self._algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, account: Account) -> str:
        """
        Create a signed token for an account.

        Args:
            account: The account the token identifies

        Returns:
            Encoded JWT string
        """
        now = self._clock()
        payload = {
            "sub": account.id,
            "username": account.username,
            "email": account.email,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int((now + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> Optional[TokenClaims]:
        """
        Verify a token and return its claims.

        Returns None for a bad signature, wrong issuer or audience, an
        expired or malformed token. Never raises.
        """
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                leeway=0,
                options={"require": ["exp", "iss", "aud"]},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except (jwt.PyJWTError, PydanticValidationError) as e:
            logger.debug("Rejected token: %s", e)
            return None
