"""
Request gate for protected and public endpoints.

Every business route checks the subscription key first. Protected
routes then require a bearer token, verify it, and pull the caller's
account ID out of the claims, in that order. Data access is scoped to
the ID returned here and never to one supplied in a request body.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import AuthenticatedUser
from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.tokens import TokenService
from modules.subscriptions.exceptions import SubscriptionKeyError
from modules.subscriptions.interfaces import ISubscriptionGate
from modules.subscriptions.models import SubscriptionKey
from ..dependencies import (
    ServiceContainer,
    get_container,
    get_subscription_gate,
    get_token_service,
)

logger = logging.getLogger(__name__)

# Bearer token extractor. Returns None instead of raising so the
# subscription check always runs first.
bearer_scheme = HTTPBearer(auto_error=False)


def _mask(key: Optional[str]) -> str:
    if not key:
        return "<none>"
    return key[:4] + "***"


def check_subscription(
    request: Request, gate: ISubscriptionGate, header_name: str
) -> SubscriptionKey:
    """
    Validate the subscription key header of a request.

    Raises:
        SubscriptionKeyError: If the key is missing, unknown or inactive
    """
    key = request.headers.get(header_name)
    try:
        return gate.require(key)
    except SubscriptionKeyError as e:
        logger.warning(
            "Rejected subscription key %s on %s: %s",
            _mask(key),
            request.url.path,
            e.reason,
        )
        raise


async def require_subscription_key(
    request: Request,
    gate: ISubscriptionGate = Depends(get_subscription_gate),
    container: ServiceContainer = Depends(get_container),
) -> SubscriptionKey:
    """
    Dependency for routes that need a subscription key but no user.

    Usage:
        @router.post("/login", dependencies=[Depends(require_subscription_key)])
    """
    return check_subscription(request, gate, container.settings.subscription_header)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: ISubscriptionGate = Depends(get_subscription_gate),
    tokens: TokenService = Depends(get_token_service),
    container: ServiceContainer = Depends(get_container),
) -> AuthenticatedUser:
    """
    Dependency that requires a subscription key and a valid bearer token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    check_subscription(request, gate, container.settings.subscription_header)

    if credentials is None:
        logger.warning("Missing or malformed Authorization header on %s", request.url.path)
        raise MissingTokenError()

    claims = tokens.verify(credentials.credentials)
    if claims is None:
        logger.warning("Invalid bearer token on %s", request.url.path)
        raise InvalidTokenError()

    user_id = claims.user_id
    if user_id is None:
        logger.warning("Bearer token without subject on %s", request.url.path)
        raise InvalidTokenError()

    return AuthenticatedUser(id=user_id, username=claims.username, email=claims.email)
