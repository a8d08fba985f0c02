"""
Authentication API endpoints.

Register and login need only a subscription key; token validation goes
through the full request gate.
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user, require_subscription_key
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest, UserProfile

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    dependencies=[Depends(require_subscription_key)],
)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account and return a token for it.

    Registration signs the new account in immediately.
    """
    return await service.register(request)


@router.post(
    "/login",
    response_model=AuthResponse,
    dependencies=[Depends(require_subscription_key)],
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with a username or email and a password.
    """
    return await service.login(request.username, request.password)


@router.post("/validate", response_model=UserProfile)
async def validate_token(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Check a bearer token and return the profile of the account it names.
    """
    profile = await service.get_profile(user.id)
    logger.info("Token validated for %s", profile.username)
    return profile
