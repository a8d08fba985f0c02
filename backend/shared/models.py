"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for models exposed over HTTP.

    Fields are declared in snake_case and serialized in camelCase,
    which is what the web client expects. Either spelling is accepted
    on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthenticatedUser(BaseModel):
    """
    Represents the caller of a protected request.

    This model is populated from verified token claims by the request
    gate and made available to route handlers via dependency injection.
    The id is the only value data access may be scoped to.
    """

    id: str = Field(..., description="Account ID (token subject)")
    username: Optional[str] = Field(None, description="Username claim")
    email: Optional[str] = Field(None, description="Email claim")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
