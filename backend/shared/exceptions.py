"""
Base exception classes for the Shopping List backend.

Each module defines its own exceptions on top of these bases. A base
fixes the HTTP status its subclasses are reported with, so the API
layer never has to know about module exceptions individually.
"""

from typing import Any, Optional


class ShoppingListError(Exception):
    """
    Base exception for all Shopping List errors.

    Raised directly it means an internal failure: the API reports it as
    a generic 500 and keeps the message server-side.
    """

    status_code: int = 500
    headers: Optional[dict[str, str]] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    @property
    def is_client_error(self) -> bool:
        return self.status_code < 500

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the JSON error body."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ShoppingListError):
    """Input was missing, malformed or conflicts with existing data."""

    status_code = 400


class AuthenticationError(ShoppingListError):
    """The caller could not be identified (key, token or credentials)."""

    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(ShoppingListError):
    """Resource not found, or not visible to the caller."""

    status_code = 404
