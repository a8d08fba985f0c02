"""
Exception handlers.

Turns exceptions into JSON error responses. Every body has the shape
{"error": <code>, "message": <text>, "details": {...}}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import ShoppingListError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": "INTERNAL_ERROR",
    "message": "An unexpected error occurred",
    "details": {},
}


def format_validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ShoppingListError)
    async def app_error_handler(request: Request, exc: ShoppingListError) -> JSONResponse:
        if not exc.is_client_error:
            logger.error("Unhandled %s on %s: %s", exc.code, request.url.path, exc.message)
            return JSONResponse(status_code=exc.status_code, content=INTERNAL_ERROR_BODY)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "VALIDATION_ERROR",
                "message": "Invalid request",
                "details": {"errors": format_validation_details(exc)},
            },
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error handling %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
