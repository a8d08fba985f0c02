"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .dependencies import ServiceContainer, get_container
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.items.routes import router as items_router

logger = logging.getLogger(__name__)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        container: Service container to serve requests from. Defaults to
            the process-wide container built from environment settings.

    Returns:
        Configured FastAPI instance
    """
    container = container or get_container()
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Runs startup and shutdown logic.
        """
        # Startup
        logger.info(
            "Starting %s %s (storage=%s)",
            settings.app_name,
            settings.app_version,
            settings.storage_backend,
        )
        if settings.uses_development_secret:
            logger.warning(
                "JWT_SECRET is not set; signing tokens with the development secret"
            )
        yield
        # Shutdown
        logger.info("Shutting down %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Multi-user shopping list API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.dependency_overrides[get_container] = lambda: container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(items_router, prefix="/api/items", tags=["items"])

    return app


# Application instance for uvicorn
app = create_app()
