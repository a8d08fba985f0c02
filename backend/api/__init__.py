"""
HTTP layer of the Shopping List service.

`app` is the process-wide application served by uvicorn; tests and
embedders build their own with `create_app(container)`.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
