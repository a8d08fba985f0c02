#!/usr/bin/env python
"""
Run the Shopping List API server.

Usage:
    python run_api.py
    python run_api.py --reload                # Development mode
    python run_api.py --log-level DEBUG
    STORAGE_BACKEND=supabase python run_api.py
"""

import argparse
import logging
from typing import Optional

import uvicorn

from shared.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Root logger setup shared by the app loggers and uvicorn's."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the Shopping List API with uvicorn")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", help="Interface to bind (default from HOST)")
    parser.add_argument("--port", type=int, help="Port to bind (default from PORT)")
    parser.add_argument("--log-level", help="Override LOG_LEVEL, e.g. DEBUG")
    return parser


def main(argv: Optional[list[str]] = None, settings: Optional[Settings] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    log_level = args.log_level or settings.log_level

    configure_logging(log_level)
    logging.getLogger(__name__).info(
        "Serving %s on %s:%s",
        settings.app_name,
        args.host or settings.host,
        args.port or settings.port,
    )

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
