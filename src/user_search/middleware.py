"""Middleware setup for the FastAPI application."""

import logging
from collections.abc import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def normalize_origins(origins: Iterable[str]) -> list[str]:
    """Strip trailing slashes and blanks from configured origins, keeping order."""
    cleaned = (origin.strip().rstrip("/") for origin in origins)
    return list(dict.fromkeys(origin for origin in cleaned if origin))


def setup_middleware(app: FastAPI, cors_origins: Iterable[str] = ()) -> None:
    """Allow read-only cross-origin requests from the configured origins.

    Args:
        app: FastAPI application instance
        cors_origins: Origins allowed to call the API; none leaves CORS off
    """
    allowed_origins = normalize_origins(cors_origins)
    if not allowed_origins:
        logger.info("CORS disabled: no origins configured")
        return

    # The API only serves GET, and carries no credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["GET"],
    )

    logger.info("CORS enabled for origins: %s", allowed_origins)
