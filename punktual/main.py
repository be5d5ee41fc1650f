"""Punktual application entry point.

Quick Start:
    $ punktual serve             # Start the API server
    $ punktual links event.json  # Print calendar links for an event

Environment:
    PUNKTUAL_ENV                 # development/production (default: development)
    PUNKTUAL_LOG_LEVEL           # DEBUG/INFO/WARNING/ERROR (default: INFO)
    NEXT_PUBLIC_BASE_URL         # public site URL (default: https://punktual.co)
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from punktual import __version__
from punktual.api.routes import router
from punktual.config import get_settings
from punktual.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    setup_logging()
    app = FastAPI(
        title="Punktual",
        description="Add-to-calendar links and embeddable button code",
        version=__version__,
    )
    app.include_router(router, prefix="/api")
    logger.info("app_created", base_url=get_settings().base_url)
    return app


def run() -> None:
    """Serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.api_host, port=settings.api_port)
