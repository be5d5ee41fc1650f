"""Structured logging for the API and CLI.

Log lines go to stderr so CLI commands can print generated code and JSON
on stdout untouched. ``PUNKTUAL_ENV`` picks the renderer: JSON in
production, plain key/value text under test, coloured console output on
a terminal otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog._config import BoundLoggerLazyProxy
from structlog.typing import FilteringBoundLogger, Processor

from punktual.config import get_settings


def _renderer(env: str) -> Processor:
    if env == "production":
        return structlog.processors.JSONRenderer()
    if env == "test":
        return structlog.processors.KeyValueRenderer(key_order=["event", "logger"])
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: Optional[str] = None, env: Optional[str] = None) -> None:
    """Configure structlog and the stdlib root logger (uvicorn, httpx).

    ``level`` and ``env`` default to the settings values.
    """
    settings = get_settings()
    env = env or settings.punktual_env
    log_level = getattr(logging, (level or settings.punktual_log_level).upper(), logging.INFO)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]
    if env != "test":
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if env == "production":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(env))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a lazily-configured logger that tags events with ``name``."""
    # Same lazy proxy structlog.get_logger() returns; a ``logger=`` keyword
    # would clash with wrap_logger's own ``logger`` parameter.
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())
