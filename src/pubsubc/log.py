"""structlog setup for the CLI."""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Route structlog output to stdout, dropping debug events unless *verbose*."""
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=False),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
