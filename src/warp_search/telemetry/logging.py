"""Logging setup for the CLI and embedding hosts."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Route ``warp_search.*`` loggers through a rich console handler."""
    logger = logging.getLogger("warp_search")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    return logger
