"""
Logging utilities for turbo_grid.

Named ``turbo_logging`` so it does not shadow Python's stdlib ``logging``.

Usage:
    >>> from turbo_grid.utils.turbo_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Loading domain configuration...")
"""

from __future__ import annotations

from .logger import (
    GridFormatter,
    GridLogger,
    configure_logging,
    get_logger,
    log_domain_summary,
    log_validation_error,
)

__all__ = [
    "GridFormatter",
    "GridLogger",
    "configure_logging",
    "get_logger",
    "log_domain_summary",
    "log_validation_error",
]
