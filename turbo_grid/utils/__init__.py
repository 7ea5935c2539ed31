"""
turbo_grid utilities.

Organization:
- exceptions: Structured error classes
- turbo_logging/: Logging manager and helpers
"""

from .exceptions import GeometryError, InvalidDomainExtentsError, UnknownBoundaryError, is_finite_real
from .turbo_logging import configure_logging, get_logger

__all__ = [
    "GeometryError",
    "InvalidDomainExtentsError",
    "UnknownBoundaryError",
    "configure_logging",
    "get_logger",
    "is_finite_real",
]
