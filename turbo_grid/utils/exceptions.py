"""
Exception classes for turbo_grid with helpful error messages.

Every error carries the component that raised it, an optional suggested
action, a machine-readable error code and a dictionary of diagnostic values,
all folded into the exception message.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


class GeometryError(Exception):
    """
    Base exception for geometry errors with context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component that raised the error
    - Suggested action for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "Geometry"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDomainExtentsError(GeometryError, ValueError):
    """
    Raised when domain extents do not describe a valid box.

    A box is valid when every minimum is finite and strictly less than its
    maximum. ``invalid_axes`` lists every axis that failed the check, in
    ``x, y, z`` order.
    """

    def __init__(
        self,
        extents: dict[str, tuple[Any, Any]],
        invalid_axes: list[str],
        component: str | None = None,
    ):
        self.extents = dict(extents)
        self.invalid_axes = list(invalid_axes)

        diagnostic_data: dict[str, Any] = {"invalid_axes": ", ".join(self.invalid_axes)}
        for axis in self.invalid_axes:
            lo, hi = self.extents[axis]
            diagnostic_data[f"{axis}_extent"] = f"[{lo}, {hi}]"

        super().__init__(
            message="Invalid domain extents. Minimum must be less than maximum.",
            component=component,
            suggested_action=_generate_extent_suggestions(self.extents, self.invalid_axes),
            error_code="INVALID_DOMAIN_EXTENTS",
            diagnostic_data=diagnostic_data,
        )


class UnknownBoundaryError(GeometryError, KeyError):
    """Raised when a boundary name is neither canonical nor a known alias."""

    def __init__(self, name: str, known_names: list[str], component: str | None = None):
        self.name = name
        self.known_names = sorted(known_names)

        super().__init__(
            message=f"Unknown boundary '{name}'",
            component=component,
            suggested_action=f"Use one of: {', '.join(self.known_names)}",
            error_code="UNKNOWN_BOUNDARY",
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return Exception.__str__(self)


def _generate_extent_suggestions(extents: dict[str, tuple[Any, Any]], invalid_axes: list[str]) -> str:
    """Generate specific suggestions for invalid extents."""
    suggestions = []

    for axis in invalid_axes:
        lo, hi = extents[axis]
        if not (is_finite_real(lo) and is_finite_real(hi)):
            suggestions.append(f"Use finite real numbers for {axis}_min and {axis}_max")
        elif lo == hi:
            suggestions.append(f"{axis}_min equals {axis}_max; give the {axis} axis a nonzero length")
        else:
            suggestions.append(f"Swap {axis}_min and {axis}_max")

    return " | ".join(suggestions)


def is_finite_real(value: Any) -> bool:
    """Check that value is a finite real number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except OverflowError:
        # Python ints beyond the double range
        return False
