"""
Standard boundary names for rectangular domains.

Canonical names are ``<axis>_min`` / ``<axis>_max``. The human-friendly
aliases (left/right, bottom/top, front/back) map onto them.
"""

from __future__ import annotations

AXIS_NAMES = ("x", "y", "z")


def _axis_name(index: int) -> str:
    return AXIS_NAMES[index] if index < 3 else f"dim{index}"


def standard_boundary_names(dimension: int) -> dict[str, str]:
    """
    Create standard boundary name mappings for rectangular domains.

    Args:
        dimension: Spatial dimension

    Returns:
        Dictionary mapping standard names to axis-specific names

    Raises:
        ValueError: If dimension is not positive
    """
    if dimension < 1:
        raise ValueError(f"dimension must be positive, got {dimension}")

    if dimension == 1:
        return {"left": "x_min", "right": "x_max"}
    elif dimension == 2:
        return {
            "left": "x_min",
            "right": "x_max",
            "bottom": "y_min",
            "top": "y_max",
        }
    elif dimension == 3:
        return {
            "left": "x_min",
            "right": "x_max",
            "bottom": "y_min",
            "top": "y_max",
            "front": "z_min",
            "back": "z_max",
        }
    else:
        # Beyond 3D there are no conventional aliases
        names = {}
        for i in range(dimension):
            axis = _axis_name(i)
            names[f"{axis}_min"] = f"{axis}_min"
            names[f"{axis}_max"] = f"{axis}_max"
        return names


def cartesian_boundary_set(dimension: int) -> frozenset[str]:
    """Canonical boundary names of a ``dimension``-D box."""
    if dimension < 1:
        raise ValueError(f"dimension must be positive, got {dimension}")
    return frozenset(f"{_axis_name(i)}_{side}" for i in range(dimension) for side in ("min", "max"))
