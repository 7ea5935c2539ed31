"""
Geometry package for turbo_grid: domain descriptions with named boundaries.

Key Components:
- GeometryProtocol: Capability interface (a geometry names its boundaries)
- Geometry: Abstract base class for immutable geometry variants
- CartesianGeometry: Axis-aligned box with six named faces
- standard_boundary_names: Alias tables (left/right/...) for rectangular domains
"""

from __future__ import annotations

from .base import Geometry
from .boundary_names import cartesian_boundary_set, standard_boundary_names
from .cartesian import CartesianGeometry
from .protocol import Boundary, GeometryProtocol, GeometryType, is_geometry, validate_geometry

__all__ = [
    "Boundary",
    "CartesianGeometry",
    "Geometry",
    "GeometryProtocol",
    "GeometryType",
    "cartesian_boundary_set",
    "is_geometry",
    "standard_boundary_names",
    "validate_geometry",
]
