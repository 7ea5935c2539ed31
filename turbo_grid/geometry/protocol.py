#!/usr/bin/env python3
"""
Geometry capability protocol for turbo_grid.

A geometry is anything that can name its boundaries. Variants satisfy the
capability structurally, so a new geometry does not have to inherit from
the ``Geometry`` ABC to be accepted by code typed against the protocol.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

Boundary = str
"""Name of a domain face, e.g. ``"x_min"``."""


class GeometryType(Enum):
    """
    Enumeration of supported geometry types.

    Attributes:
        CARTESIAN: Axis-aligned rectangular box
    """

    CARTESIAN = "cartesian"


@runtime_checkable
class GeometryProtocol(Protocol):
    """
    Protocol that all geometry objects must satisfy.

    Methods:
        - boundaries() - Set of boundary names of the domain
    """

    def boundaries(self) -> frozenset[Boundary]:
        """Return the names of the domain boundaries."""
        ...


def is_geometry(obj: object) -> bool:
    """Check whether an object provides the geometry capability."""
    return isinstance(obj, GeometryProtocol)


def validate_geometry(obj: object) -> None:
    """
    Validate that an object provides the geometry capability.

    Raises:
        TypeError: If ``obj`` has no ``boundaries()`` method or it does not
            return a set of strings.
    """
    if not is_geometry(obj):
        raise TypeError(f"{type(obj).__name__} does not implement GeometryProtocol (missing boundaries())")

    names = obj.boundaries()
    if not isinstance(names, (set, frozenset)):
        raise TypeError(f"{type(obj).__name__}.boundaries() must return a set, got {type(names).__name__}")
    if not all(isinstance(name, str) for name in names):
        raise TypeError(f"{type(obj).__name__}.boundaries() must contain only strings")
