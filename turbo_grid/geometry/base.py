"""
Geometry base class for turbo_grid.

All methods of a geometry, other than the constructor, are getters: geometry
objects are immutable once constructed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol import Boundary, GeometryType


class Geometry(ABC):
    """
    Abstract base class for turbo_grid geometries.

    Subclasses store their own state and expose it read-only. Attribute
    assignment is refused once ``_freeze()`` has been called at the end of
    ``__init__``.

    Examples:
        >>> from turbo_grid.geometry import CartesianGeometry
        >>> geom = CartesianGeometry(0.0, 1.0, 0.0, 1.0, 0.0, 1.0)
        >>> isinstance(geom, Geometry)
        True
        >>> sorted(geom.boundaries())
        ['x_max', 'x_min', 'y_max', 'y_min', 'z_max', 'z_min']
    """

    __slots__ = ("_frozen",)

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Spatial dimension of the geometry."""
        ...

    @property
    @abstractmethod
    def geometry_type(self) -> GeometryType:
        """Type of geometry."""
        ...

    @abstractmethod
    def boundaries(self) -> frozenset[Boundary]:
        """
        Get the set of boundaries for the geometry.

        Returns:
            Set of boundary names.
        """
        ...

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")
        object.__delattr__(self, name)
