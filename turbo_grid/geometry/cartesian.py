"""
Cartesian geometry for turbo_grid.

CartesianGeometry describes an axis-aligned box

    D = [x_min, x_max] x [y_min, y_max] x [z_min, z_max]

with six named boundary faces. It only holds and validates the extents; grid
generation and boundary condition application live with the consumers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from turbo_grid.utils.exceptions import InvalidDomainExtentsError, UnknownBoundaryError, is_finite_real

from .base import Geometry
from .boundary_names import AXIS_NAMES, cartesian_boundary_set, standard_boundary_names
from .protocol import GeometryType

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .protocol import Boundary


class CartesianGeometry(Geometry):
    """
    Axis-aligned rectangular domain in three dimensions.

    Extents are stored exactly as given. Lengths are recomputed on every
    access. The instance is immutable: assigning or deleting an attribute
    raises ``AttributeError``.

    Attributes:
        x_min, x_max, y_min, y_max, z_min, z_max: Domain extents
        Lx, Ly, Lz: Domain lengths along each axis (always > 0)

    Example:
        >>> geom = CartesianGeometry(0.0, 1.0, -1.0, 1.0, 4.0, 5.5)
        >>> geom.Lx, geom.Ly, geom.Lz
        (1.0, 2.0, 1.5)
        >>> "z_max" in geom.boundaries()
        True
    """

    __slots__ = ("_x_min", "_x_max", "_y_min", "_y_max", "_z_min", "_z_max", "_boundaries")

    def __init__(self, x_min, x_max, y_min, y_max, z_min, z_max):
        """
        Construct a CartesianGeometry from its domain extents.

        Args:
            x_min: Minimum x-coordinate
            x_max: Maximum x-coordinate
            y_min: Minimum y-coordinate
            y_max: Maximum y-coordinate
            z_min: Minimum z-coordinate
            z_max: Maximum z-coordinate

        Raises:
            InvalidDomainExtentsError: If any minimum is not strictly less than
                its maximum, or an extent is not a finite real number. Every
                offending axis is reported.
        """
        extents = {"x": (x_min, x_max), "y": (y_min, y_max), "z": (z_min, z_max)}
        invalid_axes = [
            axis
            for axis, (lo, hi) in extents.items()
            if not (is_finite_real(lo) and is_finite_real(hi)) or lo >= hi
        ]
        if invalid_axes:
            raise InvalidDomainExtentsError(extents, invalid_axes, component=type(self).__name__)

        self._x_min = x_min
        self._x_max = x_max
        self._y_min = y_min
        self._y_max = y_max
        self._z_min = z_min
        self._z_max = z_max
        self._boundaries = cartesian_boundary_set(3)
        self._freeze()

    # ============================================================================
    # Geometry interface
    # ============================================================================

    @property
    def dimension(self) -> int:
        return 3

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.CARTESIAN

    def boundaries(self) -> frozenset[Boundary]:
        """
        Get the boundaries of the domain.

        Returns:
            Set of boundary names: x_min, x_max, y_min, y_max, z_min, z_max.
        """
        return self._boundaries

    # ============================================================================
    # Extents
    # ============================================================================

    @property
    def x_min(self):
        """Minimum x-coordinate of the domain."""
        return self._x_min

    @property
    def x_max(self):
        """Maximum x-coordinate of the domain."""
        return self._x_max

    @property
    def y_min(self):
        """Minimum y-coordinate of the domain."""
        return self._y_min

    @property
    def y_max(self):
        """Maximum y-coordinate of the domain."""
        return self._y_max

    @property
    def z_min(self):
        """Minimum z-coordinate of the domain."""
        return self._z_min

    @property
    def z_max(self):
        """Maximum z-coordinate of the domain."""
        return self._z_max

    # ============================================================================
    # Lengths
    # ============================================================================

    @property
    def Lx(self):
        """Domain length in the x direction."""
        return self._x_max - self._x_min

    @property
    def Ly(self):
        """Domain length in the y direction."""
        return self._y_max - self._y_min

    @property
    def Lz(self):
        """Domain length in the z direction."""
        return self._z_max - self._z_min

    @property
    def lengths(self) -> tuple:
        """Domain lengths ``(Lx, Ly, Lz)``."""
        return (self.Lx, self.Ly, self.Lz)

    def get_bounds(self) -> tuple[NDArray, NDArray]:
        """
        Return bounding box of the domain.

        Returns:
            (min_coords, max_coords) tuple of arrays of shape (3,)

        Examples:
            >>> geom = CartesianGeometry(0.0, 1.0, 0.0, 2.0, 0.0, 3.0)
            >>> min_coords, max_coords = geom.get_bounds()
            >>> max_coords
            array([1., 2., 3.])
        """
        min_coords = np.array([self._x_min, self._y_min, self._z_min], dtype=float)
        max_coords = np.array([self._x_max, self._y_max, self._z_max], dtype=float)
        return min_coords, max_coords

    def resolve_boundary(self, name: str) -> Boundary:
        """
        Map a boundary name or alias onto its canonical name.

        Args:
            name: Canonical name (``"x_min"``) or alias (``"left"``)

        Returns:
            Canonical boundary name

        Raises:
            UnknownBoundaryError: If the name is not a boundary of this domain
        """
        if name in self._boundaries:
            return name

        aliases = standard_boundary_names(self.dimension)
        if name in aliases:
            return aliases[name]

        raise UnknownBoundaryError(name, [*self._boundaries, *aliases], component=type(self).__name__)

    # ============================================================================
    # Value semantics
    # ============================================================================

    def _extents(self) -> tuple:
        return (self._x_min, self._x_max, self._y_min, self._y_max, self._z_min, self._z_max)

    def __eq__(self, other):
        if not isinstance(other, CartesianGeometry):
            return NotImplemented
        return self._extents() == other._extents()

    def __hash__(self):
        return hash(self._extents())

    def __repr__(self) -> str:
        names = [f"{axis}_{side}" for axis in AXIS_NAMES for side in ("min", "max")]
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(names, self._extents(), strict=True))
        return f"{type(self).__name__}({fields})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self
