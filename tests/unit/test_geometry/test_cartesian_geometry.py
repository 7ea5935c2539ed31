"""
Unit tests for CartesianGeometry.

Tests construction-time validation of the domain extents, the read-only
accessors (extents, lengths, boundaries) and the immutable value semantics.
"""

from __future__ import annotations

import copy

import pytest

import numpy as np

from turbo_grid.geometry import CartesianGeometry, Geometry, GeometryProtocol, GeometryType
from turbo_grid.utils.exceptions import GeometryError, InvalidDomainExtentsError, UnknownBoundaryError

pytestmark = pytest.mark.unit

EXPECTED_BOUNDARIES = {"x_min", "x_max", "y_min", "y_max", "z_min", "z_max"}


class TestCartesianGeometryConstruction:
    """Test construction and extent validation."""

    def test_extents_stored_verbatim(self, reference_extents):
        x_min, x_max, y_min, y_max, z_min, z_max = reference_extents
        geom = CartesianGeometry(x_min, x_max, y_min, y_max, z_min, z_max)

        assert geom.x_min == x_min
        assert geom.x_max == x_max
        assert geom.y_min == y_min
        assert geom.y_max == y_max
        assert geom.z_min == z_min
        assert geom.z_max == z_max

    def test_integer_extents_are_not_converted(self):
        geom = CartesianGeometry(0, 2, 0, 3, 0, 4)

        assert geom.x_max == 2
        assert isinstance(geom.x_max, int)
        assert geom.lengths == (2, 3, 4)

    def test_numpy_scalar_extents(self):
        geom = CartesianGeometry(np.float64(0.0), np.float64(1.0), np.float32(-1.0), np.float32(1.0), 4, 5)

        assert geom.Lx == 1.0
        assert geom.Ly == 2.0

    @pytest.mark.parametrize(
        ("extents", "axis"),
        [
            ((1.0, 0.0, -1.0, 1.0, 4.0, 5.5), "x"),
            ((0.0, 1.0, 1.0, -1.0, 4.0, 5.5), "y"),
            ((0.0, 1.0, -1.0, 1.0, 5.5, 4.0), "z"),
        ],
    )
    def test_reversed_axis_raises(self, extents, axis):
        with pytest.raises(InvalidDomainExtentsError) as exc_info:
            CartesianGeometry(*extents)

        assert exc_info.value.invalid_axes == [axis]

    @pytest.mark.parametrize(
        "extents",
        [
            (0.0, 0.0, -1.0, 1.0, 4.0, 5.5),
            (0.0, 1.0, 1.0, 1.0, 4.0, 5.5),
            (0.0, 1.0, -1.0, 1.0, 4.0, 4.0),
        ],
    )
    def test_equal_min_max_raises(self, extents):
        with pytest.raises(InvalidDomainExtentsError):
            CartesianGeometry(*extents)

    def test_all_invalid_axes_reported(self):
        with pytest.raises(InvalidDomainExtentsError) as exc_info:
            CartesianGeometry(1.0, 0.0, 1.0, -1.0, 5.5, 4.0)

        assert exc_info.value.invalid_axes == ["x", "y", "z"]
        assert exc_info.value.error_code == "INVALID_DOMAIN_EXTENTS"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="Minimum must be less than maximum"):
            CartesianGeometry(1.0, 0.0, -1.0, 1.0, 4.0, 5.5)

    def test_error_is_geometry_error(self):
        with pytest.raises(GeometryError) as exc_info:
            CartesianGeometry(0.0, 1.0, -1.0, 1.0, 5.5, 4.0)

        assert exc_info.value.component == "CartesianGeometry"
        assert exc_info.value.diagnostic_data["z_extent"] == "[5.5, 4.0]"

    @pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_extent_raises(self, bad_value):
        with pytest.raises(InvalidDomainExtentsError) as exc_info:
            CartesianGeometry(0.0, 1.0, bad_value, 1.0, 4.0, 5.5)

        assert exc_info.value.invalid_axes == ["y"]

    @pytest.mark.parametrize("extents", [(0, 10**400, 0, 1, 0, 1), (10**400, 0, 0, 1, 0, 1), (-(10**400), 0, 0, 1, 0, 1)])
    def test_out_of_range_integer_extent_raises(self, extents):
        with pytest.raises(InvalidDomainExtentsError, match="Use finite real numbers for x_min and x_max") as exc_info:
            CartesianGeometry(*extents)

        assert exc_info.value.invalid_axes == ["x"]

    @pytest.mark.parametrize("bad_value", ["0.0", None, True])
    def test_non_real_extent_raises(self, bad_value):
        with pytest.raises(InvalidDomainExtentsError):
            CartesianGeometry(bad_value, 1.0, -1.0, 1.0, 4.0, 5.5)

    def test_negative_extents(self):
        geom = CartesianGeometry(-10.0, -5.0, -3.0, -2.0, -1.0, -0.5)

        assert geom.Lx == 5.0
        assert geom.Ly == 1.0
        assert geom.Lz == 0.5


class TestCartesianGeometryAccessors:
    """Test lengths, boundaries and derived quantities."""

    def test_domain_lengths(self, reference_geometry):
        assert reference_geometry.Lx == pytest.approx(1.0)
        assert reference_geometry.Ly == pytest.approx(2.0)
        assert reference_geometry.Lz == pytest.approx(1.5)

    def test_lengths_match_extents(self, reference_geometry):
        geom = reference_geometry

        assert geom.Lx == geom.x_max - geom.x_min
        assert geom.Ly == geom.y_max - geom.y_min
        assert geom.Lz == geom.z_max - geom.z_min

    @pytest.mark.parametrize(
        "extents",
        [
            (0.0, 1.0, -1.0, 1.0, 4.0, 5.5),
            (-1e6, 1e6, 0.0, 1e-9, 3.0, 3.5),
            (1.0, 1.0 + 1e-12, -2.0, 7.0, -100.0, 100.0),
        ],
    )
    def test_lengths_strictly_positive(self, extents):
        geom = CartesianGeometry(*extents)

        assert geom.Lx > 0.0
        assert geom.Ly > 0.0
        assert geom.Lz > 0.0

    def test_lengths_tuple(self, reference_geometry):
        assert reference_geometry.lengths == (1.0, 2.0, 1.5)

    def test_boundaries(self, reference_geometry):
        assert reference_geometry.boundaries() == EXPECTED_BOUNDARIES

    @pytest.mark.parametrize("extents", [(0.0, 1.0, 0.0, 1.0, 0.0, 1.0), (-5.0, 3.0, 2.0, 9.0, -0.5, 0.5)])
    def test_boundaries_independent_of_extents(self, extents):
        assert CartesianGeometry(*extents).boundaries() == EXPECTED_BOUNDARIES

    def test_accessors_idempotent(self, reference_geometry):
        geom = reference_geometry
        first = (geom.x_min, geom.x_max, geom.y_min, geom.y_max, geom.z_min, geom.z_max, geom.Lx, geom.Ly, geom.Lz)

        for _ in range(3):
            again = (geom.x_min, geom.x_max, geom.y_min, geom.y_max, geom.z_min, geom.z_max, geom.Lx, geom.Ly, geom.Lz)
            assert again == first
            assert geom.boundaries() == EXPECTED_BOUNDARIES

    def test_get_bounds(self, reference_geometry):
        min_coords, max_coords = reference_geometry.get_bounds()

        np.testing.assert_array_equal(min_coords, [0.0, -1.0, 4.0])
        np.testing.assert_array_equal(max_coords, [1.0, 1.0, 5.5])

    def test_get_bounds_returns_copies(self, reference_geometry):
        min_coords, _ = reference_geometry.get_bounds()
        min_coords[0] = 100.0

        assert reference_geometry.x_min == 0.0
        assert reference_geometry.get_bounds()[0][0] == 0.0

    def test_dimension_and_type(self, reference_geometry):
        assert reference_geometry.dimension == 3
        assert reference_geometry.geometry_type is GeometryType.CARTESIAN

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("left", "x_min"),
            ("right", "x_max"),
            ("bottom", "y_min"),
            ("top", "y_max"),
            ("front", "z_min"),
            ("back", "z_max"),
            ("z_max", "z_max"),
        ],
    )
    def test_resolve_boundary(self, reference_geometry, name, expected):
        assert reference_geometry.resolve_boundary(name) == expected

    def test_resolve_unknown_boundary(self, reference_geometry):
        with pytest.raises(UnknownBoundaryError, match="Unknown boundary 'inlet'") as exc_info:
            reference_geometry.resolve_boundary("inlet")

        assert isinstance(exc_info.value, KeyError)
        assert "left" in exc_info.value.known_names
        assert "x_min" in exc_info.value.known_names


class TestCartesianGeometryImmutability:
    """Test that instances cannot be modified after construction."""

    def test_extent_assignment_rejected(self, reference_geometry):
        with pytest.raises(AttributeError):
            reference_geometry.x_min = 0.5

        assert reference_geometry.x_min == 0.0

    def test_private_assignment_rejected(self, reference_geometry):
        with pytest.raises(AttributeError):
            reference_geometry._x_max = -3.0

        assert reference_geometry.Lx == 1.0

    def test_new_attribute_rejected(self, reference_geometry):
        with pytest.raises(AttributeError):
            reference_geometry.label = "channel"

    def test_deletion_rejected(self, reference_geometry):
        with pytest.raises(AttributeError):
            del reference_geometry._y_min

    def test_boundaries_set_cannot_be_mutated(self, reference_geometry):
        boundaries = reference_geometry.boundaries()

        assert isinstance(boundaries, frozenset)
        with pytest.raises(AttributeError):
            boundaries.add("w_min")

    def test_copy_returns_same_instance(self, reference_geometry):
        assert copy.copy(reference_geometry) is reference_geometry
        assert copy.deepcopy(reference_geometry) is reference_geometry


class TestCartesianGeometryValueSemantics:
    """Test equality, hashing and representation."""

    def test_equal_extents_compare_equal(self, reference_extents):
        assert CartesianGeometry(*reference_extents) == CartesianGeometry(*reference_extents)

    def test_different_extents_not_equal(self, reference_geometry):
        assert reference_geometry != CartesianGeometry(0.0, 2.0, -1.0, 1.0, 4.0, 5.5)

    def test_not_equal_to_other_types(self, reference_geometry, reference_extents):
        assert reference_geometry != reference_extents

    def test_hash_consistent_with_equality(self, reference_extents):
        geometries = {CartesianGeometry(*reference_extents), CartesianGeometry(*reference_extents)}

        assert len(geometries) == 1

    def test_repr(self, reference_geometry):
        assert repr(reference_geometry) == (
            "CartesianGeometry(x_min=0.0, x_max=1.0, y_min=-1.0, y_max=1.0, z_min=4.0, z_max=5.5)"
        )


class TestCartesianGeometryCapability:
    """Test CartesianGeometry against the geometry contract."""

    def test_is_geometry(self, reference_geometry):
        assert isinstance(reference_geometry, Geometry)

    def test_satisfies_protocol(self, reference_geometry):
        assert isinstance(reference_geometry, GeometryProtocol)

    def test_abstract_base_not_instantiable(self):
        with pytest.raises(TypeError):
            Geometry()
