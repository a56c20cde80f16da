"""
Test suite for hex coordinate math operations.

This module tests the hexagonal coordinate system used by the generators
and by renderers for hit-testing:
- Axial coordinates (q, r) and their "q,r" string ids
- Cube coordinates (x, y, z) for rounding
- Distance calculations and neighbor finding
- Pixel conversion (flat-top layout)
- Rectangular and circular grid enumeration
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexworld.utils.hex_math import (
    HexCoord,
    HexLayout,
    axial_to_cube,
    axial_to_pixel,
    circular_grid,
    cube_to_axial,
    hex_corners,
    hex_distance,
    hex_equals,
    hex_neighbors,
    hex_round,
    hex_to_id,
    hex_to_pixel,
    hexes_in_range,
    id_to_hex,
    is_point_in_hex,
    pixel_to_axial,
    pixel_to_hex,
    rectangular_grid,
)


class TestHexCoord:
    """Test the HexCoord dataclass."""

    def test_hex_coord_equality(self) -> None:
        """Test hex coordinate equality."""
        assert HexCoord(q=1, r=2) == HexCoord(q=1, r=2)
        assert HexCoord(q=1, r=2) != HexCoord(q=2, r=1)
        assert hex_equals(HexCoord(q=-1, r=4), HexCoord(q=-1, r=4))

    def test_hex_coord_hash(self) -> None:
        """Test hex coordinates can be hashed (for use in sets/dicts)."""
        coord_set = {HexCoord(q=1, r=2), HexCoord(q=1, r=2)}
        assert len(coord_set) == 1

    def test_hex_coord_id_property(self) -> None:
        assert HexCoord(q=-3, r=7).id == "-3,7"


class TestHexIds:
    """Test string ids used as tile map keys."""

    def test_hex_to_id(self) -> None:
        assert hex_to_id(HexCoord(q=3, r=-2)) == "3,-2"

    def test_id_to_hex(self) -> None:
        assert id_to_hex("3,-2") == HexCoord(q=3, r=-2)

    @given(q=st.integers(min_value=-10_000, max_value=10_000), r=st.integers(-10_000, 10_000))
    def test_id_roundtrip(self, q: int, r: int) -> None:
        """Property-based test: id_to_hex(hex_to_id(c)) == c."""
        coord = HexCoord(q=q, r=r)
        assert id_to_hex(hex_to_id(coord)) == coord

    @pytest.mark.parametrize("bad_id", ["", "1", "1,2,3", "a,b", "1.5,2"])
    def test_malformed_id_raises_error(self, bad_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid hex id"):
            id_to_hex(bad_id)


class TestCoordinateConversion:
    """Test conversion between axial and cube coordinates."""

    def test_axial_to_cube_positive(self) -> None:
        """Test conversion with positive coordinates."""
        x, y, z = axial_to_cube(HexCoord(q=1, r=2))
        assert (x, y, z) == (1, -3, 2)
        # Verify cube coordinate constraint: x + y + z = 0
        assert x + y + z == 0

    def test_roundtrip_multiple_coords(self) -> None:
        """Test roundtrip conversion for multiple coordinates."""
        test_coords = [
            HexCoord(q=0, r=0),
            HexCoord(q=1, r=1),
            HexCoord(q=-1, r=-1),
            HexCoord(q=10, r=-5),
            HexCoord(q=-7, r=3),
        ]
        for original in test_coords:
            assert cube_to_axial(*axial_to_cube(original)) == original


class TestHexDistance:
    """Test distance calculations between hexes."""

    def test_distance_to_self(self) -> None:
        coord = HexCoord(q=5, r=3)
        assert hex_distance(coord, coord) == 0

    def test_distance_symmetric(self) -> None:
        hex_a = HexCoord(q=1, r=2)
        hex_b = HexCoord(q=4, r=-1)
        assert hex_distance(hex_a, hex_b) == hex_distance(hex_b, hex_a)

    def test_distance_known_values(self) -> None:
        """Test distance with known calculated values."""
        test_cases = [
            (HexCoord(q=0, r=0), HexCoord(q=1, r=-1), 1),
            (HexCoord(q=0, r=0), HexCoord(q=2, r=2), 4),
            (HexCoord(q=2, r=0), HexCoord(q=-1, r=3), 3),
            (HexCoord(q=-2, r=-3), HexCoord(q=1, r=2), 8),
            (HexCoord(q=0, r=0), HexCoord(q=100, r=50), 150),
        ]
        for hex_a, hex_b, expected_distance in test_cases:
            assert hex_distance(hex_a, hex_b) == expected_distance

    def test_distance_is_integer(self) -> None:
        assert isinstance(hex_distance(HexCoord(q=0, r=0), HexCoord(q=3, r=-1)), int)


class TestHexNeighbors:
    """Test finding adjacent hexes."""

    def test_neighbors_fixed_order(self) -> None:
        """Neighbors come back right, top-right, top-left, left, bottom-left, bottom-right."""
        assert hex_neighbors(HexCoord(q=0, r=0)) == [
            HexCoord(q=1, r=0),
            HexCoord(q=1, r=-1),
            HexCoord(q=0, r=-1),
            HexCoord(q=-1, r=0),
            HexCoord(q=-1, r=1),
            HexCoord(q=0, r=1),
        ]

    def test_neighbors_distance(self) -> None:
        coord = HexCoord(q=-1, r=-1)
        for neighbor in hex_neighbors(coord):
            assert hex_distance(coord, neighbor) == 1

    def test_neighbor_reciprocity(self) -> None:
        """Test that if B is a neighbor of A, then A is a neighbor of B."""
        hex_a = HexCoord(q=3, r=-2)
        for hex_b in hex_neighbors(hex_a):
            assert hex_a in hex_neighbors(hex_b)


class TestPixelConversion:
    """Test flat-top axial <-> pixel conversion."""

    def test_origin_maps_to_origin(self) -> None:
        assert axial_to_pixel(0, 0, 30) == (0.0, 0.0)

    def test_known_pixel_positions(self) -> None:
        x, y = hex_to_pixel(HexCoord(q=1, r=0), size=30)
        assert x == pytest.approx(30 * math.sqrt(3))
        assert y == pytest.approx(0.0)

        x, y = hex_to_pixel(HexCoord(q=0, r=2), size=10)
        assert x == pytest.approx(10 * math.sqrt(3))
        assert y == pytest.approx(30.0)

    @given(q=st.integers(-500, 500), r=st.integers(-500, 500))
    def test_pixel_roundtrip(self, q: int, r: int) -> None:
        """Property-based test: the centre of a hex maps back to that hex."""
        coord = HexCoord(q=q, r=r)
        assert pixel_to_hex(hex_to_pixel(coord, 30), 30) == coord

    def test_pixel_near_centre_rounds_to_hex(self) -> None:
        x, y = hex_to_pixel(HexCoord(q=2, r=-1), 30)
        assert pixel_to_axial(x + 5, y - 4, 30) == HexCoord(q=2, r=-1)

    def test_hex_round_keeps_cube_constraint(self) -> None:
        rounded = hex_round(0.4, 0.4)
        assert rounded.q + rounded.r + (-rounded.q - rounded.r) == 0
        assert rounded in {HexCoord(q=0, r=0), HexCoord(q=1, r=0), HexCoord(q=0, r=1)}

    def test_hex_round_rounds_halves_up(self) -> None:
        assert hex_round(0.5, 0.0) == HexCoord(q=1, r=0)
        assert hex_round(0.0, 1.5) == HexCoord(q=0, r=2)

    def test_is_point_in_hex(self) -> None:
        center = hex_to_pixel(HexCoord(q=1, r=1), 30)
        assert is_point_in_hex((center[0] + 3, center[1] + 3), center, 30)
        assert not is_point_in_hex((center[0] + 60, center[1]), center, 30)

    def test_layout_matches_functions(self) -> None:
        layout = HexLayout(size=12)
        assert layout.axial_to_pixel(3, -1) == axial_to_pixel(3, -1, 12)
        assert layout.pixel_to_axial(*layout.axial_to_pixel(3, -1)) == HexCoord(q=3, r=-1)
        assert layout.corners() == hex_corners(12)


class TestHexCorners:
    def test_six_corners_at_radius(self) -> None:
        corners = hex_corners(20)
        assert len(corners) == 6
        for x, y in corners:
            assert math.hypot(x, y) == pytest.approx(20)

    def test_first_corner_at_thirty_degrees(self) -> None:
        x, y = hex_corners(1)[0]
        assert x == pytest.approx(math.sqrt(3) / 2)
        assert y == pytest.approx(0.5)


class TestGrids:
    """Test rectangular and circular grid enumeration."""

    def test_rectangular_grid_count(self) -> None:
        assert len(rectangular_grid(10, 10)) == 100

    def test_rectangular_grid_row_offsets(self) -> None:
        grid = rectangular_grid(3, 3)
        assert [c for c in grid if c.r == 2] == [
            HexCoord(q=-1, r=2),
            HexCoord(q=0, r=2),
            HexCoord(q=1, r=2),
        ]

    def test_rectangular_grid_empty(self) -> None:
        assert rectangular_grid(0, 5) == []
        assert rectangular_grid(5, 0) == []

    def test_circular_grid_formula(self) -> None:
        """Test the hex count formula: 3n^2 + 3n + 1."""
        for n in range(6):
            assert len(circular_grid(n)) == 3 * n * n + 3 * n + 1

    def test_circular_grid_within_radius(self) -> None:
        origin = HexCoord(q=0, r=0)
        grid = circular_grid(4)
        assert len(grid) == len(set(grid))
        assert all(hex_distance(origin, coord) <= 4 for coord in grid)

    def test_circular_grid_negative_radius(self) -> None:
        assert circular_grid(-1) == []


class TestHexesInRange:
    """Test finding all hexes within a given range."""

    def test_range_zero(self) -> None:
        center = HexCoord(q=5, r=3)
        assert hexes_in_range(center, n=0) == [center]

    def test_range_all_within_distance(self) -> None:
        center = HexCoord(q=2, r=-1)
        hexes = hexes_in_range(center, n=3)
        assert len(hexes) == 37
        for hex_coord in hexes:
            assert hex_distance(center, hex_coord) <= 3

    def test_range_contains_neighbors(self) -> None:
        center = HexCoord(q=1, r=1)
        hexes = hexes_in_range(center, n=1)
        for neighbor in hex_neighbors(center):
            assert neighbor in hexes

    def test_negative_range_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Range n must be non-negative"):
            hexes_in_range(HexCoord(q=0, r=0), n=-1)
