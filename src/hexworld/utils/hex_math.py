"""
Hexagonal coordinate system mathematics for hexworld.

This module implements the hex coordinate operations shared by the terrain
generator, the country generator and any renderer doing hit-testing.
It supports:
- Distance calculations between hexes
- Finding adjacent hexes
- Converting between axial coordinates and pixel positions (flat-top layout)
- Enumerating rectangular and circular grids

Coordinate Systems:
-------------------
We use two coordinate systems:

1. Axial Coordinates (q, r) - for storage and representation
   - q: column coordinate
   - r: row coordinate
   - String form "q,r" is used as the map key for tiles
   - Used in HexCoord dataclass

2. Cube Coordinates (x, y, z) - for rounding and range queries
   - x, y, z: three coordinates with constraint x + y + z = 0
   - Conversion: x = q, z = r, y = -x - z

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

import math
from dataclasses import dataclass

HEX_SIZE = 30.0
"""Default hex radius in pixels."""

_SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class HexCoord:
    """
    A hexagonal coordinate using axial coordinate system.

    Attributes:
        q: Column coordinate (horizontal axis)
        r: Row coordinate (diagonal axis)

    Example:
        >>> origin = HexCoord(q=0, r=0)
        >>> neighbor = HexCoord(q=1, r=0)
        >>> hex_distance(origin, neighbor)
        1
    """

    q: int
    r: int

    def __hash__(self) -> int:
        """Make HexCoord hashable for use in sets and dicts."""
        return hash((self.q, self.r))

    @property
    def id(self) -> str:
        """String identifier used as a map key."""
        return hex_to_id(self)


def hex_to_id(coord: HexCoord) -> str:
    """
    Create the unique string ID of a hex.

    Example:
        >>> hex_to_id(HexCoord(q=3, r=-2))
        '3,-2'
    """
    return f"{coord.q},{coord.r}"


def id_to_hex(hex_id: str) -> HexCoord:
    """
    Parse a hex ID produced by :func:`hex_to_id`.

    Args:
        hex_id: String in the form "q,r"

    Returns:
        The matching HexCoord

    Raises:
        ValueError: If the ID is not two comma-separated integers

    Example:
        >>> id_to_hex("3,-2")
        HexCoord(q=3, r=-2)
    """
    parts = hex_id.split(",")
    if len(parts) != 2:
        msg = f"Invalid hex id: {hex_id!r}. Expected format: 'q,r'"
        raise ValueError(msg)
    try:
        q, r = int(parts[0]), int(parts[1])
    except ValueError as exc:
        msg = f"Invalid hex id: {hex_id!r}. Coordinates must be integers"
        raise ValueError(msg) from exc
    return HexCoord(q=q, r=r)


def hex_equals(a: HexCoord, b: HexCoord) -> bool:
    """Check if two hex coordinates are equal."""
    return a.q == b.q and a.r == b.r


def axial_to_cube(coord: HexCoord) -> tuple[int, int, int]:
    """
    Convert axial coordinates (q, r) to cube coordinates (x, y, z).

    The conversion follows:
        x = q
        z = r
        y = -x - z

    This maintains the cube coordinate constraint: x + y + z = 0

    Example:
        >>> x, y, z = axial_to_cube(HexCoord(q=1, r=2))
        >>> x, y, z
        (1, -3, 2)
    """
    x = coord.q
    z = coord.r
    y = -x - z
    return x, y, z


def cube_to_axial(x: int, y: int, z: int) -> HexCoord:  # noqa: ARG001
    """
    Convert cube coordinates (x, y, z) back to axial coordinates (q, r).

    The y parameter is accepted for API consistency with cube coordinates,
    but is not used in the conversion as it's redundant (y = -x - z).
    """
    return HexCoord(q=x, r=z)


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """
    Calculate the distance between two hexes in hex steps.

        distance = (|dq| + |dq + dr| + |dr|) / 2

    Example:
        >>> hex_distance(HexCoord(q=0, r=0), HexCoord(q=2, r=1))
        3
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


# Direction vectors for the 6 neighbors in axial coordinates (flat-top)
_NEIGHBOR_DIRECTIONS: list[tuple[int, int]] = [
    (1, 0),  # right
    (1, -1),  # top-right
    (0, -1),  # top-left
    (-1, 0),  # left
    (-1, 1),  # bottom-left
    (0, 1),  # bottom-right
]


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """
    Find all 6 adjacent hexes to the given hex.

    Neighbors are always returned in the same order: right, top-right,
    top-left, left, bottom-left, bottom-right.

    Example:
        >>> neighbors = hex_neighbors(HexCoord(q=0, r=0))
        >>> len(neighbors)
        6
        >>> neighbors[0]
        HexCoord(q=1, r=0)
    """
    return [HexCoord(q=coord.q + dq, r=coord.r + dr) for dq, dr in _NEIGHBOR_DIRECTIONS]


def axial_to_pixel(q: float, r: float, size: float = HEX_SIZE) -> tuple[float, float]:
    """
    Convert axial coordinates to the pixel position of the hex centre.

        x = size * (sqrt(3) * q + sqrt(3) / 2 * r)
        y = size * (3 / 2 * r)
    """
    x = size * (_SQRT3 * q + _SQRT3 / 2 * r)
    y = size * (3 / 2 * r)
    return x, y


def hex_round(q: float, r: float) -> HexCoord:
    """
    Round fractional axial coordinates to the nearest hex.

    Each cube component is rounded independently with halves rounded up
    (``floor(x + 0.5)``); whichever of q or r carries the largest rounding
    error is recomputed from the other two so that q + r + s = 0 holds exactly.
    """
    s = -q - r
    rq = math.floor(q + 0.5)
    rr = math.floor(r + 0.5)
    rs = math.floor(s + 0.5)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return HexCoord(q=int(rq), r=int(rr))


def pixel_to_axial(x: float, y: float, size: float = HEX_SIZE) -> HexCoord:
    """Convert a pixel position to the hex containing it."""
    q = (_SQRT3 / 3 * x - 1 / 3 * y) / size
    r = (2 / 3 * y) / size
    return hex_round(q, r)


def hex_to_pixel(coord: HexCoord, size: float = HEX_SIZE) -> tuple[float, float]:
    """Pixel centre of a hex."""
    return axial_to_pixel(coord.q, coord.r, size)


def pixel_to_hex(pixel: tuple[float, float], size: float = HEX_SIZE) -> HexCoord:
    """Hex under a pixel, the usual entry point for mouse hit-testing."""
    x, y = pixel
    return pixel_to_axial(x, y, size)


def hex_corners(size: float = HEX_SIZE) -> list[tuple[float, float]]:
    """
    Get the six corner points of a hexagon relative to its centre.

    Corner i lies at angle 60 * i + 30 degrees, so corners come back in
    increasing-angle order, ready to be joined into a closed path.
    """
    corners = []
    for i in range(6):
        angle = math.radians(60 * i + 30)
        corners.append((size * math.cos(angle), size * math.sin(angle)))
    return corners


def is_point_in_hex(
    point: tuple[float, float], hex_center: tuple[float, float], size: float = HEX_SIZE
) -> bool:
    """Check whether a pixel lies inside the hex centred at ``hex_center``."""
    px, py = point
    cx, cy = hex_center
    return hex_equals(pixel_to_hex((px - cx, py - cy), size), HexCoord(q=0, r=0))


def rectangular_grid(width: int, height: int) -> list[HexCoord]:
    """
    Enumerate hexes of a rectangular map using row offsets.

    Row r contributes the columns [-floor(r / 2), width - 1 - floor(r / 2)],
    so the map renders as a rectangle rather than a rhombus.

    Example:
        >>> len(rectangular_grid(10, 10))
        100
    """
    hexes = []
    for r in range(height):
        offset = r // 2
        for q in range(-offset, width - offset):
            hexes.append(HexCoord(q=q, r=r))
    return hexes


def circular_grid(radius: int) -> list[HexCoord]:
    """
    Enumerate all hexes within ``radius`` of the origin.

    The number of hexes follows the formula: 3n^2 + 3n + 1.
    A negative radius yields an empty grid.

    Example:
        >>> len(circular_grid(1))
        7
    """
    hexes = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            hexes.append(HexCoord(q=q, r=r))
    return hexes


def hexes_in_range(center: HexCoord, n: int) -> list[HexCoord]:
    """
    Find all hexes within range n of the center hex (inclusive).

    Args:
        center: The center hex coordinate
        n: The maximum distance (range)

    Returns:
        A list of HexCoord objects within the range

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        msg = f"Range n must be non-negative, got {n}"
        raise ValueError(msg)

    return [HexCoord(q=center.q + h.q, r=center.r + h.r) for h in circular_grid(n)]


class HexLayout:
    """Axial/pixel conversions bound to a fixed hex size."""

    def __init__(self, size: float = HEX_SIZE) -> None:
        self.size = size

    def axial_to_pixel(self, q: float, r: float) -> tuple[float, float]:
        return axial_to_pixel(q, r, self.size)

    def pixel_to_axial(self, x: float, y: float) -> HexCoord:
        return pixel_to_axial(x, y, self.size)

    def corners(self) -> list[tuple[float, float]]:
        return hex_corners(self.size)
