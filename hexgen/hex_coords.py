"""Axial and cube hex coordinate utilities.

Axial neighbor order (stable, used for deterministic iteration):
    0: (+1,  0)
    1: (-1,  0)
    2: ( 0, +1)
    3: ( 0, -1)
    4: (+1, -1)
    5: (-1, +1)

Cube directions (used for ring walking, clockwise):
    0: (+1,  0, -1)
    1: (+1, -1,  0)
    2: ( 0, -1, +1)
    3: (-1,  0, +1)
    4: (-1, +1,  0)
    5: ( 0, +1, -1)
"""

import math
from typing import Iterable, NamedTuple

from hexgen import config

Coord = tuple[int, int]


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


class CubeCoord(NamedTuple):
    """Cube coordinate, always built so that q + r + s == 0."""
    q: int
    r: int
    s: int


HEX_NEIGHBOR_OFFSETS: list[HexOffset] = [
    HexOffset(+1,  0),
    HexOffset(-1,  0),
    HexOffset( 0, +1),
    HexOffset( 0, -1),
    HexOffset(+1, -1),
    HexOffset(-1, +1),
]

CUBE_DIRECTIONS: list[CubeCoord] = [
    CubeCoord(+1,  0, -1),
    CubeCoord(+1, -1,  0),
    CubeCoord( 0, -1, +1),
    CubeCoord(-1,  0, +1),
    CubeCoord(-1, +1,  0),
    CubeCoord( 0, +1, -1),
]

# Ring walks start this many steps out from the center
RING_START_DIRECTION = 4


def axial_to_cube(coord: Coord) -> CubeCoord:
    """Convert axial (q, r) to cube (q, r, s)."""
    q, r = coord
    return CubeCoord(q, r, -q - r)


def cube_to_axial(cube: CubeCoord) -> Coord:
    return (cube.q, cube.r)


def cube_add(a: CubeCoord, b: CubeCoord) -> CubeCoord:
    return CubeCoord(a.q + b.q, a.r + b.r, a.s + b.s)


def cube_scale(cube: CubeCoord, factor: int) -> CubeCoord:
    return CubeCoord(cube.q * factor, cube.r * factor, cube.s * factor)


def cube_neighbor(cube: CubeCoord, direction: int) -> CubeCoord:
    """Get cube neighbor in direction 0-5 (wraps)."""
    return cube_add(cube, CUBE_DIRECTIONS[direction % 6])


def cube_distance(a: CubeCoord, b: CubeCoord) -> int:
    """Chebyshev distance between two cube coordinates."""
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def distance(a: Coord, b: Coord) -> int:
    """Calculate hex distance between two axial coordinates.

    Uses (|dq| + |dr| + |ds|) / 2 with s = -q - r, which equals the
    cube Chebyshev distance.
    """
    (q1, r1), (q2, r2) = a, b
    s1 = -q1 - r1
    s2 = -q2 - r2
    return (abs(q1 - q2) + abs(r1 - r2) + abs(s1 - s2)) // 2


def neighbors(coord: Coord) -> list[Coord]:
    """Get all 6 neighbors in stable order."""
    q, r = coord
    return [(q + offset.dq, r + offset.dr) for offset in HEX_NEIGHBOR_OFFSETS]


def ring(center: Coord, radius: int) -> list[Coord]:
    """Get the hexagonal ring at exactly `radius` steps from center.

    Args:
        center: Axial center coordinate
        radius: Ring radius (0 yields the center only)

    Returns:
        6 * radius coordinates in walk order, or [center] for radius 0
    """
    if radius == 0:
        return [center]
    if radius < 0:
        return []

    results = []
    current = cube_add(
        axial_to_cube(center),
        cube_scale(CUBE_DIRECTIONS[RING_START_DIRECTION], radius),
    )
    for side in range(6):
        for _ in range(radius):
            results.append(cube_to_axial(current))
            current = cube_neighbor(current, side)

    return results


def disk(center: Coord, max_radius: int) -> set[Coord]:
    """Get every coordinate within max_radius of center (rings 0..max_radius)."""
    grid: set[Coord] = set()
    for layer in range(max_radius + 1):
        for coord in ring(center, layer):
            cube = axial_to_cube(coord)
            assert cube.q + cube.r + cube.s == 0, f"Invalid cube coordinate {cube}"
            grid.add(coord)
    return grid


def axial_to_world(coord: Coord, hex_size: float = config.DEFAULT_HEX_SIZE) -> tuple[float, float]:
    """Convert axial coordinates to world-space (x, z) for pointy-top hexes."""
    q, r = coord
    size = hex_size / config.HEX_SIZE_SCALE
    sqrt3 = math.sqrt(3.0)
    x = size * (sqrt3 * 2.0 * q + sqrt3 * r)
    z = size * (3.0 * r)
    return (x, z)


def batch_axial_to_world(
    coords: Iterable[Coord], hex_size: float = config.DEFAULT_HEX_SIZE
) -> list[tuple[Coord, float, float]]:
    """Convert many coordinates at once, keeping input order."""
    return [(coord, *axial_to_world(coord, hex_size)) for coord in coords]
