"""Chunk adjacency and distance bookkeeping.

A chunk is the disk of `rings` rings around a chunk center. Neighbor chunk
centers sit at offset (rings, rings + 1) rotated in 60 degree steps, so the
outer rings of adjacent chunks touch without gaps.
"""

from typing import Iterable, Optional

from hexgen.hex_coords import Coord, distance
from hexgen.schemas import ChunkState, ChunkToggle, HexCoord, NeighborChunk


def chunk_radius(rings: int) -> int:
    """Distance from a chunk center to its outer boundary."""
    return rings


def rotate_clockwise(offset: Coord) -> Coord:
    """Rotate an axial offset 60 degrees clockwise: (q, r) -> (q + r, -q)."""
    q, r = offset
    return (q + r, -q)


def chunk_neighbors(center: Coord, rings: int) -> list[Coord]:
    """The 6 neighbor chunk centers of a chunk."""
    offset = (1, 0) if rings == 0 else (rings, rings + 1)

    # Align the starting direction (-120 degrees)
    for _ in range(4):
        offset = rotate_clockwise(offset)

    result = []
    for _ in range(6):
        result.append((center[0] + offset[0], center[1] + offset[1]))
        offset = rotate_clockwise(offset)
    return result


def find_nearest_neighbor_chunk(
    chunk: Coord,
    tile: Coord,
    rings: int,
    existing_chunks: Iterable[Coord],
) -> NeighborChunk:
    """Of the 6 chunks around `chunk`, find the one nearest to `tile`.

    The first neighbor in rotation order wins ties.
    """
    existing = set(existing_chunks)
    candidates = chunk_neighbors(chunk, rings)

    nearest = candidates[0]
    min_distance = distance(tile, nearest)
    for candidate in candidates[1:]:
        d = distance(tile, candidate)
        if d < min_distance:
            nearest, min_distance = candidate, d

    return NeighborChunk(
        neighbor=HexCoord.from_tuple(nearest),
        distance=min_distance,
        is_instantiated=nearest in existing,
    )


def disable_distant_chunks(
    chunk: Coord,
    chunks: Iterable[ChunkState],
    max_distance: int,
) -> ChunkToggle:
    """Work out which chunks to switch off (too far) or back on (close again)."""
    toggle = ChunkToggle()
    for state in chunks:
        d = distance(chunk, (state.q, state.r))
        if d > max_distance:
            if state.enabled:
                toggle.to_disable.append(HexCoord(q=state.q, r=state.r))
        elif not state.enabled:
            toggle.to_enable.append(HexCoord(q=state.q, r=state.r))
    return toggle


def chunk_for_tile(tile: Coord, rings: int, chunk_positions: Iterable[Coord]) -> Optional[Coord]:
    """Find the chunk containing tile.

    A chunk centered on the tile wins outright. Otherwise the closest chunk
    within `rings` of the tile is returned; on overlap the first one seen wins.
    """
    closest: Optional[Coord] = None
    min_distance = 0
    for position in chunk_positions:
        d = distance(tile, position)
        if d == 0:
            return position
        if d <= rings and (closest is None or d < min_distance):
            closest, min_distance = position, d
    return closest
