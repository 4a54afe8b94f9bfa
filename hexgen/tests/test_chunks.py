"""Tests for chunk bookkeeping."""

import pytest

from hexgen.chunks import (
    chunk_for_tile,
    chunk_neighbors,
    chunk_radius,
    disable_distant_chunks,
    find_nearest_neighbor_chunk,
    rotate_clockwise,
)
from hexgen.hex_coords import distance
from hexgen.schemas import ChunkState, HexCoord


class TestChunkNeighbors:
    def test_rotate_clockwise(self):
        assert rotate_clockwise((1, 2)) == (3, -1)

    def test_six_rotations_identity(self):
        offset = (2, 3)
        for _ in range(6):
            offset = rotate_clockwise(offset)
        assert offset == (2, 3)

    def test_one_ring(self):
        assert chunk_neighbors((0, 0), 1) == [(-3, 1), (-2, 3), (1, 2), (3, -1), (2, -3), (-1, -2)]

    def test_zero_rings_are_hex_neighbors(self):
        assert chunk_neighbors((0, 0), 0) == [(-1, 1), (0, 1), (1, 0), (1, -1), (0, -1), (-1, 0)]

    @pytest.mark.parametrize("rings", [1, 2, 4])
    def test_equidistant(self, rings):
        """Neighbor chunks are 2 * rings + 1 away, just clear of the chunk itself."""
        for n in chunk_neighbors((5, -2), rings):
            assert distance((5, -2), n) == 2 * rings + 1

    def test_chunk_radius(self):
        assert chunk_radius(3) == 3


class TestNearestNeighborChunk:
    def test_nearest(self):
        result = find_nearest_neighbor_chunk((0, 0), (-2, 1), 1, [(-3, 1)])
        assert result.neighbor == HexCoord(q=-3, r=1)
        assert result.distance == 1
        assert result.is_instantiated

    def test_tile_at_center_picks_first_neighbor(self):
        """All six neighbors are equidistant; rotation order decides."""
        result = find_nearest_neighbor_chunk((0, 0), (0, 0), 1, [])
        assert result.neighbor == HexCoord(q=-3, r=1)
        assert result.distance == 3

    def test_not_instantiated(self):
        result = find_nearest_neighbor_chunk((0, 0), (2, 0), 1, [])
        assert result.neighbor == HexCoord(q=3, r=-1)
        assert not result.is_instantiated


class TestDisableDistantChunks:
    def test_toggle(self):
        chunks = [
            ChunkState(q=0, r=0, enabled=True),
            ChunkState(q=5, r=0, enabled=True),
            ChunkState(q=6, r=0, enabled=False),
            ChunkState(q=1, r=0, enabled=False),
        ]
        toggle = disable_distant_chunks((0, 0), chunks, 3)
        assert toggle.to_disable == [HexCoord(q=5, r=0)]
        assert toggle.to_enable == [HexCoord(q=1, r=0)]

    def test_boundary_is_kept(self):
        toggle = disable_distant_chunks((0, 0), [ChunkState(q=3, r=0, enabled=True)], 3)
        assert toggle.to_disable == []
        assert toggle.to_enable == []

    def test_wire_aliases(self):
        toggle = disable_distant_chunks((0, 0), [ChunkState(q=9, r=0, enabled=True)], 1)
        assert toggle.model_dump(by_alias=True) == {
            "toDisable": [{"q": 9, "r": 0}],
            "toEnable": [],
        }


class TestChunkForTile:
    def test_exact_center_wins(self):
        assert chunk_for_tile((3, 0), 1, [(2, 0), (3, 0)]) == (3, 0)

    def test_first_overlap_wins(self):
        assert chunk_for_tile((1, 0), 1, [(3, 0), (0, 0), (1, 1)]) == (0, 0)

    def test_out_of_range(self):
        assert chunk_for_tile((10, 10), 1, [(0, 0)]) is None

    def test_no_chunks(self):
        assert chunk_for_tile((0, 0), 2, []) is None
