"""Sparse tile store with a persistent pre-constraint overlay."""

import logging
import threading
from typing import Iterable, Optional, Union

from hexgen.hex_coords import Coord
from hexgen.schemas import TileEntry, TileStats, TileType

logger = logging.getLogger(__name__)


class TileStore:
    """Grid of tile types plus pre-constraints that survive regeneration.

    The grid is derived: regenerate_from_constraints() clears it and replays
    every pre-constraint into it. One lock guards all operations.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._grid: dict[Coord, TileType] = {}
        self._pre_constraints: dict[Coord, TileType] = {}

    def get(self, coord: Coord) -> Optional[TileType]:
        """Get the tile at coord, or None if empty."""
        with self._lock:
            return self._grid.get(coord)

    def get_ordinal(self, coord: Coord) -> int:
        """Get the tile ordinal at coord, or -1 if empty."""
        tile = self.get(coord)
        return -1 if tile is None else int(tile)

    def batch_get(self, coords: Iterable[Coord]) -> list[TileEntry]:
        """Look up many coordinates; empty cells are left out."""
        with self._lock:
            entries = []
            for q, r in coords:
                tile = self._grid.get((q, r))
                if tile is not None:
                    entries.append(TileEntry(q=q, r=r, tile_type=tile))
            return entries

    def set_pre_constraint(self, coord: Coord, tile_type: Union[TileType, int]) -> bool:
        """Fix a tile type at coord for future regenerations.

        Returns:
            False if tile_type is not a valid ordinal (store unchanged)
        """
        tile = None
        if isinstance(tile_type, int) and not isinstance(tile_type, bool):
            tile = TileType.from_ordinal(tile_type)
        if tile is None:
            logger.warning(f"Rejected pre-constraint at {coord}: invalid tile type {tile_type}")
            return False
        with self._lock:
            self._pre_constraints[coord] = tile
        return True

    def pre_constraints(self) -> list[TileEntry]:
        with self._lock:
            return [
                TileEntry(q=q, r=r, tile_type=tile)
                for (q, r), tile in self._pre_constraints.items()
            ]

    def clear_pre_constraints(self) -> None:
        with self._lock:
            self._pre_constraints.clear()

    def clear(self) -> None:
        """Clear the grid. Pre-constraints are kept."""
        with self._lock:
            self._grid.clear()

    def regenerate_from_constraints(self) -> None:
        """Rebuild the grid from pre-constraints.

        No constraint solving happens here; the grid is exactly the
        pre-constraint overlay.
        """
        with self._lock:
            self._grid.clear()
            self._grid.update(self._pre_constraints)
            logger.info(f"Regenerated grid from {len(self._pre_constraints)} pre-constraints")

    def stats(self) -> TileStats:
        """Count grid tiles by type."""
        with self._lock:
            counts = {tile: 0 for tile in TileType}
            for tile in self._grid.values():
                counts[tile] += 1
        return TileStats(
            grass=counts[TileType.GRASS],
            building=counts[TileType.BUILDING],
            road=counts[TileType.ROAD],
            forest=counts[TileType.FOREST],
            water=counts[TileType.WATER],
            total=sum(counts.values()),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._grid)
