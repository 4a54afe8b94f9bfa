"""Road network generation with a growing tree."""

import logging
from typing import Iterable, Optional

from hexgen.hex_coords import Coord, distance
from hexgen.pathfinding import find_path

logger = logging.getLogger(__name__)


def find_nearest_in_set(point: Coord, members: Iterable[Coord]) -> Optional[tuple[Coord, int]]:
    """Find the member nearest to point.

    Ties go to the lowest coordinate so the answer does not depend on set
    iteration order.

    Returns:
        (nearest member, distance), or None if members is empty
    """
    best: Optional[tuple[int, Coord]] = None
    for member in members:
        key = (distance(point, member), member)
        if best is None or key < best:
            best = key
    if best is None:
        return None
    return best[1], best[0]


class RoadNetworkGenerator:
    """Grows a connected road network inside valid terrain.

    Every new road is joined to the nearest existing road by a real A*
    path, so the network stays connected by construction.
    """

    def __init__(self, valid_terrain: Iterable[Coord], occupied: Iterable[Coord] = ()):
        occupied_set = set(occupied)
        self.allowed: set[Coord] = {c for c in valid_terrain if c not in occupied_set}
        self.connected: set[Coord] = set()
        self.unconnected: set[Coord] = set(self.allowed)

    def generate(self, seeds: Iterable[Coord], target_count: int) -> list[Coord]:
        """Generate a road network.

        Args:
            seeds: Seed points, connected in the order given
            target_count: Network size to grow toward

        Returns:
            Road coordinates in sorted order
        """
        seed_list = list(dict.fromkeys(seeds))
        if not seed_list:
            logger.info("No seeds supplied, road network is empty")
            return []

        # 1. Seat seeds, joining each to the nearest connected road
        for seed in seed_list:
            self._connect_seed(seed)
        logger.info(f"Connected seeds: {len(self.connected)} roads from {len(seed_list)} seeds")

        # 2. Grow toward target size
        while len(self.connected) < target_count and self.unconnected:
            if not self._expand_once():
                break

        logger.info(f"Road network complete: {len(self.connected)} roads (target: {target_count})")
        return sorted(self.connected)

    def _connect_seed(self, seed: Coord) -> None:
        if seed not in self.allowed:
            logger.debug(f"Seed {seed} outside valid terrain, skipped")
            return

        if not self.connected:
            self._add(seed)
            return

        nearest, _ = find_nearest_in_set(seed, self.connected)
        path = find_path(nearest, seed, self.allowed)
        if path is None:
            logger.debug(f"Seed {seed} unreachable from {nearest}, skipped")
            return
        for coord in path:
            self._add(coord)

    def _expand_once(self) -> bool:
        """Join the unconnected coordinate closest to the network.

        Returns:
            False if nothing is left to join
        """
        if not self.connected:
            return False

        best: Optional[tuple[int, Coord, Coord]] = None
        for point in self.unconnected:
            nearest, dist = find_nearest_in_set(point, self.connected)
            key = (dist, point, nearest)
            if best is None or key < best:
                best = key

        if best is None:
            return False

        _, target, nearest = best
        path = find_path(nearest, target, self.allowed)
        if path is None:
            # Unreachable; never retried
            self.unconnected.discard(target)
            return True

        for coord in path:
            self._add(coord)
        return True

    def _add(self, coord: Coord) -> None:
        self.connected.add(coord)
        self.unconnected.discard(coord)


def grow_network(
    seeds: Iterable[Coord],
    valid_terrain: Iterable[Coord],
    occupied: Iterable[Coord],
    target_count: int,
) -> list[Coord]:
    """Grow a connected road network from seeds (see RoadNetworkGenerator)."""
    generator = RoadNetworkGenerator(valid_terrain, occupied)
    return generator.generate(seeds, target_count)
