"""Building placement next to roads."""

import logging
from typing import Iterable, Optional

from hexgen import config
from hexgen.hex_coords import Coord, neighbors
from hexgen.schemas import BuildingRules

logger = logging.getLogger(__name__)


def count_adjacent_roads(coord: Coord, roads: set[Coord]) -> int:
    """Number of road tiles among the 6 neighbors of coord."""
    return sum(1 for n in neighbors(coord) if n in roads)


def adjacent_valid_terrain(
    roads: Iterable[Coord],
    valid_terrain: Iterable[Coord],
    occupied: Iterable[Coord] = (),
) -> list[Coord]:
    """Valid, unoccupied, non-road hexes touching at least one road.

    Returns:
        Sorted coordinates
    """
    road_set = set(roads)
    valid_set = set(valid_terrain)
    occupied_set = set(occupied)

    adjacent: set[Coord] = set()
    for road in road_set:
        for n in neighbors(road):
            if n in road_set or n in occupied_set:
                continue
            if n in valid_set:
                adjacent.add(n)

    return sorted(adjacent)


def shuffle_seed(coords: list[Coord]) -> int:
    """Content-derived seed: seed = seed * 31 + (q * 17 + r), wrapping at 64 bits."""
    seed = 0
    for q, r in coords:
        term = ((q & config.LCG_MASK) * config.SHUFFLE_Q_WEIGHT + (r & config.LCG_MASK)) & config.LCG_MASK
        seed = (seed * config.SHUFFLE_SEED_MULTIPLIER + term) & config.LCG_MASK
    return seed


def deterministic_shuffle(coords: Iterable[Coord], seed: Optional[int] = None) -> list[Coord]:
    """Fisher-Yates shuffle driven by a fixed LCG.

    The same input list (and seed) always produces the same order. When no
    seed is given it is derived from the content.
    """
    items = list(coords)
    state = shuffle_seed(items) if seed is None else seed & config.LCG_MASK

    for i in range(len(items) - 1, 0, -1):
        state = (state * config.LCG_MULTIPLIER + config.LCG_INCREMENT) & config.LCG_MASK
        j = state % (i + 1)
        items[i], items[j] = items[j], items[i]

    return items


def place_buildings(
    valid_terrain: Iterable[Coord],
    roads: Iterable[Coord],
    occupied: Iterable[Coord],
    rules: Optional[BuildingRules] = None,
    target_count: int = 0,
) -> list[Coord]:
    """Pick building sites on valid terrain next to roads.

    Args:
        valid_terrain: Hexes buildings may use
        roads: Current road network
        occupied: Hexes already taken
        rules: Placement rules (minimum adjacent roads)
        target_count: Maximum number of buildings

    Returns:
        Up to target_count sites, in deterministic shuffled order
    """
    rules = rules or BuildingRules()
    road_set = set(roads)
    occupied_set = set(occupied)

    candidates = [
        coord
        for coord in sorted(set(valid_terrain))
        if coord not in occupied_set
        and count_adjacent_roads(coord, road_set) >= rules.min_adjacent_roads
    ]

    if len(candidates) > 1:
        candidates = deterministic_shuffle(candidates)

    count = max(0, min(target_count, len(candidates)))
    logger.info(f"Placing {count} buildings ({len(candidates)} candidates)")
    return candidates[:count]
