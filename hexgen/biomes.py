"""Voronoi-style biome partition of a hex disk."""

import logging
import random
from typing import Mapping, Optional

from hexgen import config
from hexgen.hex_coords import Coord, disk, distance
from hexgen.schemas import TileType, VoronoiSeed

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNTS: dict[TileType, int] = {
    TileType.FOREST: 4,
    TileType.WATER: 3,
    TileType.GRASS: 6,
}

FALLBACK_LABEL = TileType.GRASS


def generate_seeds(
    grid: list[Coord],
    seed_counts: Mapping[TileType, int],
    rng: Optional[random.Random] = None,
) -> list[VoronoiSeed]:
    """Choose seed coordinates from grid for each label.

    Without rng, seed k of a label uses index
    (counter * 7919 + i * 997) % len(grid), where counter runs across all
    labels. With rng, indices come from rng.randrange instead.

    Args:
        grid: Candidate coordinates, in a fixed order
        seed_counts: Seeds per label; negative counts count as zero
        rng: Optional explicit random source

    Returns:
        Seeds in label order, falling back to one grass seed at grid[0]
    """
    if not grid:
        return []

    seeds = []
    counter = 0
    for label, count in seed_counts.items():
        for i in range(max(count, 0)):
            counter += 1
            if rng is not None:
                index = rng.randrange(len(grid))
            else:
                index = (counter * config.VORONOI_SEED_PRIME + i * config.VORONOI_SEED_STRIDE) % len(grid)
            q, r = grid[index]
            seeds.append(VoronoiSeed(q=q, r=r, tile_type=TileType(label)))

    if not seeds:
        q, r = grid[0]
        seeds.append(VoronoiSeed(q=q, r=r, tile_type=FALLBACK_LABEL))

    return seeds


def nearest_seed(coord: Coord, seeds: list[VoronoiSeed]) -> VoronoiSeed:
    """Nearest seed by hex distance; the earliest seed wins ties."""
    best = seeds[0]
    best_dist = distance(coord, best.coord)
    for seed in seeds[1:]:
        d = distance(coord, seed.coord)
        if d < best_dist:
            best, best_dist = seed, d
    return best


def partition_biomes(
    max_radius: int,
    center: Coord = (0, 0),
    seed_counts: Optional[Mapping[TileType, int]] = None,
    rng: Optional[random.Random] = None,
) -> dict[Coord, TileType]:
    """Label every cell of a hex disk with its nearest seed's biome.

    Args:
        max_radius: Disk radius around center
        center: Disk center
        seed_counts: Seeds per label, seeded in mapping order
            (defaults to DEFAULT_SEED_COUNTS)
        rng: Optional explicit random source for seed selection

    Returns:
        Mapping of coordinate to label, in sorted coordinate order. An empty
        disk yields {center: GRASS}.
    """
    if seed_counts is None:
        seed_counts = DEFAULT_SEED_COUNTS

    grid = sorted(disk(center, max_radius))
    if not grid:
        logger.warning(f"Empty disk (radius {max_radius}), falling back to {center}")
        return {center: FALLBACK_LABEL}

    seeds = generate_seeds(grid, seed_counts, rng)
    logger.info(f"Partitioning {len(grid)} hexes around {len(seeds)} seeds")

    return {coord: nearest_seed(coord, seeds).tile_type for coord in grid}
