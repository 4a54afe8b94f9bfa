"""Tests for biome partitioning."""

import random

from hexgen.biomes import (
    DEFAULT_SEED_COUNTS,
    FALLBACK_LABEL,
    generate_seeds,
    nearest_seed,
    partition_biomes,
)
from hexgen.hex_coords import disk, distance
from hexgen.schemas import TileType, VoronoiSeed


class TestGenerateSeeds:
    def test_seed_count(self):
        grid = sorted(disk((0, 0), 4))
        seeds = generate_seeds(grid, DEFAULT_SEED_COUNTS)
        assert len(seeds) == sum(DEFAULT_SEED_COUNTS.values())

    def test_index_formula(self):
        """Seed k uses (counter * 7919 + i * 997) % len(grid)."""
        grid = sorted(disk((0, 0), 2))
        seeds = generate_seeds(grid, {TileType.FOREST: 2, TileType.WATER: 1})
        n = len(grid)
        assert seeds[0].coord == grid[(1 * 7919 + 0 * 997) % n]
        assert seeds[1].coord == grid[(2 * 7919 + 1 * 997) % n]
        assert seeds[2].coord == grid[(3 * 7919 + 0 * 997) % n]
        assert [s.tile_type for s in seeds] == [TileType.FOREST, TileType.FOREST, TileType.WATER]

    def test_all_zero_counts_fall_back(self):
        grid = sorted(disk((0, 0), 1))
        seeds = generate_seeds(grid, {TileType.FOREST: 0, TileType.WATER: 0})
        assert len(seeds) == 1
        assert seeds[0].coord == grid[0]
        assert seeds[0].tile_type == FALLBACK_LABEL

    def test_negative_counts_are_zero(self):
        grid = sorted(disk((0, 0), 2))
        seeds = generate_seeds(grid, {TileType.WATER: -3, TileType.FOREST: 1})
        assert [s.tile_type for s in seeds] == [TileType.FOREST]

    def test_empty_grid(self):
        assert generate_seeds([], DEFAULT_SEED_COUNTS) == []

    def test_rng_is_reproducible(self):
        grid = sorted(disk((0, 0), 5))
        first = generate_seeds(grid, DEFAULT_SEED_COUNTS, random.Random(3))
        second = generate_seeds(grid, DEFAULT_SEED_COUNTS, random.Random(3))
        assert first == second
        assert all(s.coord in grid for s in first)


class TestNearestSeed:
    def test_picks_nearest(self):
        seeds = [
            VoronoiSeed(q=5, r=0, tile_type=TileType.WATER),
            VoronoiSeed(q=0, r=1, tile_type=TileType.FOREST),
        ]
        assert nearest_seed((0, 0), seeds).tile_type == TileType.FOREST

    def test_first_wins_tie(self):
        seeds = [
            VoronoiSeed(q=1, r=0, tile_type=TileType.WATER),
            VoronoiSeed(q=-1, r=0, tile_type=TileType.FOREST),
        ]
        assert nearest_seed((0, 0), seeds).tile_type == TileType.WATER


class TestPartitionBiomes:
    def test_covers_disk(self):
        tiles = partition_biomes(6)
        assert set(tiles) == disk((0, 0), 6)

    def test_labels_come_from_seeds(self):
        tiles = partition_biomes(6, seed_counts={TileType.FOREST: 2, TileType.WATER: 1})
        assert set(tiles.values()) <= {TileType.FOREST, TileType.WATER}

    def test_every_cell_takes_nearest_seed(self):
        grid = sorted(disk((0, 0), 4))
        seeds = generate_seeds(grid, DEFAULT_SEED_COUNTS)
        tiles = partition_biomes(4)
        for coord, label in tiles.items():
            best = min(distance(coord, s.coord) for s in seeds)
            assert any(s.tile_type == label and distance(coord, s.coord) == best for s in seeds)

    def test_radius_zero(self):
        """Every seed lands on the center; the first label wins."""
        assert partition_biomes(0, center=(2, -1)) == {(2, -1): TileType.FOREST}

    def test_negative_radius_falls_back(self):
        assert partition_biomes(-1, center=(3, 3)) == {(3, 3): FALLBACK_LABEL}

    def test_no_seeds_all_grass(self):
        tiles = partition_biomes(3, seed_counts={})
        assert set(tiles.values()) == {TileType.GRASS}

    def test_deterministic(self):
        assert partition_biomes(8, center=(1, 1)) == partition_biomes(8, center=(1, 1))

    def test_rng_changes_seeding(self):
        tiles = partition_biomes(8, rng=random.Random(99))
        assert set(tiles) == disk((0, 0), 8)
        assert partition_biomes(8, rng=random.Random(99)) == tiles

    def test_sorted_keys(self):
        tiles = partition_biomes(3)
        assert list(tiles) == sorted(tiles)
