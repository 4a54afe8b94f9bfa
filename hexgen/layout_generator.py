"""Town layout generation: biomes, roads and buildings as pre-constraints."""

import logging
import math
import random
from typing import Optional

from hexgen import config
from hexgen.biomes import partition_biomes
from hexgen.hex_coords import Coord
from hexgen.pathfinding import validate_connectivity
from hexgen.placement import place_buildings
from hexgen.road_network import RoadNetworkGenerator
from hexgen.schemas import HexCoord, LayoutPreset, TileEntry, TileType, TownLayout
from hexgen.tile_store import TileStore

logger = logging.getLogger(__name__)

# Biomes roads and buildings may be built on
BUILDABLE_BIOMES = {TileType.GRASS, TileType.FOREST}


class TownLayoutGenerator:
    """Builds a town layout and loads it into a TileStore.

    The store is owned by the caller and passed in explicitly.
    """

    def __init__(self, store: TileStore, preset: Optional[LayoutPreset] = None):
        self.store = store
        self.preset = preset or LayoutPreset(id="default")

    def generate(self) -> TownLayout:
        """Run the pipeline and regenerate the store's grid.

        Returns:
            TownLayout with every stage's output and the final tile stats
        """
        preset = self.preset
        center = preset.center.as_tuple()

        # 1. Biome regions
        biomes = partition_biomes(preset.radius, center, preset.biome_seeds)
        logger.info(f"Biomes: {self._count_labels(biomes)}")

        # 2. Water blocks construction; grass and forest are buildable
        occupied = {c for c, t in biomes.items() if t == TileType.WATER}
        valid_terrain = sorted(c for c, t in biomes.items() if t in BUILDABLE_BIOMES)
        logger.info(f"Valid terrain: {len(valid_terrain)} hexes, {len(occupied)} water")

        # 3. Roads
        road_target = math.floor(len(valid_terrain) * preset.road_ratio)
        seeds = self._pick_road_seeds(valid_terrain, road_target)
        generator = RoadNetworkGenerator(valid_terrain, occupied)
        roads = generator.generate(seeds, road_target)

        roads_connected = validate_connectivity(roads)
        if roads_connected:
            logger.info(f"Road connectivity check passed for {len(roads)} roads")
        else:
            logger.error(f"Road connectivity check failed for {len(roads)} roads")

        # 4. Buildings next to roads
        buildings = self._place_buildings(valid_terrain, roads, occupied)

        # 5. Pre-constraints: biomes, then buildings, then roads on top
        tiles: dict[Coord, TileType] = dict(biomes)
        for coord in buildings:
            tiles[coord] = TileType.BUILDING
        for coord in roads:
            tiles[coord] = TileType.ROAD

        self.store.clear_pre_constraints()
        for coord, tile in tiles.items():
            self.store.set_pre_constraint(coord, tile)
        self.store.regenerate_from_constraints()

        stats = self.store.stats()
        logger.info(
            f"Layout '{preset.id}': {stats.total} tiles, {stats.road} roads, "
            f"{stats.building} buildings"
        )

        return TownLayout(
            preset_id=preset.id,
            biomes=[TileEntry(q=q, r=r, tile_type=t) for (q, r), t in biomes.items()],
            roads=[HexCoord.from_tuple(c) for c in roads],
            buildings=[HexCoord.from_tuple(c) for c in buildings],
            road_target=road_target,
            roads_connected=roads_connected,
            pre_constraints=[TileEntry(q=q, r=r, tile_type=t) for (q, r), t in tiles.items()],
            stats=stats,
        )

    def _pick_road_seeds(self, valid_terrain: list[Coord], road_target: int) -> list[Coord]:
        """Shuffle valid terrain with the preset seed and take the first few."""
        if not valid_terrain:
            return []
        seed_count = max(1, math.floor(road_target * self.preset.road_seed_ratio))
        rng = random.Random(self.preset.seed)
        candidates = list(valid_terrain)
        rng.shuffle(candidates)
        return candidates[:seed_count]

    def _place_buildings(
        self, valid_terrain: list[Coord], roads: list[Coord], occupied: set[Coord]
    ) -> list[Coord]:
        taken = occupied | set(roads)
        rules = self.preset.building_rules
        ratio = config.BUILDING_DENSITY[self.preset.building_density]

        # Size the target from the full candidate pool
        candidates = place_buildings(valid_terrain, roads, taken, rules, len(valid_terrain))
        target = math.floor(len(candidates) * ratio)
        return candidates[:target]

    @staticmethod
    def _count_labels(tiles: dict[Coord, TileType]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for tile in tiles.values():
            counts[tile.name.lower()] = counts.get(tile.name.lower(), 0) + 1
        return counts
