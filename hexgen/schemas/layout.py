"""Town layout preset and output schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from hexgen import config

from .base import HexCoord, TileType
from .tiles import BuildingRules, TileEntry, TileStats


class LayoutPreset(BaseModel):
    """Settings for one town layout run, loaded from YAML."""

    id: str
    name: Optional[str] = None
    description: str = ""
    radius: int = Field(default=config.DEFAULT_LAYOUT_RADIUS, ge=0)
    center: HexCoord = Field(default_factory=lambda: HexCoord(q=0, r=0))
    seed: int = 0
    biome_seeds: dict[TileType, int] = Field(
        default_factory=lambda: {TileType.FOREST: 4, TileType.WATER: 3, TileType.GRASS: 6},
        description="Seed count per biome label, in seeding order",
    )
    road_ratio: float = Field(default=config.ROAD_RATIO, ge=0.0, le=1.0)
    road_seed_ratio: float = Field(default=config.ROAD_SEED_RATIO, ge=0.0, le=1.0)
    building_density: Literal["sparse", "normal", "dense"] = "normal"
    building_rules: BuildingRules = Field(default_factory=BuildingRules)

    @field_validator("biome_seeds", mode="before")
    @classmethod
    def parse_biome_labels(cls, v):
        """Accept biome labels by name (``forest``) as well as ordinal."""
        if not isinstance(v, dict):
            return v
        parsed = {}
        for label, count in v.items():
            if isinstance(label, str):
                if label.lstrip("-").isdigit():
                    label = int(label)
                elif label.upper() in TileType.__members__:
                    label = TileType[label.upper()]
                else:
                    raise ValueError(f"Unknown biome label: {label}")
            parsed[label] = count
        return parsed


class TownLayout(BaseModel):
    """Result of a town layout run."""

    preset_id: str
    biomes: list[TileEntry] = Field(default_factory=list)
    roads: list[HexCoord] = Field(default_factory=list)
    buildings: list[HexCoord] = Field(default_factory=list)
    road_target: int = 0
    roads_connected: bool = True
    pre_constraints: list[TileEntry] = Field(default_factory=list)
    stats: TileStats = Field(default_factory=TileStats)
