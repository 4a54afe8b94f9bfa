"""Tile, placement and world-space boundary schemas."""

from pydantic import BaseModel, ConfigDict, Field

from hexgen import config

from .base import TileType


class TileEntry(BaseModel):
    """A tile type fixed at a coordinate (wire form: {q, r, tileType})."""

    model_config = ConfigDict(populate_by_name=True)

    q: int
    r: int
    tile_type: TileType = Field(alias="tileType")

    @property
    def coord(self) -> tuple[int, int]:
        return (self.q, self.r)


class VoronoiSeed(BaseModel):
    """Seed point for a biome region."""

    q: int
    r: int
    tile_type: TileType

    @property
    def coord(self) -> tuple[int, int]:
        return (self.q, self.r)


class WorldPosition(BaseModel):
    """Axial coordinate with its world-space position."""

    q: int
    r: int
    x: float
    z: float


class BuildingRules(BaseModel):
    """Rules for building placement next to roads."""

    model_config = ConfigDict(populate_by_name=True)

    min_adjacent_roads: int = Field(
        default=config.DEFAULT_MIN_ADJACENT_ROADS, ge=0, le=6, alias="minAdjacentRoads"
    )


class TileStats(BaseModel):
    """Tile counts in the current grid."""

    grass: int = 0
    building: int = 0
    road: int = 0
    forest: int = 0
    water: int = 0
    total: int = 0
