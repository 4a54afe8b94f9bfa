"""Pydantic schemas for hexgen."""

from .base import TileType, HexCoord
from .tiles import TileEntry, VoronoiSeed, WorldPosition, BuildingRules, TileStats
from .chunks import ChunkState, ChunkToggle, NeighborChunk
from .layout import LayoutPreset, TownLayout

__all__ = [
    # base
    "TileType",
    "HexCoord",
    # tiles
    "TileEntry",
    "VoronoiSeed",
    "WorldPosition",
    "BuildingRules",
    "TileStats",
    # chunks
    "ChunkState",
    "ChunkToggle",
    "NeighborChunk",
    # layout
    "LayoutPreset",
    "TownLayout",
]
