"""Chunk bookkeeping schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .base import HexCoord


class ChunkState(BaseModel):
    """A chunk center and whether it is currently enabled."""

    q: int
    r: int
    enabled: bool


class ChunkToggle(BaseModel):
    """Chunks whose enabled state should flip."""

    model_config = ConfigDict(populate_by_name=True)

    to_disable: list[HexCoord] = Field(default_factory=list, alias="toDisable")
    to_enable: list[HexCoord] = Field(default_factory=list, alias="toEnable")


class NeighborChunk(BaseModel):
    """Nearest neighbor chunk to a tile."""

    model_config = ConfigDict(populate_by_name=True)

    neighbor: HexCoord
    distance: int
    is_instantiated: bool = Field(alias="isInstantiated")
