"""Base types and enums for hexgen schemas."""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel


class TileType(IntEnum):
    """Tile types. Ordinals cross the external boundary as integers."""

    GRASS = 0
    BUILDING = 1
    ROAD = 2
    FOREST = 3
    WATER = 4

    @classmethod
    def from_ordinal(cls, value: int) -> Optional["TileType"]:
        """Return the tile type for an ordinal, or None if out of range."""
        try:
            return cls(value)
        except ValueError:
            return None


class HexCoord(BaseModel):
    """Axial hex coordinates."""

    q: int
    r: int

    def __hash__(self) -> int:
        return hash((self.q, self.r))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexCoord):
            return False
        return self.q == other.q and self.r == other.r

    @classmethod
    def from_tuple(cls, coord: tuple[int, int]) -> "HexCoord":
        return cls(q=coord[0], r=coord[1])

    def as_tuple(self) -> tuple[int, int]:
        return (self.q, self.r)

