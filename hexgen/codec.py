"""JSON encoding and decoding at the hexgen boundary.

Everything here goes through pydantic models, so malformed input raises
pydantic.ValidationError before any coordinate reaches the core.
"""

from typing import Iterable, Mapping, Optional

from pydantic import TypeAdapter

from hexgen.hex_coords import Coord
from hexgen.schemas import (
    BuildingRules,
    ChunkState,
    HexCoord,
    TileEntry,
    TileType,
    WorldPosition,
)

_coord_list = TypeAdapter(list[HexCoord])
_optional_coord_list = TypeAdapter(Optional[list[HexCoord]])
_tile_list = TypeAdapter(list[TileEntry])
_world_list = TypeAdapter(list[WorldPosition])
_chunk_list = TypeAdapter(list[ChunkState])


def decode_coords(data: str | bytes) -> list[Coord]:
    """Decode [{"q":0,"r":0},...] into coordinate tuples (order kept)."""
    return [c.as_tuple() for c in _coord_list.validate_json(data)]


def encode_coords(coords: Iterable[Coord]) -> str:
    return _coord_list.dump_json([HexCoord.from_tuple(c) for c in coords]).decode()


def encode_coord(coord: Optional[Coord]) -> str:
    """Encode a single coordinate; None becomes JSON null."""
    if coord is None:
        return "null"
    return HexCoord.from_tuple(coord).model_dump_json()


def decode_path(data: str | bytes) -> Optional[list[Coord]]:
    """Decode a path; JSON null means no path."""
    path = _optional_coord_list.validate_json(data)
    if path is None:
        return None
    return [c.as_tuple() for c in path]


def encode_path(path: Optional[Iterable[Coord]]) -> str:
    if path is None:
        return "null"
    return encode_coords(path)


def decode_tiles(data: str | bytes) -> list[TileEntry]:
    """Decode [{"q":0,"r":0,"tileType":3},...]. Bad ordinals are rejected."""
    return _tile_list.validate_json(data)


def encode_tiles(tiles: Mapping[Coord, TileType] | Iterable[TileEntry]) -> str:
    if isinstance(tiles, Mapping):
        entries = [TileEntry(q=q, r=r, tile_type=t) for (q, r), t in tiles.items()]
    else:
        entries = list(tiles)
    return _tile_list.dump_json(entries, by_alias=True).decode()


def encode_world_positions(positions: Iterable[tuple[Coord, float, float]]) -> str:
    models = [WorldPosition(q=q, r=r, x=x, z=z) for (q, r), x, z in positions]
    return _world_list.dump_json(models).decode()


def decode_chunk_states(data: str | bytes) -> list[ChunkState]:
    return _chunk_list.validate_json(data)


def decode_building_rules(data: str | bytes) -> BuildingRules:
    """Decode {"minAdjacentRoads": n}; an empty object gives the defaults."""
    return BuildingRules.model_validate_json(data)
