"""CLI interface for hexgen."""

import json
import logging
import random
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from hexgen import config
from hexgen import codec
from hexgen.hex_coords import Coord


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def _decode_coords(value: str, param_name: str) -> list[Coord]:
    try:
        return codec.decode_coords(value)
    except ValidationError as e:
        raise click.BadParameter(f"expected a JSON list of {{q, r}} objects ({e.error_count()} errors)",
                                 param_hint=param_name)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log progress at INFO level")
def cli(verbose: bool):
    """Hex Grid Generation Toolkit"""
    _configure_logging(verbose)


@cli.command()
@click.option("--start-q", default=0, help="Start Q coordinate")
@click.option("--start-r", default=0, help="Start R coordinate")
@click.option("--end-q", default=0, help="End Q coordinate")
@click.option("--end-r", default=0, help="End R coordinate")
def distance(start_q: int, start_r: int, end_q: int, end_r: int):
    """Hex distance between two coordinates."""
    from hexgen.hex_coords import distance as hex_distance

    click.echo(hex_distance((start_q, start_r), (end_q, end_r)))


@cli.command()
@click.option("--start-q", default=0, help="Start Q coordinate")
@click.option("--start-r", default=0, help="Start R coordinate")
@click.option("--end-q", required=True, type=int, help="End Q coordinate")
@click.option("--end-r", required=True, type=int, help="End R coordinate")
@click.option("--terrain", required=True, help="Passable hexes as JSON [{q, r}, ...]")
@click.option("--length-only", is_flag=True, help="Print path length (-1 if unreachable)")
def path(start_q: int, start_r: int, end_q: int, end_r: int, terrain: str, length_only: bool):
    """Shortest path over passable terrain."""
    from hexgen.pathfinding import find_path, path_length

    passable = set(_decode_coords(terrain, "--terrain"))
    start, goal = (start_q, start_r), (end_q, end_r)

    if length_only:
        click.echo(path_length(start, goal, passable))
    else:
        click.echo(codec.encode_path(find_path(start, goal, passable)))


@cli.command()
@click.option("--roads", "roads_json", required=True, help="Road hexes as JSON [{q, r}, ...]")
def connectivity(roads_json: str):
    """Check that a road network is connected."""
    from hexgen.pathfinding import validate_connectivity

    roads = _decode_coords(roads_json, "--roads")
    connected = validate_connectivity(roads)
    click.echo(json.dumps(connected))
    if not connected:
        click.get_current_context().exit(1)


@cli.command()
@click.option("--seeds", required=True, help="Seed hexes as JSON [{q, r}, ...]")
@click.option("--terrain", required=True, help="Valid terrain as JSON [{q, r}, ...]")
@click.option("--occupied", default="[]", help="Occupied hexes as JSON [{q, r}, ...]")
@click.option("--target", default=0, help="Target road count")
def roads(seeds: str, terrain: str, occupied: str, target: int):
    """Grow a connected road network from seeds."""
    from hexgen.road_network import grow_network

    network = grow_network(
        _decode_coords(seeds, "--seeds"),
        _decode_coords(terrain, "--terrain"),
        _decode_coords(occupied, "--occupied"),
        target,
    )
    click.echo(codec.encode_coords(network))


@cli.command()
@click.option("--radius", default=config.DEFAULT_LAYOUT_RADIUS, help="Disk radius in hexes")
@click.option("--center-q", default=0, help="Center Q coordinate")
@click.option("--center-r", default=0, help="Center R coordinate")
@click.option("--forest", default=4, help="Forest seed count")
@click.option("--water", default=3, help="Water seed count")
@click.option("--grass", default=6, help="Grass seed count")
@click.option("--seed", default=None, type=int, help="Random seed (default: fixed index scheme)")
def biomes(radius: int, center_q: int, center_r: int, forest: int, water: int, grass: int,
           seed: Optional[int]):
    """Partition a hex disk into biome regions."""
    from hexgen.biomes import partition_biomes
    from hexgen.schemas import TileType

    rng = random.Random(seed) if seed is not None else None
    tiles = partition_biomes(
        radius,
        (center_q, center_r),
        {TileType.FOREST: forest, TileType.WATER: water, TileType.GRASS: grass},
        rng=rng,
    )
    click.echo(codec.encode_tiles(tiles))


@cli.command()
@click.option("--terrain", required=True, help="Valid terrain as JSON [{q, r}, ...]")
@click.option("--roads", "roads_json", required=True, help="Road hexes as JSON [{q, r}, ...]")
@click.option("--occupied", default="[]", help="Occupied hexes as JSON [{q, r}, ...]")
@click.option("--rules", default="{}", help='Rules as JSON {"minAdjacentRoads": n}')
@click.option("--target", default=0, help="Maximum number of buildings")
def buildings(terrain: str, roads_json: str, occupied: str, rules: str, target: int):
    """Place buildings next to roads."""
    from hexgen.placement import place_buildings

    try:
        building_rules = codec.decode_building_rules(rules)
    except ValidationError:
        raise click.BadParameter("expected {\"minAdjacentRoads\": 0-6}", param_hint="--rules")

    sites = place_buildings(
        _decode_coords(terrain, "--terrain"),
        _decode_coords(roads_json, "--roads"),
        _decode_coords(occupied, "--occupied"),
        building_rules,
        target,
    )
    click.echo(codec.encode_coords(sites))


@cli.command("world-positions")
@click.option("--coords", required=True, help="Hexes as JSON [{q, r}, ...]")
@click.option("--hex-size", default=config.DEFAULT_HEX_SIZE, help="Hexagon size")
def world_positions(coords: str, hex_size: float):
    """Convert hex coordinates to world-space positions."""
    from hexgen.hex_coords import batch_axial_to_world

    positions = batch_axial_to_world(_decode_coords(coords, "--coords"), hex_size)
    click.echo(codec.encode_world_positions(positions))


@cli.group()
def chunks():
    """Chunk bookkeeping."""
    pass


@chunks.command("neighbors")
@click.option("--q", default=0, help="Chunk center Q")
@click.option("--r", default=0, help="Chunk center R")
@click.option("--rings", default=1, help="Rings per chunk")
def chunk_neighbors_cmd(q: int, r: int, rings: int):
    """List the 6 neighbor chunk centers."""
    from hexgen.chunks import chunk_neighbors

    click.echo(codec.encode_coords(chunk_neighbors((q, r), rings)))


@chunks.command("locate")
@click.option("--tile-q", required=True, type=int, help="Tile Q")
@click.option("--tile-r", required=True, type=int, help="Tile R")
@click.option("--rings", default=1, help="Rings per chunk")
@click.option("--chunks", "chunks_json", required=True, help="Chunk centers as JSON [{q, r}, ...]")
def chunk_locate_cmd(tile_q: int, tile_r: int, rings: int, chunks_json: str):
    """Find the chunk containing a tile."""
    from hexgen.chunks import chunk_for_tile

    found = chunk_for_tile((tile_q, tile_r), rings, _decode_coords(chunks_json, "--chunks"))
    click.echo(codec.encode_coord(found))


@cli.command()
@click.option("--preset", "preset_name", default="town", help="Preset name")
@click.option("--presets-dir", default=None, help="Directory with preset YAML files")
@click.option("--output", default=None, help="Write the layout JSON to this file")
def layout(preset_name: str, presets_dir: Optional[str], output: Optional[str]):
    """Generate a town layout from a preset."""
    from hexgen.layout_generator import TownLayoutGenerator
    from hexgen.presets import PresetLoader
    from hexgen.tile_store import TileStore

    loader = PresetLoader(Path(presets_dir) if presets_dir else None)
    try:
        preset = loader.load_preset(preset_name)
    except FileNotFoundError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        raise click.ClickException(f"Invalid preset '{preset_name}': {e}")

    click.echo(f"Generating layout '{preset.id}' (radius: {preset.radius}, seed: {preset.seed})")

    store = TileStore()
    result = TownLayoutGenerator(store, preset).generate()

    click.echo(f"Tiles: {result.stats.total}")
    click.echo(f"  Roads: {result.stats.road} (target: {result.road_target})")
    click.echo(f"  Buildings: {result.stats.building}")
    click.echo(f"  Forest: {result.stats.forest}")
    click.echo(f"  Water: {result.stats.water}")
    click.echo(f"  Grass: {result.stats.grass}")
    click.echo(f"Roads connected: {'yes' if result.roads_connected else 'no'}")

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(result.model_dump_json(indent=2, by_alias=True))
        click.echo(f"Saved to {output_path}")


@cli.command()
@click.option("--presets-dir", default=None, help="Directory with preset YAML files")
def presets(presets_dir: Optional[str]):
    """List available layout presets."""
    from hexgen.presets import PresetLoader

    loader = PresetLoader(Path(presets_dir) if presets_dir else None)
    found = loader.load_all()
    if not found:
        click.echo("No presets found")
        return

    click.echo("Available presets:")
    for preset_id, preset in found.items():
        click.echo(f"  {preset_id}: radius {preset.radius}, {preset.building_density} buildings")


if __name__ == "__main__":
    cli()
