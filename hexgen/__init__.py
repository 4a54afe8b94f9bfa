"""Hex grid generation: coordinates, pathfinding, roads, biomes and town layouts."""
