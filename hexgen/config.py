"""Configuration for hexgen."""

import os
from pathlib import Path

# Paths
HEXGEN_ROOT = Path(__file__).parent
PRESETS_DIR = Path(os.environ.get("HEXGEN_PRESETS_DIR", HEXGEN_ROOT / "presets"))

# Logging
LOG_LEVEL = os.environ.get("HEXGEN_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Voronoi seeding (index = counter * PRIME + i * STRIDE mod grid size)
VORONOI_SEED_PRIME = 7919
VORONOI_SEED_STRIDE = 997

# Content-seeded LCG used for deterministic shuffles
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = (1 << 64) - 1
SHUFFLE_SEED_MULTIPLIER = 31
SHUFFLE_Q_WEIGHT = 17

# World-space conversion (pointy-top hexes)
HEX_SIZE_SCALE = 1.34
DEFAULT_HEX_SIZE = 1.0

# Town layout pipeline
DEFAULT_LAYOUT_RADIUS = 30
ROAD_RATIO = 0.1         # Share of valid terrain turned into roads
ROAD_SEED_RATIO = 0.25   # Share of the road target used as seed points
BUILDING_DENSITY = {
    "sparse": 0.05,
    "normal": 0.10,
    "dense": 0.15,
}
DEFAULT_MIN_ADJACENT_ROADS = 1
