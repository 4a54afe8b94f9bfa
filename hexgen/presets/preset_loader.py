"""Load and validate layout presets from YAML."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from hexgen import config
from hexgen.schemas import LayoutPreset

logger = logging.getLogger(__name__)


class PresetLoader:
    """Load layout presets from YAML files."""

    def __init__(self, presets_dir: Optional[Path] = None):
        self.presets_dir = Path(presets_dir or config.PRESETS_DIR)

    def load_preset(self, name: str) -> LayoutPreset:
        """Load a single preset by file stem (e.g., 'town')."""
        yaml_path = self.presets_dir / f"{name}.yaml"
        if not yaml_path.exists():
            raise FileNotFoundError(f"Preset not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return LayoutPreset.model_validate(data)

    def load_all(self) -> dict[str, LayoutPreset]:
        """Load all presets from the presets directory, skipping broken files."""
        presets = {}

        for yaml_file in sorted(self.presets_dir.glob("*.yaml")):
            try:
                with open(yaml_file) as f:
                    data = yaml.safe_load(f)

                preset = LayoutPreset.model_validate(data)
                presets[preset.id] = preset
            except Exception as e:
                logger.warning(f"Failed to load {yaml_file}: {e}")

        return presets
