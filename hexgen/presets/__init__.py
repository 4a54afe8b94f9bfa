"""Layout presets bundled with hexgen."""

from .preset_loader import PresetLoader

__all__ = ["PresetLoader"]
