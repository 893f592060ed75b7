"""colorsync: Color-model synchronization engine for color pickers."""

__version__ = "0.1.0"

from .core import ColorPickerViewModel, ColorSyncHub
from .models import PickerConfig

__all__ = [
    "ColorPickerViewModel",
    "ColorSyncHub",
    "PickerConfig",
]
