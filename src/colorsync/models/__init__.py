"""Color models for the picker engine."""

from .alpha import AlphaModel
from .base import ColorModule, ObservableObject
from .cmyk import CmykModel
from .color import CmykColor, ColorState, HslColor, HsvColor, RgbColor
from .config import PickerConfig
from .hex import HexModel
from .hsl import HslModel
from .hsv import HsvModel
from .rgb import RgbModel

__all__ = [
    "AlphaModel",
    "CmykColor",
    "CmykModel",
    "ColorModule",
    # Snapshots
    "ColorState",
    "HexModel",
    "HslColor",
    "HslModel",
    "HsvColor",
    "HsvModel",
    # Observable base classes
    "ObservableObject",
    # Config
    "PickerConfig",
    "RgbColor",
    # Unit models
    "RgbModel",
]
