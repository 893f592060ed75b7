"""Color synchronization engine: the hub and its view-model façade."""

from .hub import ColorSyncHub
from .view_model import ColorPickerViewModel

__all__ = ["ColorPickerViewModel", "ColorSyncHub"]
