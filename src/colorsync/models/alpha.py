"""Alpha (opacity) unit model."""

import math

from colorsync.models.base import UNIT_EPSILON, ColorModule
from colorsync.utils.conversions import clamp01


class AlphaModel(ColorModule):
    """Opacity, clamped to 0-1. Independent of the color channels; NaN is ignored."""

    def __init__(self) -> None:
        super().__init__()
        self._alpha = 1.0

    @property
    def alpha(self) -> float:
        """Opacity (0 = transparent, 1 = opaque)."""
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        if math.isnan(value):
            return
        clamped = clamp01(value)
        if abs(clamped - self._alpha) < UNIT_EPSILON:
            return
        self._alpha = clamped
        self._notify_and_raise_changed("alpha")

    def set_from_hub(self, alpha: float) -> None:
        """Write the opacity on behalf of the hub (clamped, epsilon-compared)."""
        self._set_suppress_changed(True)
        try:
            clamped = clamp01(alpha)
            if abs(clamped - self._alpha) >= UNIT_EPSILON:
                self._alpha = clamped
                self._notify_property_changed("alpha")
        finally:
            self._set_suppress_changed(False)
