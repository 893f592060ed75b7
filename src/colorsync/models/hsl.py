"""HSL unit model."""

import math

from colorsync.models.base import HUE_EPSILON, UNIT_EPSILON, ColorModule
from colorsync.models.color import HslColor
from colorsync.utils.conversions import clamp, clamp01, hsl_to_rgb, rgb_to_hsl


class HslModel(ColorModule):
    """
    Hue, saturation and lightness.

    Hue is clamped (not wrapped) to 0-360 degrees on assignment; saturation
    and lightness are clamped to 0-1. Writes within 1e-5 degrees (hue) or 1e-7
    (saturation/lightness) of the current value are ignored, as is NaN.
    """

    def __init__(self) -> None:
        super().__init__()
        self._hue = 0.0
        self._saturation = 0.0
        self._lightness = 1.0

    @property
    def hue(self) -> float:
        """Hue in degrees (0-360)."""
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        if math.isnan(value):
            return
        clamped = clamp(value, 0.0, 360.0)
        if abs(clamped - self._hue) < HUE_EPSILON:
            return
        self._hue = clamped
        self._notify_and_raise_changed("hue")

    @property
    def saturation(self) -> float:
        """Saturation (0-1)."""
        return self._saturation

    @saturation.setter
    def saturation(self, value: float) -> None:
        if math.isnan(value):
            return
        clamped = clamp01(value)
        if abs(clamped - self._saturation) < UNIT_EPSILON:
            return
        self._saturation = clamped
        self._notify_and_raise_changed("saturation")

    @property
    def lightness(self) -> float:
        """Lightness (0-1)."""
        return self._lightness

    @lightness.setter
    def lightness(self, value: float) -> None:
        if math.isnan(value):
            return
        clamped = clamp01(value)
        if abs(clamped - self._lightness) < UNIT_EPSILON:
            return
        self._lightness = clamped
        self._notify_and_raise_changed("lightness")

    def set_from_hub(self, h: float, s: float, l: float) -> None:
        """Write all three components at once on behalf of the hub."""
        self._set_suppress_changed(True)
        try:
            hue_changed = self._hue != h
            saturation_changed = self._saturation != s
            lightness_changed = self._lightness != l

            self._hue = h
            self._saturation = s
            self._lightness = l

            if hue_changed:
                self._notify_property_changed("hue")
            if saturation_changed:
                self._notify_property_changed("saturation")
            if lightness_changed:
                self._notify_property_changed("lightness")
        finally:
            self._set_suppress_changed(False)

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert the current components to RGB bytes."""
        return hsl_to_rgb(self._hue, self._saturation, self._lightness)

    def from_rgb(self, r: int, g: int, b: int) -> None:
        """Recompute the components from RGB bytes through the hub path."""
        self.set_from_hub(*rgb_to_hsl(r, g, b))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self._hue, self._saturation, self._lightness)

    def to_model(self) -> HslColor:
        """Snapshot the current components."""
        return HslColor(h=self._hue, s=self._saturation, l=self._lightness)
