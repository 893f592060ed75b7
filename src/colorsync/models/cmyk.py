"""CMYK unit model."""

import math

from colorsync.models.base import UNIT_EPSILON, ColorModule
from colorsync.models.color import CmykColor
from colorsync.utils.conversions import clamp01, hsv_to_rgb, rgb_to_cmyk


class CmykModel(ColorModule):
    """Cyan, magenta, yellow and key (black) components, each clamped to 0-1."""

    def __init__(self) -> None:
        super().__init__()
        self._cyan = 0.0
        self._magenta = 0.0
        self._yellow = 0.0
        self._key = 0.0

    @property
    def cyan(self) -> float:
        """Cyan component (0-1)."""
        return self._cyan

    @cyan.setter
    def cyan(self, value: float) -> None:
        if math.isnan(value):
            return
        v = clamp01(value)
        if abs(v - self._cyan) < UNIT_EPSILON:
            return
        self._cyan = v
        self._notify_and_raise_changed("cyan")

    @property
    def magenta(self) -> float:
        """Magenta component (0-1)."""
        return self._magenta

    @magenta.setter
    def magenta(self, value: float) -> None:
        if math.isnan(value):
            return
        v = clamp01(value)
        if abs(v - self._magenta) < UNIT_EPSILON:
            return
        self._magenta = v
        self._notify_and_raise_changed("magenta")

    @property
    def yellow(self) -> float:
        """Yellow component (0-1)."""
        return self._yellow

    @yellow.setter
    def yellow(self, value: float) -> None:
        if math.isnan(value):
            return
        v = clamp01(value)
        if abs(v - self._yellow) < UNIT_EPSILON:
            return
        self._yellow = v
        self._notify_and_raise_changed("yellow")

    @property
    def key(self) -> float:
        """Key (black) component (0-1)."""
        return self._key

    @key.setter
    def key(self, value: float) -> None:
        if math.isnan(value):
            return
        v = clamp01(value)
        if abs(v - self._key) < UNIT_EPSILON:
            return
        self._key = v
        self._notify_and_raise_changed("key")

    def set_from_hub(self, c: float, m: float, y: float, k: float) -> None:
        """Write all four components at once on behalf of the hub."""
        self._set_suppress_changed(True)
        try:
            cyan_changed = self._cyan != c
            magenta_changed = self._magenta != m
            yellow_changed = self._yellow != y
            key_changed = self._key != k

            self._cyan = c
            self._magenta = m
            self._yellow = y
            self._key = k

            if cyan_changed:
                self._notify_property_changed("cyan")
            if magenta_changed:
                self._notify_property_changed("magenta")
            if yellow_changed:
                self._notify_property_changed("yellow")
            if key_changed:
                self._notify_property_changed("key")
        finally:
            self._set_suppress_changed(False)

    def from_rgb(self, r: int, g: int, b: int) -> None:
        """Recompute the components from RGB bytes through the hub path."""
        self.set_from_hub(*rgb_to_cmyk(r, g, b))

    def from_hsv(self, h: float, s: float, v: float) -> None:
        """Recompute the components from HSV (via RGB) through the hub path."""
        self.set_from_hub(*rgb_to_cmyk(*hsv_to_rgb(h, s, v)))

    def to_rgb(self) -> tuple[int, int, int]:
        """
        Convert the current components to RGB bytes.

        Uses ``R = 255 * (1 - C) * (1 - K)`` (same for G/M and B/Y).
        """
        red = (1.0 - self._cyan) * (1.0 - self._key)
        green = (1.0 - self._magenta) * (1.0 - self._key)
        blue = (1.0 - self._yellow) * (1.0 - self._key)
        return (
            int(round(clamp01(red) * 255.0)),
            int(round(clamp01(green) * 255.0)),
            int(round(clamp01(blue) * 255.0)),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self._cyan, self._magenta, self._yellow, self._key)

    def to_model(self) -> CmykColor:
        """Snapshot the current components."""
        return CmykColor(c=self._cyan, m=self._magenta, y=self._yellow, k=self._key)
