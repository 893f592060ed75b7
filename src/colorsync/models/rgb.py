"""RGB unit model."""

import math

from colorsync.models.base import ColorModule
from colorsync.models.color import RgbColor
from colorsync.utils.conversions import clamp


def _to_byte(value: int) -> int:
    return int(clamp(value, 0, 255))


class RgbModel(ColorModule):
    """
    Red, green and blue components as bytes (0-255).

    RGB is the canonical representation: every other model converts to and
    from it. Assigned values are clamped to 0-255 and truncated to int.
    """

    def __init__(self) -> None:
        super().__init__()
        self._red = 255
        self._green = 255
        self._blue = 255

    @property
    def red(self) -> int:
        """Red component (0-255)."""
        return self._red

    @red.setter
    def red(self, value: int) -> None:
        if math.isnan(value):
            return
        value = _to_byte(value)
        if self._red == value:
            return
        self._red = value
        self._notify_and_raise_changed("red")

    @property
    def green(self) -> int:
        """Green component (0-255)."""
        return self._green

    @green.setter
    def green(self, value: int) -> None:
        if math.isnan(value):
            return
        value = _to_byte(value)
        if self._green == value:
            return
        self._green = value
        self._notify_and_raise_changed("green")

    @property
    def blue(self) -> int:
        """Blue component (0-255)."""
        return self._blue

    @blue.setter
    def blue(self, value: int) -> None:
        if math.isnan(value):
            return
        value = _to_byte(value)
        if self._blue == value:
            return
        self._blue = value
        self._notify_and_raise_changed("blue")

    def set_from_hub(self, r: int, g: int, b: int) -> None:
        """
        Write all three components at once on behalf of the hub.

        Notifies each component that actually changed; never raises the
        external-change signal.
        """
        r, g, b = _to_byte(r), _to_byte(g), _to_byte(b)
        self._set_suppress_changed(True)
        try:
            red_changed = self._red != r
            green_changed = self._green != g
            blue_changed = self._blue != b

            self._red = r
            self._green = g
            self._blue = b

            if red_changed:
                self._notify_property_changed("red")
            if green_changed:
                self._notify_property_changed("green")
            if blue_changed:
                self._notify_property_changed("blue")
        finally:
            self._set_suppress_changed(False)

    def to_tuple(self) -> tuple[int, int, int]:
        return (self._red, self._green, self._blue)

    def to_model(self) -> RgbColor:
        """Snapshot the current components."""
        return RgbColor(r=self._red, g=self._green, b=self._blue)
