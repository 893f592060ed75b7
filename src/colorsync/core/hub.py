"""Synchronization hub keeping every color model consistent."""

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager

from colorsync.models import (
    AlphaModel,
    CmykModel,
    ColorState,
    HexModel,
    HslModel,
    HsvModel,
    RgbModel,
)
from colorsync.utils.conversions import (
    clamp,
    clamp01,
    hsv_to_rgb,
    is_valid_hex,
    parse_hex_argb,
    to_hex_argb,
)

logger = logging.getLogger(__name__)


def _has_nan(*values: float) -> bool:
    return any(math.isnan(v) for v in values)


class ColorSyncHub:
    """
    Owns one instance of each color model and keeps them in sync.

    When a model is changed from outside (its public setters), the hub
    converts that model's state to RGB and pushes the derived values into
    every other model through their ``set_from_hub`` path, which refreshes
    the UI without raising the external-change signal again.

    Propagation per trigger:

    | Trigger | Updates |
    |---------|---------|
    | RGB | HSV, HSL*, CMYK*, Hex |
    | HSV | RGB, HSL*, CMYK*, Hex |
    | HSL | RGB, HSV, CMYK*, Hex |
    | CMYK | RGB, HSV, HSL*, Hex |
    | Hex | RGB, HSV, Alpha, HSL*, CMYK* |
    | Alpha | Hex |

    (*) only while ``enable_hsl`` / ``enable_cmyk`` is set. A disabled
    model keeps its last values until a later pass refreshes it.

    Threading:
        Not thread-safe. One synchronization pass runs at a time; the
        ``is_syncing`` guard turns any nested trigger into a no-op. Callers
        using several threads must serialize access.
    """

    def __init__(self) -> None:
        self.rgb = RgbModel()
        self.hsv = HsvModel()
        self.hsl = HslModel()
        self.cmyk = CmykModel()
        self.hex = HexModel()
        self.alpha = AlphaModel()

        self.enable_hsl = True
        self.enable_cmyk = True

        self._is_syncing = False

        for model in (self.rgb, self.hsv, self.hsl, self.cmyk, self.hex, self.alpha):
            model.register_change_observer(self)

        logger.info("ColorSyncHub initialized")

    @property
    def is_syncing(self) -> bool:
        """True while a synchronization pass is running."""
        return self._is_syncing

    @contextmanager
    def _sync_pass(self, trigger: str) -> Iterator[None]:
        self._is_syncing = True
        logger.debug(f"Sync pass started by {trigger}")
        try:
            yield
        finally:
            self._is_syncing = False
            logger.debug(f"Sync pass finished ({trigger})")

    # =================================================================
    # Change handlers
    # =================================================================

    def on_changed(self, sender: object) -> None:
        """Dispatch an external change of one of the owned models."""
        if sender is self.rgb:
            self._on_rgb_changed()
        elif sender is self.hsv:
            self._on_hsv_changed()
        elif sender is self.hsl:
            self._on_hsl_changed()
        elif sender is self.cmyk:
            self._on_cmyk_changed()
        elif sender is self.hex:
            self._on_hex_changed()
        elif sender is self.alpha:
            self._on_alpha_changed()
        else:
            logger.warning(f"Change notification from unknown model: {sender}")

    def _on_rgb_changed(self) -> None:
        if self._is_syncing:
            return

        with self._sync_pass("rgb"):
            r, g, b = self.rgb.to_tuple()

            self.hsv.from_rgb(r, g, b)
            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def _on_hsv_changed(self) -> None:
        if self._is_syncing:
            return

        with self._sync_pass("hsv"):
            r, g, b = self.hsv.to_rgb()
            self.rgb.set_from_hub(r, g, b)

            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def _on_hsl_changed(self) -> None:
        if self._is_syncing:
            return

        with self._sync_pass("hsl"):
            r, g, b = self.hsl.to_rgb()
            self.rgb.set_from_hub(r, g, b)

            self.hsv.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def _on_cmyk_changed(self) -> None:
        if self._is_syncing:
            return

        with self._sync_pass("cmyk"):
            r, g, b = self.cmyk.to_rgb()
            self.rgb.set_from_hub(r, g, b)

            self.hsv.from_rgb(r, g, b)
            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def _on_hex_changed(self) -> None:
        if self._is_syncing:
            return

        text = self.hex.hex
        if not is_valid_hex(text):
            logger.debug(f"Ignoring invalid hex in sync pass: {text!r}")
            return

        with self._sync_pass("hex"):
            a, r, g, b = parse_hex_argb(text)

            self.rgb.set_from_hub(r, g, b)
            self.hsv.from_rgb(r, g, b)
            self.alpha.set_from_hub(a / 255.0)
            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)

    def _on_alpha_changed(self) -> None:
        if self._is_syncing:
            return

        with self._sync_pass("alpha"):
            r, g, b = self.rgb.to_tuple()
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    # =================================================================
    # Public API
    # =================================================================

    def set_color(self, r: int, g: int, b: int, alpha: float) -> None:
        """
        Set every model from RGB bytes and an opacity in one pass.

        Does nothing when called from inside a running pass, or when any
        argument is NaN.

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
            alpha: Opacity (0-1)
        """
        if self._is_syncing:
            return
        if _has_nan(r, g, b, alpha):
            logger.debug(f"Ignoring set_color with NaN: {(r, g, b, alpha)}")
            return

        with self._sync_pass("set_color"):
            self.rgb.set_from_hub(r, g, b)
            r, g, b = self.rgb.to_tuple()

            self.hsv.from_rgb(r, g, b)
            self.alpha.set_from_hub(alpha)
            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def set_hsv_color(self, hue: float, saturation: float, value: float, alpha: float) -> None:
        """
        Set every model from HSV and an opacity in one pass.

        The HSV model keeps the given components (hue clamped to 0-360,
        saturation/value to 0-1) rather than values recomputed from RGB,
        so a hue chosen on a gray or black color is not lost.
        """
        if self._is_syncing:
            return
        if _has_nan(hue, saturation, value, alpha):
            logger.debug(f"Ignoring set_hsv_color with NaN: {(hue, saturation, value, alpha)}")
            return

        with self._sync_pass("set_hsv_color"):
            h = clamp(hue, 0.0, 360.0)
            s = clamp01(saturation)
            v = clamp01(value)

            self.hsv.set_from_hub(h, s, v)
            r, g, b = hsv_to_rgb(h, s, v)
            self.rgb.set_from_hub(r, g, b)

            self.alpha.set_from_hub(alpha)
            if self.enable_hsl:
                self.hsl.from_rgb(r, g, b)
            if self.enable_cmyk:
                self.cmyk.from_rgb(r, g, b)
            self.hex.set_from_hub(to_hex_argb(r, g, b, self.alpha.alpha))

    def snapshot(self) -> ColorState:
        """Return an immutable copy of every model's current values."""
        return ColorState(
            rgb=self.rgb.to_model(),
            hsv=self.hsv.to_model(),
            hsl=self.hsl.to_model(),
            cmyk=self.cmyk.to_model(),
            hex=self.hex.hex,
            alpha=self.alpha.alpha,
        )
