"""View-model exposing the synchronization hub to a UI layer."""

import logging

from colorsync.core.hub import ColorSyncHub
from colorsync.models import (
    AlphaModel,
    CmykModel,
    HexModel,
    HslModel,
    HsvModel,
    ObservableObject,
    PickerConfig,
    RgbModel,
)

logger = logging.getLogger(__name__)


class ColorPickerViewModel(ObservableObject):
    """
    Main view-model for binding a color picker UI to the color models.

    The view-model's flags are authoritative: the HSL/CMYK settings from
    the config (both off by default) are pushed into the hub at
    construction, so the two never disagree.

    Example:
        ```python
        vm = ColorPickerViewModel(PickerConfig(enable_hsl=True))
        vm.select_color(255, 0, 0, 0.5)
        vm.hex.hex      # '#80FF0000'
        vm.hsl.lightness  # 0.5
        ```
    """

    def __init__(self, config: PickerConfig | None = None):
        """
        Initialize the view-model.

        Args:
            config: Picker defaults (None = PickerConfig())
        """
        super().__init__()
        config = config or PickerConfig()

        self._hub = ColorSyncHub()
        self._enable_hsl = config.enable_hsl
        self._enable_cmyk = config.enable_cmyk
        self._hub.enable_hsl = self._enable_hsl
        self._hub.enable_cmyk = self._enable_cmyk

        if config.initial_color is not None:
            self._hub.hex.hex = config.initial_color

        logger.info(
            f"ColorPickerViewModel initialized (hsl={self._enable_hsl}, cmyk={self._enable_cmyk})"
        )

    @property
    def hub(self) -> ColorSyncHub:
        return self._hub

    @property
    def rgb(self) -> RgbModel:
        """Model for RGB components."""
        return self._hub.rgb

    @property
    def hsv(self) -> HsvModel:
        """Model for HSV components."""
        return self._hub.hsv

    @property
    def hsl(self) -> HslModel:
        """Model for HSL components."""
        return self._hub.hsl

    @property
    def cmyk(self) -> CmykModel:
        """Model for CMYK components."""
        return self._hub.cmyk

    @property
    def hex(self) -> HexModel:
        """Model for the hex value."""
        return self._hub.hex

    @property
    def alpha(self) -> AlphaModel:
        """Model for the alpha value."""
        return self._hub.alpha

    @property
    def enable_hsl(self) -> bool:
        """Whether HSL is recalculated on every change."""
        return self._enable_hsl

    @enable_hsl.setter
    def enable_hsl(self, value: bool) -> None:
        if self._enable_hsl == value:
            return
        self._enable_hsl = value
        self._hub.enable_hsl = value
        self._notify_property_changed("enable_hsl")

    @property
    def enable_cmyk(self) -> bool:
        """Whether CMYK is recalculated on every change."""
        return self._enable_cmyk

    @enable_cmyk.setter
    def enable_cmyk(self, value: bool) -> None:
        if self._enable_cmyk == value:
            return
        self._enable_cmyk = value
        self._hub.enable_cmyk = value
        self._notify_property_changed("enable_cmyk")

    def select_color(self, r: int, g: int, b: int, alpha: float = 1.0) -> None:
        """
        Select a new color from RGB bytes.

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
            alpha: Opacity (0-1)
        """
        self._hub.set_color(r, g, b, alpha)
        self._notify_property_changed("alpha")

    def select_hsv_color(
        self, hue: float, saturation: float, value: float, alpha: float = 1.0
    ) -> None:
        """
        Select a new color from HSV components.

        Args:
            hue: Hue in degrees (0-360)
            saturation: Saturation (0-1)
            value: Value/brightness (0-1)
            alpha: Opacity (0-1)
        """
        self._hub.set_hsv_color(hue, saturation, value, alpha)
        self._notify_property_changed("alpha")
