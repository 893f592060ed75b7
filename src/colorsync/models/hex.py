"""Hexadecimal unit model."""

import logging

from colorsync.models.base import ColorModule
from colorsync.utils.conversions import is_valid_hex, parse_hex_argb

logger = logging.getLogger(__name__)


class HexModel(ColorModule):
    """
    Color as a ``#RRGGBB`` or ``#AARRGGBB`` string.

    Anything else assigned to ``hex`` is ignored entirely: the value stays
    as it was and no notification fires. A valid string is kept verbatim
    (case and length preserved); the hub writes the canonical uppercase
    ``#AARRGGBB`` form.
    """

    def __init__(self) -> None:
        super().__init__()
        self._hex = "#FFFFFFFF"

    @property
    def hex(self) -> str:
        """Hex color string."""
        return self._hex

    @hex.setter
    def hex(self, value: str | None) -> None:
        if value is None or self._hex == value:
            return
        if not is_valid_hex(value):
            logger.debug(f"Ignoring invalid hex color: {value!r}")
            return
        self._hex = value
        self._notify_and_raise_changed("hex")

    def set_from_hub(self, hex_value: str) -> None:
        """Write a hex string on behalf of the hub (invalid strings are ignored)."""
        self._set_suppress_changed(True)
        try:
            if self._hex != hex_value and is_valid_hex(hex_value):
                self._hex = hex_value
                self._notify_property_changed("hex")
        finally:
            self._set_suppress_changed(False)

    def to_rgba(self) -> tuple[int, int, int, float]:
        """
        Decode the current string into RGB bytes and a 0-1 alpha.

        A 6-digit value is fully opaque.

        Example:
            >>> model = HexModel()
            >>> model.hex = "#80FF00FF"
            >>> model.to_rgba()
            (255, 0, 255, 0.5019607843137255)
        """
        a, r, g, b = parse_hex_argb(self._hex)
        return r, g, b, a / 255.0
