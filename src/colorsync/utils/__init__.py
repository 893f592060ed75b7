"""Generic utility modules for colorsync.

- conversions: Pure numeric color-space conversions and hex helpers
- observer: Observer list shared by all notifiers
"""

from .conversions import (
    HEX_PATTERN,
    clamp,
    clamp01,
    cmyk_to_rgb,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    is_valid_hex,
    parse_hex_argb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    to_hex_argb,
)
from .observer import ObserverManager

__all__ = [
    "HEX_PATTERN",
    "ObserverManager",
    "clamp",
    "clamp01",
    "cmyk_to_rgb",
    "hsl_to_hsv",
    "hsl_to_rgb",
    "hsv_to_hsl",
    "hsv_to_rgb",
    "is_valid_hex",
    "parse_hex_argb",
    "rgb_to_cmyk",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "to_hex_argb",
]
