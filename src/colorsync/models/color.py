"""Immutable color value objects.

Read-only snapshots of the engine's state, used for export (CLI output,
JSON) and comparisons. They are never written back into the live models.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from colorsync.utils.conversions import is_valid_hex


class RgbColor(BaseModel):
    """Standard 8-bit RGB color."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")


class HsvColor(BaseModel):
    """Hue (degrees), saturation and value."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, le=360, description="Hue (0-360 degrees)")
    s: float = Field(ge=0, le=1, description="Saturation (0-1)")
    v: float = Field(ge=0, le=1, description="Value (0-1)")

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.v)


class HslColor(BaseModel):
    """Hue (degrees), saturation and lightness."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, le=360, description="Hue (0-360 degrees)")
    s: float = Field(ge=0, le=1, description="Saturation (0-1)")
    l: float = Field(ge=0, le=1, description="Lightness (0-1)")

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)


class CmykColor(BaseModel):
    """Cyan, magenta, yellow and key (black), each 0-1."""

    model_config = ConfigDict(frozen=True)

    c: float = Field(ge=0, le=1, description="Cyan (0-1)")
    m: float = Field(ge=0, le=1, description="Magenta (0-1)")
    y: float = Field(ge=0, le=1, description="Yellow (0-1)")
    k: float = Field(ge=0, le=1, description="Key/black (0-1)")

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)


class ColorState(BaseModel):
    """Snapshot of every color model owned by a hub."""

    model_config = ConfigDict(frozen=True)

    rgb: RgbColor
    hsv: HsvColor
    hsl: HslColor
    cmyk: CmykColor
    hex: str = Field(description="Hex color (#RRGGBB or #AARRGGBB)")
    alpha: float = Field(ge=0, le=1, description="Opacity (0-1)")

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Ensure the hex string is #RRGGBB or #AARRGGBB."""
        if not is_valid_hex(v):
            raise ValueError("Hex color must be #RRGGBB or #AARRGGBB")
        return v
