"""Color picker configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from colorsync.exceptions import wrap_pydantic_error
from colorsync.utils.conversions import is_valid_hex

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".colorsync" / "config.json"


class PickerConfig(BaseModel):
    """Defaults for a freshly created color picker."""

    enable_hsl: bool = Field(
        default=False,
        description="Keep the HSL model in sync on every change",
    )
    enable_cmyk: bool = Field(
        default=False,
        description="Keep the CMYK model in sync on every change",
    )
    initial_color: str | None = Field(
        default=None,
        description="Starting color as #RRGGBB or #AARRGGBB (None = opaque white)",
    )

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str | None) -> str | None:
        """Ensure the initial color is a valid hex string."""
        if v is not None and not is_valid_hex(v):
            raise ValueError("Color must be #RRGGBB or #AARRGGBB")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorsync/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.info(f"No config file at {path}, using defaults")
            return cls()

        try:
            config = cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e

        logger.info(f"Loaded config from {path}")
        return config
