"""Color input exceptions raised by the command line front-end."""

from typing import Any

from .base import ColorSyncError


class InvalidColorError(ColorSyncError):
    """A color value given by the user cannot be interpreted."""

    def __init__(self, model: str, value: Any, reason: str):
        """
        Initialize invalid color error.

        Args:
            model: Color model the value was meant for (e.g., "hex")
            value: The rejected value
            reason: Why it was rejected
        """
        recovery = None
        if model == "hex":
            recovery = "Use #RRGGBB or #AARRGGBB, e.g. #FF0000 or #80FF0000"

        super().__init__(
            user_message=f"Invalid {model} color {value!r}: {reason}",
            technical_message=f"Rejected {model} input {value!r}: {reason}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.model = model
        self.value = value


class ColorInputError(ColorSyncError):
    """The command line was given no color, or more than one."""

    def __init__(self, given: list[str]):
        """
        Initialize color input error.

        Args:
            given: Names of the color options that were supplied
        """
        if given:
            user_msg = f"Only one color input may be given, got: {', '.join(given)}"
        else:
            user_msg = "No color input given"

        super().__init__(
            user_message=user_msg,
            recoverable=True,
            recovery_hint="Pass exactly one of --rgb, --hsv, --hsl, --cmyk or --hex",
        )
        self.given = given
