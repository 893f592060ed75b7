"""Root of the colorsync exception hierarchy.

Bad color values never reach this module: the models clamp numbers and
drop malformed hex. Only the picker configuration and the command line
raise, and they do it with a ColorSyncError so the CLI can print one
line for the user and a hint on what to type instead.
"""

from typing import Optional


class ColorSyncError(Exception):
    """
    Error raised by colorsync's outer surfaces (config file, CLI input).

    Attributes:
        user_message: One line shown after ``ERROR:`` on the command line
        technical_message: What goes to the log, e.g. the rejected value
        recoverable: True when re-running with corrected input will work
        recovery_hint: What to change, e.g. the accepted hex formats
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
