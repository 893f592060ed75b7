"""Errors raised while loading the picker configuration file.

- ConfigurationError: the picker config cannot be used
- ConfigFileInvalidError: the file is not valid JSON
- ConfigValidationError: the JSON holds a bad flag or starting color
"""

from typing import Any, Optional

from .base import ColorSyncError


class ConfigurationError(ColorSyncError):
    """The picker configuration cannot be used."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The picker config file is not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Path of the config file
            parse_error: Parser message, e.g. "trailing comma at line 1 column 20"
        """
        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Delete the comma after the last entry in {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"{file_path} must be a JSON object, for example:\n"
                '  {"enable_hsl": true, "enable_cmyk": false, "initial_color": "#FF0000"}'
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A picker setting has the wrong type or an unusable color."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Setting name ("enable_hsl", "initial_color", ...)
            value: The rejected value
            error_msg: Validator message
            file_path: Config file the value came from, if any
        """
        if "initial_color" in field:
            recovery = "Set 'initial_color' to a color written as #RRGGBB or #AARRGGBB"
        elif field == "multiple fields":
            recovery = "Fix each setting listed above"
        elif field.startswith("enable_"):
            recovery = f"Set '{field}' to true or false"
        else:
            recovery = f"Fix the '{field}' setting"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
