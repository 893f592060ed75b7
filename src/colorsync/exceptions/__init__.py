"""
Custom exception hierarchy for colorsync.

The color engine absorbs bad input silently (clamping numbers, ignoring
malformed hex). These exceptions are raised by the outer surfaces only:
configuration loading and the command line.

## Exception Hierarchy

```
ColorSyncError (base)
├── ColorInputError
├── InvalidColorError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All of them carry `user_message`, `technical_message`, `recoverable` and
`recovery_hint`. See `colorsync.exceptions.handlers` for the helpers that
convert and display them.
"""

from .base import ColorSyncError
from .color import ColorInputError, InvalidColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    "ColorInputError",
    # Base
    "ColorSyncError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    # Color input
    "InvalidColorError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
