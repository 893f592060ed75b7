"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest

from colorsync.exceptions import (
    ColorInputError,
    ColorSyncError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    ErrorContext,
    InvalidColorError,
    format_error_for_display,
)


class TestColorSyncError:
    """Test the base exception."""

    @pytest.mark.unit
    def test_messages(self):
        error = ColorSyncError("Something failed", recovery_hint="Try again")

        assert str(error) == "Something failed"
        assert error.technical_message == "Something failed"
        assert error.get_full_message() == "Something failed\n\nSuggestion: Try again"

    @pytest.mark.unit
    def test_full_message_without_hint(self):
        assert ColorSyncError("Oops").get_full_message() == "Oops"

    @pytest.mark.unit
    def test_hierarchy(self):
        assert issubclass(ConfigValidationError, ConfigurationError)
        assert issubclass(ConfigurationError, ColorSyncError)
        assert issubclass(InvalidColorError, ColorSyncError)
        assert issubclass(ColorInputError, ColorSyncError)


class TestColorErrors:
    """Test command line input errors."""

    @pytest.mark.unit
    def test_invalid_hex(self):
        error = InvalidColorError("hex", "#12", "expected #RRGGBB or #AARRGGBB")

        assert error.user_message == "Invalid hex color '#12': expected #RRGGBB or #AARRGGBB"
        assert error.recoverable is True
        assert "#80FF0000" in error.recovery_hint

    @pytest.mark.unit
    def test_no_input(self):
        assert ColorInputError([]).user_message == "No color input given"

    @pytest.mark.unit
    def test_several_inputs(self):
        error = ColorInputError(["rgb", "hex"])
        assert error.user_message == "Only one color input may be given, got: rgb, hex"
        assert "--rgb" in error.recovery_hint


class TestConfigErrors:
    """Test picker configuration errors."""

    @pytest.mark.unit
    def test_flag_hint(self):
        error = ConfigValidationError("enable_cmyk", "maybe", "Input should be a valid boolean", "cfg.json")

        assert error.recovery_hint == "Set 'enable_cmyk' to true or false\nConfig file: cfg.json"

    @pytest.mark.unit
    def test_color_hint(self):
        error = ConfigValidationError("initial_color", "red", "Color must be #RRGGBB or #AARRGGBB")

        assert "#RRGGBB or #AARRGGBB" in error.recovery_hint
        assert "Config file" not in error.recovery_hint

    @pytest.mark.unit
    def test_invalid_json_hint_shows_example(self):
        error = ConfigFileInvalidError("cfg.json", "expected value at line 1 column 1")

        assert error.user_message == "Configuration file has invalid syntax"
        assert "\"initial_color\": \"#FF0000\"" in error.recovery_hint
        assert "expected value" in error.technical_message


class TestErrorContext:
    """Test ErrorContext logging and propagation."""

    @pytest.mark.unit
    def test_re_raises_by_default(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                with ErrorContext("parse value"):
                    raise ValueError("bad")

        assert "Failed to parse value: bad" in caplog.text

    @pytest.mark.unit
    def test_suppresses_when_asked(self):
        with ErrorContext("parse value", re_raise=False) as ctx:
            raise ValueError("bad")

        assert isinstance(ctx.error, ValueError)

    @pytest.mark.unit
    def test_logs_technical_message(self, caplog):
        error = ConfigValidationError("enable_hsl", "maybe", "not a bool")

        with caplog.at_level(logging.ERROR):
            with ErrorContext("load configuration", re_raise=False):
                raise error

        assert "Config validation failed for enable_hsl=maybe" in caplog.text

    @pytest.mark.unit
    def test_no_error(self):
        with ErrorContext("noop") as ctx:
            pass

        assert ctx.error is None


class TestFormatErrorForDisplay:
    """Test display formatting."""

    @pytest.mark.unit
    def test_colorsync_error(self):
        error = ColorInputError([])
        message, hint = format_error_for_display(error)

        assert message == "No color input given"
        assert hint == error.recovery_hint

    @pytest.mark.unit
    def test_other_error(self):
        assert format_error_for_display(ValueError("boom")) == ("ValueError: boom", None)
