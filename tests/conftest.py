"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorsync.core import ColorPickerViewModel, ColorSyncHub


class PropertyRecorder:
    """PropertyObserver that records every (sender, name) it receives."""

    def __init__(self):
        self.calls: list[tuple[object, str]] = []

    def on_property_changed(self, sender: object, name: str) -> None:
        self.calls.append((sender, name))

    @property
    def names(self) -> list[str]:
        return [name for _, name in self.calls]


class ChangeRecorder:
    """ChangeObserver that counts external-change signals."""

    def __init__(self):
        self.senders: list[object] = []

    def on_changed(self, sender: object) -> None:
        self.senders.append(sender)

    @property
    def count(self) -> int:
        return len(self.senders)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def property_recorder():
    """Create a recording property observer."""
    return PropertyRecorder()


@pytest.fixture
def change_recorder():
    """Create a recording change observer."""
    return ChangeRecorder()


@pytest.fixture
def hub():
    """Create a hub with HSL and CMYK synchronization enabled (its defaults)."""
    return ColorSyncHub()


@pytest.fixture
def hub_rgb_only():
    """Create a hub with HSL and CMYK synchronization disabled."""
    hub = ColorSyncHub()
    hub.enable_hsl = False
    hub.enable_cmyk = False
    return hub


@pytest.fixture
def view_model():
    """Create a view-model with default configuration."""
    return ColorPickerViewModel()
