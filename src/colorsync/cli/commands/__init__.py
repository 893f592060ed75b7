"""CLI commands for colorsync."""

from .config import config
from .convert import convert

__all__ = ["config", "convert"]
