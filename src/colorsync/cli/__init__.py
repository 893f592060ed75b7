"""Command line front-end for colorsync."""

from .main import cli

__all__ = ["cli"]
