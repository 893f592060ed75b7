"""Console output helpers shared by the CLI commands."""

import sys
from typing import NoReturn

import click

from colorsync.exceptions import format_error_for_display
from colorsync.models import ColorState


def exit_with_error(error: Exception) -> NoReturn:
    """Show a formatted error (with recovery hint) on stderr and exit with code 1."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)


def format_state(state: ColorState, hsl_synced: bool = True, cmyk_synced: bool = True) -> str:
    """
    Render a color state as aligned text lines.

    Models excluded from synchronization are marked as stale.
    """
    h, s, v = state.hsv.to_tuple()
    hh, hs, hl = state.hsl.to_tuple()
    c, m, y, k = state.cmyk.to_tuple()

    lines = [
        f"RGB    {state.rgb.r}, {state.rgb.g}, {state.rgb.b}",
        f"HSV    {h:.1f}°, {s:.1%}, {v:.1%}",
        f"HSL    {hh:.1f}°, {hs:.1%}, {hl:.1%}" + ("" if hsl_synced else "  (not synced)"),
        f"CMYK   {c:.1%}, {m:.1%}, {y:.1%}, {k:.1%}" + ("" if cmyk_synced else "  (not synced)"),
        f"Hex    {state.hex}",
        f"Alpha  {state.alpha:.3f}",
    ]
    return "\n".join(lines)
