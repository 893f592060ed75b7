"""Convert command implementation.

The given color is written through the unit models' public setters, the
same way a picker UI writes user input, so the synchronization hub does
all of the conversion work.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from colorsync.cli.output import exit_with_error, format_state
from colorsync.core import ColorPickerViewModel
from colorsync.exceptions import ColorInputError, ColorSyncError, ErrorContext, InvalidColorError
from colorsync.models import PickerConfig
from colorsync.utils.conversions import is_valid_hex

logger = logging.getLogger(__name__)


def apply_input(
    vm: ColorPickerViewModel,
    rgb: Optional[tuple[int, int, int]] = None,
    hsv: Optional[tuple[float, float, float]] = None,
    hsl: Optional[tuple[float, float, float]] = None,
    cmyk: Optional[tuple[float, float, float, float]] = None,
    hex_value: Optional[str] = None,
    alpha: Optional[float] = None,
) -> None:
    """
    Write exactly one color input into the view-model's models.

    Raises:
        ColorInputError: If no input or more than one input is given
        InvalidColorError: If the hex string is malformed
    """
    given = [
        name
        for name, value in (("rgb", rgb), ("hsv", hsv), ("hsl", hsl), ("cmyk", cmyk), ("hex", hex_value))
        if value is not None
    ]
    if len(given) != 1:
        raise ColorInputError(given)

    if rgb is not None:
        vm.select_color(*rgb, alpha=1.0 if alpha is None else alpha)
    elif hsv is not None:
        vm.select_hsv_color(*hsv, alpha=1.0 if alpha is None else alpha)
    elif hsl is not None:
        if alpha is not None:
            vm.alpha.alpha = alpha
        # A model left out of sync may be stale; start from the current color
        vm.hsl.from_rgb(*vm.rgb.to_tuple())
        vm.hsl.hue, vm.hsl.saturation, vm.hsl.lightness = hsl
    elif cmyk is not None:
        if alpha is not None:
            vm.alpha.alpha = alpha
        vm.cmyk.from_rgb(*vm.rgb.to_tuple())
        vm.cmyk.cyan, vm.cmyk.magenta, vm.cmyk.yellow, vm.cmyk.key = cmyk
    else:
        if not is_valid_hex(hex_value):
            raise InvalidColorError("hex", hex_value, "expected #RRGGBB or #AARRGGBB")
        vm.hex.hex = hex_value
        if alpha is not None:
            vm.alpha.alpha = alpha

    logger.info(f"Applied {given[0]} input: {vm.hex.hex}")


@click.command()
@click.option('--rgb', nargs=3, type=int, default=None, metavar='R G B',
              help='Red, green, blue (0-255)')
@click.option('--hsv', nargs=3, type=float, default=None, metavar='H S V',
              help='Hue (0-360), saturation and value (0-1)')
@click.option('--hsl', 'hsl_input', nargs=3, type=float, default=None, metavar='H S L',
              help='Hue (0-360), saturation and lightness (0-1)')
@click.option('--cmyk', 'cmyk_input', nargs=4, type=float, default=None, metavar='C M Y K',
              help='Cyan, magenta, yellow, key (0-1)')
@click.option('--hex', 'hex_value', type=str, default=None,
              help='Hex color, #RRGGBB or #AARRGGBB')
@click.option('--alpha', '-a', type=float, default=None,
              help='Opacity (0-1); overrides the alpha of a hex input')
@click.option('--sync-hsl/--no-sync-hsl', default=True,
              help='Keep HSL in sync (default: on)')
@click.option('--sync-cmyk/--no-sync-cmyk', default=True,
              help='Keep CMYK in sync (default: on)')
@click.option('--json', 'as_json', is_flag=True,
              help='Print the result as JSON')
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file providing the starting color'
)
def convert(
    rgb: Optional[tuple[int, int, int]],
    hsv: Optional[tuple[float, float, float]],
    hsl_input: Optional[tuple[float, float, float]],
    cmyk_input: Optional[tuple[float, float, float, float]],
    hex_value: Optional[str],
    alpha: Optional[float],
    sync_hsl: bool,
    sync_cmyk: bool,
    as_json: bool,
    config_path: Optional[Path],
):
    """
    Convert a color given in one model into all the others.

    Out-of-range numbers are clamped, never rejected: --rgb 300 0 0 is red
    and a hue above 360 is treated as 360.

    \b
    Examples:
      colorsync convert --rgb 10 20 30 --alpha 0.75
      colorsync convert --hsl 240 1 0.5
      colorsync convert --cmyk 0 0 1 0 --json
    """
    try:
        with ErrorContext("convert color", logger_instance=logger):
            config_obj = PickerConfig.load_or_default(config_path)
            config_obj = config_obj.model_copy(
                update={"enable_hsl": sync_hsl, "enable_cmyk": sync_cmyk}
            )

            vm = ColorPickerViewModel(config_obj)
            apply_input(
                vm,
                rgb=rgb,
                hsv=hsv,
                hsl=hsl_input,
                cmyk=cmyk_input,
                hex_value=hex_value,
                alpha=alpha,
            )
    except ColorSyncError as e:
        exit_with_error(e)

    state = vm.hub.snapshot()
    if as_json:
        click.echo(state.model_dump_json(indent=2))
    else:
        click.echo(format_state(state, hsl_synced=sync_hsl, cmyk_synced=sync_cmyk))
