"""Config command implementation."""

import logging
from pathlib import Path
from typing import Optional

import click

from colorsync.cli.output import exit_with_error
from colorsync.exceptions import ColorSyncError, ErrorContext
from colorsync.models import PickerConfig
from colorsync.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)
def config(config_path: Optional[Path]):
    """Show the effective picker configuration as JSON."""
    try:
        with ErrorContext("load configuration", logger_instance=logger):
            config_obj = PickerConfig.load_or_default(config_path)
    except ColorSyncError as e:
        exit_with_error(e)

    click.echo(config_obj.model_dump_json(indent=2))
