"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorsync import __version__

from .commands import config, convert

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log everything at DEBUG level
        log_file: Log to this file (rotating) instead of stderr
        log_level: Log level used together with log_file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit level wins when logging to a file
    if log_file and not debug:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.set_name("colorsync")

    # Replace a handler left by a previous invocation in the same process
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == "colorsync":
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file or 'stderr'}")


@click.group()
@click.version_option(version=__version__, prog_name="colorsync")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    colorsync - keep RGB, HSV, HSL, CMYK, hex and alpha in sync.

    Give a color in any one model and see it in all the others, computed
    by the same engine a color picker UI uses.

    \b
    Examples:
      # Pure red in every model
      colorsync convert --rgb 255 0 0

    \b
      # Half transparent magenta from hex, as JSON
      colorsync convert --hex "#80FF00FF" --json

    \b
      # HSV input with a custom opacity
      colorsync convert --hsv 210 0.5 0.8 --alpha 0.25

    \b
      # Show the effective configuration
      colorsync config
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(convert)
cli.add_command(config)

if __name__ == "__main__":
    cli()
