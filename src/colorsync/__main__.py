"""Entry point for ``python -m colorsync``."""

from colorsync.cli.main import cli

if __name__ == "__main__":
    cli()
