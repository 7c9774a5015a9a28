"""
letcalc CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
import sys

import typer

from letcalc import __version__

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"letcalc {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr so results on stdout stay clean."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )
    logging.getLogger("letcalc").setLevel(level)
