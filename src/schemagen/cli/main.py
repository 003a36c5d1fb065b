"""schemagen CLI main entry point.

This module provides the main CLI interface for schemagen.
"""

import click

from schemagen import __version__
from schemagen.config import settings
from schemagen.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="schemagen")
@click.option(
    "--log-level",
    default=settings.log_level,
    show_default=True,
    type=click.Choice(
        ["debug", "info", "warning", "error", "critical"], case_sensitive=False
    ),
    help="Logging level (logs go to stderr).",
)
@click.option(
    "--log-format",
    default=settings.log_format,
    show_default=True,
    type=click.Choice(["console", "json"]),
    help="Log output format.",
)
def cli(log_level: str, log_format: str) -> None:
    """schemagen - generate synthetic data from JSON schemas.

    Reads a schema describing types and constraints and prints random
    data that satisfies it.
    """
    configure_logging(log_level=log_level, log_format=log_format)


# Import and register subcommands
from schemagen.cli.generate import generate  # noqa: E402
from schemagen.cli.validate import validate  # noqa: E402

cli.add_command(generate)
cli.add_command(validate)
