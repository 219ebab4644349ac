"""
Command-line interface for payoffcurve.

Provides the CLI command group and registers individual subcommands.
"""

from __future__ import annotations

import logging

import click

from .. import __version__
from .analyze import analyze
from .serve import serve

LOG_LEVEL_ENV_VAR = "PAYOFFCURVE_LOG_LEVEL"


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar=LOG_LEVEL_ENV_VAR,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def main(verbose, log_level):
    """payoffcurve - Options portfolio payoff analysis tool."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


# Register CLI subcommands
main.add_command(analyze)
main.add_command(serve)


if __name__ == "__main__":
    main()
