"""
Serve command for payoffcurve CLI.

Runs the HTTP service under uvicorn.
"""

from __future__ import annotations

import logging

import click
import uvicorn

from ..web import create_app

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
HOST_ENV_VAR = "PAYOFFCURVE_HOST"
PORT_ENV_VAR = "PAYOFFCURVE_PORT"

logger = logging.getLogger(__name__)


@click.command()
@click.option("--host", default=DEFAULT_HOST, show_default=True, envvar=HOST_ENV_VAR)
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, envvar=PORT_ENV_VAR)
def serve(host, port):
    """Serve the payoff analysis API."""
    logger.info("Starting payoffcurve on %s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port)
