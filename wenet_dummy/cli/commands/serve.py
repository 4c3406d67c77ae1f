"""
Serve command for CLI.

Runs the HTTP API of the component with uvicorn.
"""

import click
import uvicorn

from ...app import create_app
from ...config import DummyConfig
from ...exceptions import ConfigurationError
from ...observability import configure_logging


@click.command()
@click.option("--host", default=None, help="Interface to listen (defaults to WENET_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen (defaults to WENET_PORT)")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
    help="Log level",
)
def serve(host: str | None, port: int | None, log_level: str) -> None:
    """
    Start the HTTP API of the component.

    Examples:
        wenet-dummy serve
        wenet-dummy serve --host 127.0.0.1 --port 8081
    """
    config = DummyConfig(host=host, port=port)
    try:
        config.validate()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(log_level.upper())
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=log_level.lower())
