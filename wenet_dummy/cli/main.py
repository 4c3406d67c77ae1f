"""
Entry point of the wenet-dummy CLI.
"""

import click

from .. import __version__
from .commands import migrate, protocols, serve


@click.group()
@click.version_option(version=__version__, prog_name="wenet-dummy")
def cli() -> None:
    """WeNet dummy component."""


cli.add_command(serve)
cli.add_command(protocols)
cli.add_command(migrate)


if __name__ == "__main__":
    cli()
