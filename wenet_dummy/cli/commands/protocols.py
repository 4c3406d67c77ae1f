"""
Commands to inspect the default protocols.
"""

import click

from ...exceptions import NotFoundError, ValidationError
from ...protocols import load_protocol, protocol_ids
from ..utils import format_protocol_output


@click.group()
def protocols() -> None:
    """Inspect the default interaction protocols."""


@protocols.command("list")
def list_protocols() -> None:
    """
    List the identifiers of the default protocols.

    Examples:
        wenet-dummy protocols list
    """
    for protocol_id in protocol_ids():
        click.echo(protocol_id)


@protocols.command("show")
@click.argument("protocol_id")
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["json", "pretty"], case_sensitive=False),
    default="json",
    help="Output format",
)
def show(protocol_id: str, format_type: str) -> None:
    """
    Show the task type of a default protocol.

    PROTOCOL_ID: Identifier of the protocol (for example ECHO_V1)

    Examples:
        wenet-dummy protocols show ECHO_V1
        wenet-dummy protocols show ASK_4_HELP_V3 --format pretty
    """
    try:
        task_type = load_protocol(protocol_id)
    except NotFoundError as e:
        raise click.ClickException(
            f"{e.message}. Available protocols: {', '.join(protocol_ids())}"
        ) from e
    except ValidationError as e:
        raise click.ClickException(e.message) from e

    click.echo(format_protocol_output(task_type, format_type.lower()))
