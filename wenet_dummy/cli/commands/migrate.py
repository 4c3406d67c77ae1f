"""
Migrate command for CLI.

Connects to MongoDB and migrates the stored dummies to the configured
schema version.
"""

import asyncio

import click

from ...config import DummyConfig
from ...core.engine import WeNetDummyEngine
from ...exceptions import ConfigurationError, InitializationError


async def _migrate(config: DummyConfig) -> None:
    # Initializing the engine registers the repositories, which migrates them.
    async with WeNetDummyEngine(config):
        pass


@click.command()
@click.option("--mongo-uri", envvar="MONGO_URI", default=None, help="MongoDB connection URI")
@click.option("--db-name", envvar="DB_NAME", default=None, help="Database name")
@click.option(
    "--schema-version",
    envvar="WENET_SCHEMA_VERSION",
    default=None,
    help="Schema version to stamp on the documents",
)
def migrate(mongo_uri: str | None, db_name: str | None, schema_version: str | None) -> None:
    """
    Migrate the stored documents to the schema version.

    Examples:
        wenet-dummy migrate
        wenet-dummy migrate --mongo-uri mongodb://localhost:27017 --schema-version 1.0.0
    """
    config = DummyConfig(mongo_uri=mongo_uri, db_name=db_name, schema_version=schema_version)
    try:
        asyncio.run(_migrate(config))
    except (ConfigurationError, InitializationError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        click.style(
            f"✅ Documents of '{config.db_name}' migrated to '{config.schema_version}'",
            fg="green",
        )
    )
