"""
MongoDB connection of the dummy component.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from ..config import DummyConfig
from ..constants import DEFAULT_MAX_IDLE_TIME_MS, DEFAULT_SERVER_SELECTION_TIMEOUT_MS
from ..exceptions import InitializationError
from ..observability import timed_operation

logger = logging.getLogger(__name__)

APP_NAME = "WENET_DUMMY"


class MongoConnection:
    """The motor client opened with the pool options of a DummyConfig."""

    def __init__(self, config: DummyConfig) -> None:
        self.config = config
        self.client: AsyncIOMotorClient | None = None

    @property
    def connected(self) -> bool:
        return self.client is not None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """The database of the component."""
        if self.client is None:
            raise RuntimeError("MongoConnection not opened. Call open() first.")
        return self.client[self.config.db_name]

    @timed_operation("connection.open")
    async def open(self) -> AsyncIOMotorDatabase:
        """
        Create the client and wait until the server answers a ping.

        Opening an already opened connection returns its database.

        Raises:
            InitializationError: If the server does not answer
        """
        if self.client is not None:
            return self.db

        client = AsyncIOMotorClient(
            self.config.mongo_uri,
            appname=APP_NAME,
            maxPoolSize=self.config.max_pool_size,
            minPoolSize=self.config.min_pool_size,
            maxIdleTimeMS=DEFAULT_MAX_IDLE_TIME_MS,
            serverSelectionTimeoutMS=DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise InitializationError(
                f"Failed to connect to MongoDB: {e}",
                mongo_uri=self.config.mongo_uri,
                db_name=self.config.db_name,
                context={"error_type": type(e).__name__},
            ) from e

        self.client = client
        logger.info(
            f"Connected to '{self.config.db_name}' "
            f"(pool {self.config.min_pool_size}-{self.config.max_pool_size})"
        )
        return self.db

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")
