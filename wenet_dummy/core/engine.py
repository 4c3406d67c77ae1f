"""
Engine

The orchestration engine of WENET_DUMMY that manages:
- The database connection
- The repositories and their schema migration
- The clients of the other WeNet components
- The resource lifecycle
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pymongo.errors import PyMongoError

from ..components import register_component_clients
from ..config import DummyConfig
from ..di import Container
from ..exceptions import InitializationError, WeNetDummyError
from ..observability import health_report
from ..observability import get_logger as get_contextual_logger
from ..observability import get_metrics_collector
from ..repositories import DummiesRepository
from .connection import MongoConnection

logger = logging.getLogger(__name__)
contextual_logger = get_contextual_logger(__name__)


class WeNetDummyEngine:
    """
    The engine of the WeNet dummy component.

    Example:
        async with WeNetDummyEngine(DummyConfig()) as engine:
            dummy = await engine.dummies_repository.store_dummy(Dummy(value="v"))
    """

    def __init__(self, config: Optional[DummyConfig] = None) -> None:
        """
        Initialize the engine.

        Args:
            config: Configuration of the component (read from the environment if None)
        """
        self.config = config or DummyConfig()
        self._connection = MongoConnection(self.config)
        self._http_client: Optional[httpx.AsyncClient] = None
        self._container: Optional[Container] = None
        self._dummies_repository: Optional[DummiesRepository] = None
        self._initialized = False

    async def initialize(self) -> None:
        """
        Initialize the engine.

        This method:
        1. Validates the configuration
        2. Connects to MongoDB
        3. Registers the repositories, migrating the stored documents
        4. Registers the clients of the other components

        Raises:
            ConfigurationError: If the configuration is not valid
            InitializationError: If the engine can not be initialized
        """
        if self._initialized:
            logger.warning("WeNetDummyEngine already initialized. Skipping re-initialization.")
            return

        self.config.validate()
        db = await self._connection.open()

        try:
            self._dummies_repository = await DummiesRepository.register(
                db, self.config.schema_version
            )
        except (WeNetDummyError, PyMongoError) as e:
            contextual_logger.critical(
                "Cannot register the dummies repository",
                extra={"error_type": type(e).__name__, "error": str(e)},
                exc_info=True,
            )
            self._connection.close()
            raise InitializationError(
                f"Cannot register the dummies repository: {e}",
                mongo_uri=self.config.mongo_uri,
                db_name=self.config.db_name,
                context={"error_type": type(e).__name__},
            ) from e

        self._http_client = httpx.AsyncClient(timeout=self.config.http_timeout)
        self._container = self.build_container(self._http_client, self._dummies_repository)
        self._initialized = True
        contextual_logger.info(
            "WeNetDummyEngine initialized",
            extra={
                "db_name": self.config.db_name,
                "schema_version": self.config.schema_version,
            },
        )

    def build_container(
        self, http_client: httpx.AsyncClient, dummies_repository: DummiesRepository
    ) -> Container:
        """Create the container with the services of the component."""
        container = Container()
        container.register_instance(DummyConfig, self.config)
        container.register_instance(httpx.AsyncClient, http_client)
        container.register_instance(DummiesRepository, dummies_repository)
        return register_component_clients(container, http_client, self.config)

    async def shutdown(self) -> None:
        """
        Release the resources of the engine.

        It is safe to call it several times.
        """
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

        if self._container is not None:
            self._container.reset()
            self._container = None

        self._dummies_repository = None
        self._initialized = False
        self._connection.close()

    async def __aenter__(self) -> "WeNetDummyEngine":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        await self.shutdown()

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("WeNetDummyEngine not initialized. Call initialize() first.")

    @property
    def initialized(self) -> bool:
        """Check if the engine is initialized."""
        return self._initialized

    @property
    def container(self) -> Container:
        """The container with the services of the component."""
        self._require_initialized()
        return self._container

    @property
    def dummies_repository(self) -> DummiesRepository:
        """The repository of the dummies."""
        self._require_initialized()
        return self._dummies_repository

    @property
    def mongo_client(self):
        """The MongoDB client, or None when not connected."""
        return self._connection.client

    async def get_health_status(self) -> Dict[str, Any]:
        """
        Get health status of the engine.

        Returns:
            Dictionary with health status and component checks
        """
        db = self._connection.db if self._connection.connected else None
        return await health_report(self, db)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get the metrics of the operations done by the component.

        Returns:
            Dictionary with operation metrics
        """
        return get_metrics_collector().get_summary()
