"""
Dependency Injection Container

A small FastAPI-native container that holds the services of one application.
There is no process-global container; the application keeps its own on
``app.state.container``.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Container:
    """
    Dependency Injection Container.

    Usage:
        container = Container()

        # Register instance directly
        container.register_instance(DummyConfig, config)

        # Register with factory (created on the first resolve)
        container.register_factory(
            WeNetDummyClient,
            lambda c: WeNetDummyClient(http_client, c.resolve(DummyConfig).components["dummy"]),
        )

        # Resolve
        client = container.resolve(WeNetDummyClient)
    """

    def __init__(self):
        self._factories: dict[type, Callable[["Container"], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register_factory(
        self, service_type: type[T], factory: Callable[["Container"], T]
    ) -> "Container":
        """
        Register a service with a factory function.

        The factory receives the container, it is called on the first resolve
        and the created instance is reused afterwards.

        Returns:
            Self for chaining
        """
        self._instances.pop(service_type, None)
        self._factories[service_type] = factory
        logger.debug(f"Registered factory for {service_type.__name__}")
        return self

    def register_instance(self, service_type: type[T], instance: T) -> "Container":
        """
        Register an existing instance.

        Returns:
            Self for chaining
        """
        self._factories.pop(service_type, None)
        self._instances[service_type] = instance
        logger.debug(f"Registered instance for {service_type.__name__}")
        return self

    def resolve(self, service_type: type[T]) -> T:
        """
        Resolve a service instance.

        Raises:
            KeyError: If service is not registered
        """
        if service_type in self._instances:
            return self._instances[service_type]

        if service_type not in self._factories:
            raise KeyError(
                f"Service {service_type.__name__} is not registered. "
                f"Call container.register_instance({service_type.__name__}, ...) first."
            )

        instance = self._factories.pop(service_type)(self)
        self._instances[service_type] = instance
        return instance

    def is_registered(self, service_type: type) -> bool:
        """Check if a service type is registered."""
        return service_type in self._factories or service_type in self._instances

    def reset(self) -> None:
        """Remove all the registrations and the created instances."""
        self._factories.clear()
        self._instances.clear()
        logger.debug("Container reset")

    def __contains__(self, service_type: type) -> bool:
        """Support 'in' operator for checking registration."""
        return self.is_registered(service_type)


def inject(service_type: type[T]) -> Callable[..., Any]:
    """
    FastAPI dependency that resolves a service from the container of the application.

    Usage:
        @router.get("/profiles/{user_id}")
        async def get_profile(
            user_id: str,
            client: WeNetProfileManagerClient = Depends(inject(WeNetProfileManagerClient)),
        ):
            return await client.retrieve_profile(user_id)
    """
    from fastapi import HTTPException, Request

    async def _dependency(request: Request) -> T:
        container = getattr(request.app.state, "container", None)
        if container is None:
            raise HTTPException(503, "Services not initialized")
        return container.resolve(service_type)

    return _dependency
