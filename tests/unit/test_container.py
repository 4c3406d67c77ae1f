"""
Unit tests for the dependency injection container.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from wenet_dummy.di import Container, inject


class Service:
    def __init__(self, name="default"):
        self.name = name


class OtherService:
    pass


class TestContainer:
    def test_register_instance(self):
        service = Service()
        container = Container().register_instance(Service, service)

        assert container.resolve(Service) is service
        assert Service in container

    def test_factory_is_called_once(self):
        factory = MagicMock(side_effect=lambda c: Service("created"))
        container = Container().register_factory(Service, factory)

        first = container.resolve(Service)
        second = container.resolve(Service)

        assert first is second
        assert first.name == "created"
        factory.assert_called_once_with(container)

    def test_factory_resolves_dependencies(self):
        container = Container()
        container.register_instance(Service, Service("dependency"))
        container.register_factory(OtherService, lambda c: (OtherService(), c.resolve(Service))[0])

        assert isinstance(container.resolve(OtherService), OtherService)

    def test_resolve_unregistered(self):
        with pytest.raises(KeyError):
            Container().resolve(Service)

    def test_instance_replaces_factory(self):
        container = Container().register_factory(Service, lambda c: Service("factory"))
        container.register_instance(Service, Service("instance"))

        assert container.resolve(Service).name == "instance"

    def test_reset(self):
        container = Container().register_instance(Service, Service())
        container.reset()

        assert not container.is_registered(Service)


class TestInject:
    def _client(self, container):
        app = FastAPI()

        @app.get("/service")
        async def read(service: Service = Depends(inject(Service))):
            return {"name": service.name}

        app.state.container = container
        return TestClient(app)

    def test_resolve_from_application_container(self):
        client = self._client(Container().register_instance(Service, Service("injected")))

        assert client.get("/service").json() == {"name": "injected"}

    def test_without_container(self):
        client = self._client(None)

        assert client.get("/service").status_code == 503
