"""
Unit tests for the clients of the WeNet components.

httpx.AsyncClient.request is patched, so the tests check the method, URL,
query, headers and body that each client sends.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from wenet_dummy.components import (COMPONENT_CLIENTS, ComponentClient,
                                    WeNetDummyClient,
                                    WeNetPersonalContextBuilderClient,
                                    WeNetProfileManagerClient,
                                    WeNetTaskManagerClient,
                                    register_component_clients)
from wenet_dummy.di import Container
from wenet_dummy.exceptions import ComponentServiceError
from wenet_dummy.models import Dummy
from wenet_dummy.observability import get_metrics_collector, set_correlation_id

COMPONENT_URL = "http://component.test/api"


def make_client(client_type, apikey="secret"):
    return client_type(httpx.AsyncClient(), COMPONENT_URL, apikey=apikey)


def reply(status_code=200, json_body=None, content=b""):
    """Patch the requests of every httpx.AsyncClient with a fixed response."""
    if json_body is not None:
        response = httpx.Response(status_code, json=json_body)
    else:
        response = httpx.Response(status_code, content=content)
    return patch("httpx.AsyncClient.request", new_callable=AsyncMock, return_value=response)


def sent(mock_request):
    """Return the method, URL and keyword arguments of the last request."""
    (method, url), kwargs = mock_request.call_args
    return method, url, kwargs


class TestCreateAbsoluteUrl:
    @pytest.mark.parametrize(
        "component_url, paths, expected",
        [
            ("http://host/api", ("/tasks",), "http://host/api/tasks"),
            ("http://host/api/", ("/tasks",), "http://host/api/tasks"),
            ("http://host/api", ("tasks", "1"), "http://host/api/tasks/1"),
            (
                "http://host/api",
                ("/tasks", "task 1", "/transactions"),
                "http://host/api/tasks/task%201/transactions",
            ),
            ("http://host/api", ("//tasks//", "/1"), "http://host/api/tasks/1"),
            ("http://host/api", ("/profiles", "ñ"), "http://host/api/profiles/%C3%B1"),
            ("http://host/api", (), "http://host/api"),
        ],
    )
    def test_url(self, component_url, paths, expected):
        client = ComponentClient(httpx.AsyncClient(), component_url)
        assert client.create_absolute_url_with(*paths) == expected

    @pytest.mark.asyncio
    async def test_obtain_api_url(self):
        client = ComponentClient(httpx.AsyncClient(), COMPONENT_URL)
        assert await client.obtain_api_url() == COMPONENT_URL


class TestComponentClientRequest:
    """Test the requests sent by the base client."""

    @pytest.mark.asyncio
    async def test_get_json(self):
        client = make_client(ComponentClient)

        with reply(json_body={"id": "1"}) as mock_request:
            found = await client.get_json("/profiles", "1", params={"offset": 0, "limit": None})

        assert found == {"id": "1"}
        method, url, kwargs = sent(mock_request)
        assert method == "GET"
        assert url == "http://component.test/api/profiles/1"
        assert kwargs["params"] == {"offset": 0}
        assert kwargs["json"] is None
        assert kwargs["headers"]["x-wenet-component-apikey"] == "secret"
        assert kwargs["headers"]["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_post_sends_json(self):
        client = make_client(ComponentClient)

        with reply(201, json_body={"id": "1", "value": "v"}) as mock_request:
            created = await client.post({"value": "v"}, "/dummies")

        assert created == {"id": "1", "value": "v"}
        method, _url, kwargs = sent(mock_request)
        assert method == "POST"
        assert kwargs["json"] == {"value": "v"}
        assert kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_without_apikey(self):
        client = make_client(ComponentClient, apikey=None)

        with reply(json_body={}) as mock_request:
            await client.get_json("/profiles")

        assert "x-wenet-component-apikey" not in sent(mock_request)[2]["headers"]

    @pytest.mark.asyncio
    async def test_propagates_correlation_id(self):
        client = make_client(ComponentClient)
        set_correlation_id("request-1")

        with reply(json_body={}) as mock_request:
            await client.get_json("/profiles")

        assert sent(mock_request)[2]["headers"]["X-Correlation-ID"] == "request-1"

    @pytest.mark.asyncio
    async def test_no_content(self):
        client = make_client(ComponentClient)

        with reply(204) as mock_request:
            assert await client.delete("/profiles", "1") is None

        assert sent(mock_request)[0] == "DELETE"

    @pytest.mark.asyncio
    async def test_error_response(self):
        client = make_client(ComponentClient)

        with reply(404, json_body={"code": "not_found", "message": "Not found"}):
            with pytest.raises(ComponentServiceError) as exc_info:
                await client.get_json("/profiles", "1")

        assert exc_info.value.status_code == 404
        assert exc_info.value.error_message == {"code": "not_found", "message": "Not found"}
        summary = get_metrics_collector().get_summary()["summary"]
        assert summary["component.request"]["error_count"] == 1

    @pytest.mark.asyncio
    async def test_error_response_without_error_message(self):
        client = make_client(ComponentClient)

        with reply(500, content=b"Internal error"):
            with pytest.raises(ComponentServiceError) as exc_info:
                await client.put({}, "/profiles", "1")

        assert exc_info.value.status_code == 500
        assert exc_info.value.error_message is None

    @pytest.mark.asyncio
    async def test_unreachable_component(self):
        client = make_client(ComponentClient)
        error = httpx.ConnectError("Connection refused")

        with patch("httpx.AsyncClient.request", side_effect=error):
            with pytest.raises(ComponentServiceError) as exc_info:
                await client.get_json("/profiles")

        assert exc_info.value.status_code is None
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code, expected", [(200, True), (404, False)])
    async def test_is_defined(self, status_code, expected):
        client = make_client(ComponentClient)

        with reply(status_code) as mock_request:
            assert await client.is_defined("/profiles", "1") is expected

        assert sent(mock_request)[0] == "HEAD"

    @pytest.mark.asyncio
    async def test_is_defined_unreachable_component(self):
        client = make_client(ComponentClient)

        with patch(
            "httpx.AsyncClient.request", side_effect=httpx.ConnectError("Connection refused")
        ):
            with pytest.raises(ComponentServiceError):
                await client.is_defined("/profiles", "1")


class TestComponentClients:
    """Test the resources used by the typed clients."""

    @pytest.mark.asyncio
    async def test_profile_manager_user_identifiers(self):
        client = make_client(WeNetProfileManagerClient)

        with reply(json_body={"offset": 0, "total": 0}) as mock_request:
            await client.get_user_identifiers_page(offset=5, limit=20)

        _method, url, kwargs = sent(mock_request)
        assert url == f"{COMPONENT_URL}/userIdentifiers"
        assert kwargs["params"] == {"offset": 5, "limit": 20}

    @pytest.mark.asyncio
    async def test_task_manager_messages(self):
        client = make_client(WeNetTaskManagerClient)

        with reply(201, json_body={"label": "hello"}) as mock_request:
            await client.add_message_into_transaction("task1", "7", {"label": "hello"})

        assert sent(mock_request)[1] == f"{COMPONENT_URL}/tasks/task1/transactions/7/messages"

    @pytest.mark.asyncio
    async def test_task_manager_page_ignores_undefined_parameters(self):
        client = make_client(WeNetTaskManagerClient)

        with reply(json_body={"offset": 0, "total": 0}) as mock_request:
            await client.get_tasks_page(app_id="app1")

        assert sent(mock_request)[2]["params"] == {"appId": "app1", "offset": 0, "limit": 10}

    @pytest.mark.asyncio
    async def test_personal_context_builder_closest_users(self):
        client = make_client(WeNetPersonalContextBuilderClient)

        with reply(json_body=[]) as mock_request:
            await client.obtain_closest_users_to(1.5, 2.5, 3)

        _method, url, kwargs = sent(mock_request)
        assert url == f"{COMPONENT_URL}/closest"
        assert kwargs["params"] == {"latitude": 1.5, "longitude": 2.5, "nb_user_max": 3}

    @pytest.mark.asyncio
    async def test_dummy_client_create(self):
        client = make_client(WeNetDummyClient)

        with reply(201, json_body={"id": "1", "value": "v"}) as mock_request:
            created = await client.create_dummy(Dummy(value="v"))

        assert created == Dummy(id="1", value="v")
        _method, url, kwargs = sent(mock_request)
        assert url == f"{COMPONENT_URL}/dummies"
        assert kwargs["json"] == {"value": "v"}

    @pytest.mark.asyncio
    async def test_dummy_client_echo(self):
        client = make_client(WeNetDummyClient)

        with reply(201, json_body={"a": [1, None]}) as mock_request:
            assert await client.echo({"a": [1, None]}) == {"a": [1, None]}

        assert sent(mock_request)[1] == f"{COMPONENT_URL}/echo"


class TestRegisterComponentClients:
    def test_register_all_clients(self, dummy_config):
        http_client = httpx.AsyncClient()
        container = register_component_clients(Container(), http_client, dummy_config)

        for name, client_type in COMPONENT_CLIENTS.items():
            client = container.resolve(client_type)
            assert isinstance(client, client_type)
            assert client.component_url == dummy_config.components[name]
            assert client.apikey == "test_apikey"
            assert client.http_client is http_client

    def test_clients_are_created_once(self, dummy_config):
        container = register_component_clients(Container(), httpx.AsyncClient(), dummy_config)

        assert WeNetTaskManagerClient in container
        first = container.resolve(WeNetTaskManagerClient)
        assert container.resolve(WeNetTaskManagerClient) is first
