"""
Base HTTP client of the WeNet components.

Every component client shares one httpx.AsyncClient, sends and receives JSON,
and converts any response that is not successful into a ComponentServiceError.
"""

import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from ..constants import COMPONENT_APIKEY_HEADER, CORRELATION_ID_HEADER
from ..exceptions import ComponentServiceError
from ..observability import get_correlation_id, record_operation

logger = logging.getLogger(__name__)


class ComponentClient:
    """
    Client to interact with the API of a WeNet component.

    Attributes:
        component_url: Base URL of the API of the component
        apikey: Key sent on the ``x-wenet-component-apikey`` header (if any)
    """

    def __init__(
        self, http_client: httpx.AsyncClient, component_url: str, apikey: str | None = None
    ) -> None:
        """
        Initialize the client.

        Args:
            http_client: Shared HTTP client used to send the requests
            component_url: Base URL of the API of the component
            apikey: Optional key to authenticate the requests
        """
        self.http_client = http_client
        self.component_url = component_url
        self.apikey = apikey

    async def obtain_api_url(self) -> str:
        """Return the URL of the API of the component."""
        return self.component_url

    def create_absolute_url_with(self, *paths: Any) -> str:
        """
        Create the URL of a resource of the component.

        The segments are appended to the component URL separated by exactly
        one ``/``, and any character that is not unreserved is percent-encoded.

        Example:
            client.create_absolute_url_with("/tasks", "task 1", "/transactions")
            # "<component_url>/tasks/task%201/transactions"
        """
        url = self.component_url
        for path in paths:
            segment = quote(str(path), safe="/")
            if segment and not segment.startswith("/") and not url.endswith("/"):
                url += "/"
            for char in segment:
                if char == "/" and url.endswith("/"):
                    continue
                url += char
        return url

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.apikey:
            headers[COMPONENT_APIKEY_HEADER] = self.apikey
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_ID_HEADER] = correlation_id
        return headers

    async def request(
        self,
        method: str,
        *paths: Any,
        content: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send a request to the component and return the decoded JSON response.

        Args:
            method: HTTP method
            *paths: Segments of the path of the resource
            content: Optional JSON content to send
            params: Optional query parameters (None values are ignored)

        Returns:
            The decoded body, or None if the response has no content

        Raises:
            ComponentServiceError: If the component can not be reached or it
                does not reply with a successful status
        """
        url = self.create_absolute_url_with(*paths)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        start_time = time.time()
        try:
            response = await self.http_client.request(
                method,
                url,
                params=query or None,
                json=content,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            duration_ms = (time.time() - start_time) * 1000
            record_operation("component.request", duration_ms, success=False, method=method)
            logger.error(f"[{method} {url}] request failed: {e}")
            raise ComponentServiceError(
                f"Cannot send the request to '{url}': {e}",
                context={"method": method, "url": url, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.time() - start_time) * 1000
        success = response.is_success
        record_operation("component.request", duration_ms, success=success, method=method)
        if not success:
            raise self._to_service_error(method, url, response)

        logger.debug(f"[{method} {url}] SUCCESS {response.status_code}")
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _to_service_error(method: str, url: str, response: httpx.Response) -> ComponentServiceError:
        error_message = None
        try:
            body = response.json()
            if isinstance(body, dict) and "code" in body:
                error_message = body
        except ValueError:
            pass

        logger.debug(f"[{method} {url}] FAILED {response.status_code}: {response.text}")
        return ComponentServiceError(
            f"The component replied with {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            error_message=error_message,
            context={"method": method, "url": url},
        )

    async def get_json(self, *paths: Any, params: dict[str, Any] | None = None) -> Any:
        """Retrieve a JSON resource."""
        return await self.request("GET", *paths, params=params)

    async def post(self, content: Any, *paths: Any, params: dict[str, Any] | None = None) -> Any:
        """Post a JSON content."""
        return await self.request("POST", *paths, content=content, params=params)

    async def put(self, content: Any, *paths: Any, params: dict[str, Any] | None = None) -> Any:
        """Put a JSON content."""
        return await self.request("PUT", *paths, content=content, params=params)

    async def patch(self, content: Any, *paths: Any, params: dict[str, Any] | None = None) -> Any:
        """Patch a resource with a JSON content."""
        return await self.request("PATCH", *paths, content=content, params=params)

    async def delete(self, *paths: Any, params: dict[str, Any] | None = None) -> None:
        """Delete a resource."""
        await self.request("DELETE", *paths, params=params)

    async def is_defined(self, *paths: Any) -> bool:
        """Check with a HEAD request whether a resource is defined."""
        try:
            await self.request("HEAD", *paths)
            return True
        except ComponentServiceError as e:
            if e.status_code is None:
                raise
            return False
