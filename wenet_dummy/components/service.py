"""
Client of the WeNet service API.
"""

from typing import Any

from .client import ComponentClient


class WeNetServiceClient(ComponentClient):
    """Retrieves the applications and their users, and posts the callbacks."""

    async def retrieve_app(self, id: str) -> dict[str, Any]:
        return await self.get_json("/app", id)

    async def is_app_defined(self, id: str) -> bool:
        return await self.is_defined("/app", id)

    async def retrieve_app_user_ids(self, id: str) -> list[str]:
        return await self.get_json("/app", id, "/users")

    async def send_callback_message(self, app_id: str, message: dict[str, Any]) -> dict[str, Any]:
        """Post a message to the callback of an application."""
        return await self.post(message, "/callback", app_id)
