"""
Client of the WeNet interaction protocol engine.
"""

from typing import Any

from .client import ComponentClient


class WeNetInteractionProtocolEngineClient(ComponentClient):
    """Sends the messages, events and incentives that drive the protocols."""

    async def send_message(self, message: dict[str, Any]) -> dict[str, Any]:
        return await self.post(message, "/messages")

    async def send_incentive(self, incentive: dict[str, Any]) -> dict[str, Any]:
        return await self.post(incentive, "/incentives")

    async def created_task(self, task: dict[str, Any]) -> dict[str, Any]:
        """Notify that a task has been created."""
        return await self.post(task, "/tasks/created")

    async def do_transaction(self, transaction: dict[str, Any]) -> dict[str, Any]:
        return await self.post(transaction, "/tasks/transactions")

    async def retrieve_community_user_state(self, community_id: str, user_id: str) -> dict[str, Any]:
        return await self.get_json("/states/communities", community_id, "/users", user_id)

    async def merge_community_user_state(
        self, community_id: str, user_id: str, state: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.patch(state, "/states/communities", community_id, "/users", user_id)

    async def send_event(self, event: dict[str, Any]) -> dict[str, Any]:
        return await self.post(event, "/events")

    async def delete_event(self, id: int) -> None:
        await self.delete("/events", id)
