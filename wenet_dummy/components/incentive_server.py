"""
Client of the WeNet incentive server.
"""

from typing import Any

from .client import ComponentClient


class WeNetIncentiveServerClient(ComponentClient):
    """Reports the status of the tasks and receives the incentives."""

    async def update_task_status(self, status: dict[str, Any]) -> dict[str, Any]:
        return await self.post(status, "/Tasks/TaskStatus/")

    async def update_task_type_status(self, status: dict[str, Any]) -> dict[str, Any]:
        return await self.post(status, "/Tasks/TaskTypeStatus/")
