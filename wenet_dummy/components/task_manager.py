"""
Client of the WeNet task manager.
"""

from typing import Any

from .client import ComponentClient


class WeNetTaskManagerClient(ComponentClient):
    """Manages the tasks, their transactions and the task types."""

    async def create_task(self, task: dict[str, Any]) -> dict[str, Any]:
        return await self.post(task, "/tasks")

    async def retrieve_task(self, id: str) -> dict[str, Any]:
        return await self.get_json("/tasks", id)

    async def update_task(self, id: str, task: dict[str, Any]) -> dict[str, Any]:
        return await self.put(task, "/tasks", id)

    async def merge_task(self, id: str, task: dict[str, Any]) -> dict[str, Any]:
        return await self.patch(task, "/tasks", id)

    async def delete_task(self, id: str) -> None:
        await self.delete("/tasks", id)

    async def is_task_defined(self, id: str) -> bool:
        return await self.is_defined("/tasks", id)

    async def do_task_transaction(self, transaction: dict[str, Any]) -> dict[str, Any]:
        """Ask to do a transaction over a task."""
        return await self.post(transaction, "/tasks/transactions")

    async def add_transaction_into_task(
        self, task_id: str, transaction: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.post(transaction, "/tasks", task_id, "/transactions")

    async def add_message_into_transaction(
        self, task_id: str, transaction_id: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.post(
            message, "/tasks", task_id, "/transactions", transaction_id, "/messages"
        )

    async def get_tasks_page(
        self,
        app_id: str | None = None,
        requester_id: str | None = None,
        task_type_id: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> dict[str, Any]:
        """Return a page with the tasks that match the parameters."""
        return await self.get_json(
            "/tasks",
            params={
                "appId": app_id,
                "requesterId": requester_id,
                "taskTypeId": task_type_id,
                "offset": offset,
                "limit": limit,
            },
        )

    async def create_task_type(self, task_type: dict[str, Any]) -> dict[str, Any]:
        return await self.post(task_type, "/taskTypes")

    async def retrieve_task_type(self, id: str) -> dict[str, Any]:
        return await self.get_json("/taskTypes", id)

    async def update_task_type(self, id: str, task_type: dict[str, Any]) -> dict[str, Any]:
        return await self.put(task_type, "/taskTypes", id)

    async def delete_task_type(self, id: str) -> None:
        await self.delete("/taskTypes", id)

    async def is_task_type_defined(self, id: str) -> bool:
        return await self.is_defined("/taskTypes", id)
