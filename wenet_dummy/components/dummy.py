"""
Client of the WeNet dummy component.
"""

from typing import Any

from ..constants import DUMMIES_PATH, ECHO_PATH
from ..models import Dummy
from .client import ComponentClient


class WeNetDummyClient(ComponentClient):
    """Calls the API of another WeNet dummy component."""

    async def create_dummy(self, dummy: Dummy) -> Dummy:
        created = await self.post(dummy.to_document(), DUMMIES_PATH)
        return Dummy.model_validate(created)

    async def retrieve_dummy(self, id: str) -> Dummy:
        found = await self.get_json(DUMMIES_PATH, id)
        return Dummy.model_validate(found)

    async def echo(self, content: Any) -> Any:
        """Post a content to the echo endpoint and return the reply."""
        return await self.post(content, ECHO_PATH)
