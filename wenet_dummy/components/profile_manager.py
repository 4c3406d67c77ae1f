"""
Client of the WeNet profile manager.
"""

from typing import Any

from .client import ComponentClient


class WeNetProfileManagerClient(ComponentClient):
    """Manages the profiles and the communities of the WeNet users."""

    async def create_profile(self, profile: dict[str, Any]) -> dict[str, Any]:
        return await self.post(profile, "/profiles")

    async def retrieve_profile(self, id: str) -> dict[str, Any]:
        return await self.get_json("/profiles", id)

    async def update_profile(self, id: str, profile: dict[str, Any]) -> dict[str, Any]:
        return await self.put(profile, "/profiles", id)

    async def delete_profile(self, id: str) -> None:
        await self.delete("/profiles", id)

    async def is_profile_defined(self, id: str) -> bool:
        return await self.is_defined("/profiles", id)

    async def create_community(self, community: dict[str, Any]) -> dict[str, Any]:
        return await self.post(community, "/communities")

    async def retrieve_community(self, id: str) -> dict[str, Any]:
        return await self.get_json("/communities", id)

    async def delete_community(self, id: str) -> None:
        await self.delete("/communities", id)

    async def get_user_identifiers_page(self, offset: int = 0, limit: int = 10) -> dict[str, Any]:
        """Return a page with the identifiers of the users with a profile."""
        return await self.get_json(
            "/userIdentifiers", params={"offset": offset, "limit": limit}
        )
