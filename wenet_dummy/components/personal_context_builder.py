"""
Client of the WeNet personal context builder.
"""

from typing import Any

from .client import ComponentClient


class WeNetPersonalContextBuilderClient(ComponentClient):
    """Obtains the locations of the users."""

    async def obtain_user_locations(self, user_ids: list[str]) -> dict[str, Any]:
        return await self.post({"userids": user_ids}, "/locations")

    async def obtain_closest_users_to(
        self, latitude: float, longitude: float, number_of_users: int
    ) -> list[dict[str, Any]]:
        """Return the users closest to a point."""
        return await self.get_json(
            "/closest",
            params={
                "latitude": latitude,
                "longitude": longitude,
                "nb_user_max": number_of_users,
            },
        )
