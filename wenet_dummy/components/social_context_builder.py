"""
Client of the WeNet social context builder.
"""

from typing import Any

from .client import ComponentClient


class WeNetSocialContextBuilderClient(ComponentClient):
    """Obtains the social relations and preferences of the users."""

    async def initialize_social_relations(self, user_id: str, profile: dict[str, Any]) -> None:
        await self.post(profile, "/social/relations/initialize", user_id)

    async def post_social_preferences_for_user_on_task(
        self, user_id: str, task_id: str, volunteers: list[str]
    ) -> list[str]:
        """Return the volunteers ranked by the social preferences of the user."""
        return await self.post(volunteers, "/social/preferences", user_id, task_id)

    async def retrieve_social_explanation(self, user_id: str, task_id: str) -> dict[str, Any]:
        return await self.get_json("/social/explanations", user_id, task_id)

    async def social_notification_interaction(self, interaction: dict[str, Any]) -> None:
        await self.post(interaction, "/social/notification/interaction")
