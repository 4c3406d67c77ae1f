"""
Registration of the component clients on a DI container.
"""

import logging

import httpx

from ..config import DummyConfig
from ..di import Container
from .client import ComponentClient
from .dummy import WeNetDummyClient
from .incentive_server import WeNetIncentiveServerClient
from .interaction_protocol_engine import WeNetInteractionProtocolEngineClient
from .personal_context_builder import WeNetPersonalContextBuilderClient
from .profile_manager import WeNetProfileManagerClient
from .service import WeNetServiceClient
from .social_context_builder import WeNetSocialContextBuilderClient
from .task_manager import WeNetTaskManagerClient

logger = logging.getLogger(__name__)

COMPONENT_CLIENTS: dict[str, type[ComponentClient]] = {
    "profileManager": WeNetProfileManagerClient,
    "taskManager": WeNetTaskManagerClient,
    "interactionProtocolEngine": WeNetInteractionProtocolEngineClient,
    "service": WeNetServiceClient,
    "socialContextBuilder": WeNetSocialContextBuilderClient,
    "incentiveServer": WeNetIncentiveServerClient,
    "personalContextBuilder": WeNetPersonalContextBuilderClient,
    "dummy": WeNetDummyClient,
}
"""Client class of each component, keyed by its configuration name."""


def register_component_clients(
    container: Container, http_client: httpx.AsyncClient, config: DummyConfig
) -> Container:
    """
    Register one client of each WeNet component on the container.

    All the clients share the HTTP client, and each one points to the URL
    configured for its component. A client is created the first time it is
    resolved.

    Returns:
        The container, for chaining
    """
    for name, client_type in COMPONENT_CLIENTS.items():
        url = config.components[name]
        container.register_factory(
            client_type,
            lambda _container, client_type=client_type, url=url: client_type(
                http_client, url, apikey=config.component_apikey
            ),
        )
        logger.debug(f"Registered the client of '{name}' at {url}")
    return container
