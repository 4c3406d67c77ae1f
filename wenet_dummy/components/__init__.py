"""
HTTP clients of the WeNet components.
"""

from .client import ComponentClient
from .dummy import WeNetDummyClient
from .incentive_server import WeNetIncentiveServerClient
from .interaction_protocol_engine import WeNetInteractionProtocolEngineClient
from .personal_context_builder import WeNetPersonalContextBuilderClient
from .profile_manager import WeNetProfileManagerClient
from .registry import COMPONENT_CLIENTS, register_component_clients
from .service import WeNetServiceClient
from .social_context_builder import WeNetSocialContextBuilderClient
from .task_manager import WeNetTaskManagerClient

__all__ = [
    "ComponentClient",
    "COMPONENT_CLIENTS",
    "register_component_clients",
    "WeNetDummyClient",
    "WeNetIncentiveServerClient",
    "WeNetInteractionProtocolEngineClient",
    "WeNetPersonalContextBuilderClient",
    "WeNetProfileManagerClient",
    "WeNetServiceClient",
    "WeNetSocialContextBuilderClient",
    "WeNetTaskManagerClient",
]
