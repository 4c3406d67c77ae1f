"""
Constants for WENET_DUMMY.

This module contains all shared constants used across the codebase to avoid
magic numbers and improve maintainability.
"""

from typing import Final

# ============================================================================
# DATABASE CONSTANTS
# ============================================================================

# Connection pool defaults
DEFAULT_MAX_POOL_SIZE: Final[int] = 50
"""Default maximum MongoDB connection pool size."""

DEFAULT_MIN_POOL_SIZE: Final[int] = 10
"""Default minimum MongoDB connection pool size."""

DEFAULT_SERVER_SELECTION_TIMEOUT_MS: Final[int] = 5000
"""Default server selection timeout in milliseconds."""

DEFAULT_MAX_IDLE_TIME_MS: Final[int] = 45000
"""Default maximum idle time before closing connections (milliseconds)."""

DEFAULT_MONGO_URI: Final[str] = "mongodb://localhost:27017"
"""MongoDB URI used when none is configured."""

DEFAULT_DB_NAME: Final[str] = "wenetDummyDB"
"""Database name used when none is configured."""

# ============================================================================
# PERSISTENCE CONSTANTS
# ============================================================================

SCHEMA_VERSION: Final[str] = "schema_version"
"""Name of the field that stores the version of the schema of a document."""

CREATION_TS: Final[str] = "_creationTs"
"""Name of the field with the creation time, never modified by an update."""

DEFAULT_SCHEMA_VERSION: Final[str] = "1.0.0"
"""Schema version stamped on the documents when none is configured."""

DUMMIES_COLLECTION: Final[str] = "dummies"
"""Collection where the dummies are stored."""

DUMMIES_RESULT_KEY: Final[str] = "dummies"
"""Key of the found dummies on a page."""

# ============================================================================
# API CONSTANTS
# ============================================================================

DUMMIES_PATH: Final[str] = "/dummies"
"""Path to the dummies resource."""

ECHO_PATH: Final[str] = "/echo"
"""Path to the echo resource."""

CORRELATION_ID_HEADER: Final[str] = "X-Correlation-ID"
"""Header used to propagate the correlation identifier."""

COMPONENT_APIKEY_HEADER: Final[str] = "x-wenet-component-apikey"
"""Header used to authenticate the requests between components."""

# Error codes returned on the error messages
BAD_DUMMY_CODE: Final[str] = "bad_dummy"
BAD_MODEL_CODE: Final[str] = "bad_model"
DUPLICATED_ID_CODE: Final[str] = "duplicated_id"
NOT_FOUND_DUMMY_CODE: Final[str] = "not_found_dummy"

DUPLICATED_ID_MESSAGE: Final[str] = "The identifier of the new dummy is already defined"

DEFAULT_PAGE_LIMIT: Final[int] = 10
"""Default maximum number of dummies returned on a page."""

MAX_PAGE_LIMIT: Final[int] = 1000
"""Maximum number of dummies that can be requested on a page."""

# ============================================================================
# COMPONENT CONSTANTS
# ============================================================================

DEFAULT_HTTP_TIMEOUT: Final[float] = 30.0
"""Default timeout for the requests to other components (seconds)."""

DEFAULT_COMPONENT_URLS: Final[dict[str, str]] = {
    "profileManager": "https://wenet.u-hopper.com/prod/profile_manager",
    "taskManager": "https://wenet.u-hopper.com/prod/task_manager",
    "interactionProtocolEngine": "https://wenet.u-hopper.com/prod/interaction_protocol_engine",
    "service": "https://wenet.u-hopper.com/prod/service",
    "socialContextBuilder": "https://wenet.u-hopper.com/prod/social_context_builder",
    "incentiveServer": "https://wenet.u-hopper.com/prod/incentive_server",
    "personalContextBuilder": "https://wenet.u-hopper.com/prod/personal_context_builder",
    "dummy": "http://localhost:8080",
}
"""Default URL of each WeNet component, keyed by its configuration name."""

COMPONENT_URL_ENV_VARS: Final[dict[str, str]] = {
    "profileManager": "WENET_PROFILE_MANAGER_URL",
    "taskManager": "WENET_TASK_MANAGER_URL",
    "interactionProtocolEngine": "WENET_INTERACTION_PROTOCOL_ENGINE_URL",
    "service": "WENET_SERVICE_URL",
    "socialContextBuilder": "WENET_SOCIAL_CONTEXT_BUILDER_URL",
    "incentiveServer": "WENET_INCENTIVE_SERVER_URL",
    "personalContextBuilder": "WENET_PERSONAL_CONTEXT_BUILDER_URL",
    "dummy": "WENET_DUMMY_URL",
}
"""Environment variable that overrides the URL of each component."""

# ============================================================================
# SERVER CONSTANTS
# ============================================================================

DEFAULT_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 8080
