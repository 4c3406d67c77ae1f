"""
Configuration management for WENET_DUMMY.

The configuration is read from environment variables, and any value can be
overridden by passing it directly.
"""

import os

from .constants import (
    COMPONENT_URL_ENV_VARS,
    DEFAULT_COMPONENT_URLS,
    DEFAULT_DB_NAME,
    DEFAULT_HOST,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MAX_POOL_SIZE,
    DEFAULT_MIN_POOL_SIZE,
    DEFAULT_MONGO_URI,
    DEFAULT_PORT,
    DEFAULT_SCHEMA_VERSION,
)
from .exceptions import ConfigurationError


class DummyConfig:
    """
    WeNet dummy component configuration.

    Example:
        # Using environment variables
        config = DummyConfig()

        # Or using direct parameters
        config = DummyConfig(
            mongo_uri="mongodb://localhost:27017",
            db_name="wenetDummyDB",
            components={"profileManager": "http://localhost:8081"},
        )
        config.validate()
    """

    def __init__(
        self,
        mongo_uri: str | None = None,
        db_name: str | None = None,
        max_pool_size: int | None = None,
        min_pool_size: int | None = None,
        schema_version: str | None = None,
        components: dict[str, str] | None = None,
        component_apikey: str | None = None,
        http_timeout: float | None = None,
        host: str | None = None,
        port: int | None = None,
    ):
        """
        Initialize configuration.

        Args:
            mongo_uri: MongoDB connection URI (defaults to MONGO_URI env var)
            db_name: Database name (defaults to DB_NAME env var)
            max_pool_size: Maximum connection pool size (defaults to 50 or MONGO_MAX_POOL_SIZE)
            min_pool_size: Minimum connection pool size (defaults to 10 or MONGO_MIN_POOL_SIZE)
            schema_version: Version stamped on the stored documents
                (defaults to WENET_SCHEMA_VERSION)
            components: URL of the other components keyed by their name. The
                missing ones are read from WENET_<COMPONENT>_URL or the defaults
            component_apikey: Key sent to the other components
                (defaults to WENET_COMPONENT_APIKEY)
            http_timeout: Timeout of the requests to the components in seconds
            host: Interface where the HTTP API listens (defaults to WENET_HOST)
            port: Port where the HTTP API listens (defaults to WENET_PORT)
        """
        self.mongo_uri = mongo_uri or os.getenv("MONGO_URI", DEFAULT_MONGO_URI)
        self.db_name = db_name or os.getenv("DB_NAME", DEFAULT_DB_NAME)
        self.max_pool_size = max_pool_size or int(
            os.getenv("MONGO_MAX_POOL_SIZE", str(DEFAULT_MAX_POOL_SIZE))
        )
        self.min_pool_size = min_pool_size or int(
            os.getenv("MONGO_MIN_POOL_SIZE", str(DEFAULT_MIN_POOL_SIZE))
        )
        self.schema_version = schema_version or os.getenv(
            "WENET_SCHEMA_VERSION", DEFAULT_SCHEMA_VERSION
        )
        self.components = self._resolve_components(components or {})
        self.component_apikey = component_apikey or os.getenv("WENET_COMPONENT_APIKEY")
        self.http_timeout = http_timeout or float(
            os.getenv("WENET_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        )
        self.host = host or os.getenv("WENET_HOST", DEFAULT_HOST)
        self.port = port or int(os.getenv("WENET_PORT", str(DEFAULT_PORT)))

    @staticmethod
    def _resolve_components(overrides: dict[str, str]) -> dict[str, str]:
        components = {}
        for name, default_url in DEFAULT_COMPONENT_URLS.items():
            components[name] = overrides.get(name) or os.getenv(
                COMPONENT_URL_ENV_VARS[name], default_url
            )
        return components

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        if not self.mongo_uri:
            raise ConfigurationError(
                "mongo_uri is required (set MONGO_URI environment variable or pass directly)",
                config_key="mongo_uri",
            )

        if not self.db_name:
            raise ConfigurationError(
                "db_name is required (set DB_NAME environment variable or pass directly)",
                config_key="db_name",
            )

        if self.max_pool_size < 1:
            raise ConfigurationError(
                f"max_pool_size must be >= 1, got {self.max_pool_size}",
                config_key="max_pool_size",
                config_value=self.max_pool_size,
            )

        if self.min_pool_size < 1:
            raise ConfigurationError(
                f"min_pool_size must be >= 1, got {self.min_pool_size}",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if self.min_pool_size > self.max_pool_size:
            raise ConfigurationError(
                f"min_pool_size ({self.min_pool_size}) cannot be greater than "
                f"max_pool_size ({self.max_pool_size})",
                config_key="min_pool_size",
                config_value=self.min_pool_size,
            )

        if not self.schema_version or not self.schema_version.strip():
            raise ConfigurationError(
                "schema_version can not be empty", config_key="schema_version"
            )

        for name, url in self.components.items():
            if not url.startswith(("http://", "https://")):
                raise ConfigurationError(
                    f"The URL of the component '{name}' must be an HTTP URL, got '{url}'",
                    config_key=COMPONENT_URL_ENV_VARS[name],
                    config_value=url,
                )

        if self.http_timeout <= 0:
            raise ConfigurationError(
                f"http_timeout must be > 0, got {self.http_timeout}",
                config_key="http_timeout",
                config_value=self.http_timeout,
            )

        if not 0 < self.port < 65536:
            raise ConfigurationError(
                f"port must be between 1 and 65535, got {self.port}",
                config_key="port",
                config_value=self.port,
            )
