"""
Unit tests for DummyConfig.

Tests the environment variables, the overrides and the validation.
"""

import pytest

from wenet_dummy.config import DummyConfig
from wenet_dummy.constants import COMPONENT_URL_ENV_VARS, DEFAULT_COMPONENT_URLS
from wenet_dummy.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the environment variables read by the configuration."""
    for name in (
        "MONGO_URI",
        "DB_NAME",
        "MONGO_MAX_POOL_SIZE",
        "MONGO_MIN_POOL_SIZE",
        "WENET_SCHEMA_VERSION",
        "WENET_COMPONENT_APIKEY",
        "WENET_HTTP_TIMEOUT",
        "WENET_HOST",
        "WENET_PORT",
        *COMPONENT_URL_ENV_VARS.values(),
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDummyConfigDefaults:
    """Test the values used when nothing is configured."""

    def test_defaults(self, clean_env):
        config = DummyConfig()
        assert config.mongo_uri == "mongodb://localhost:27017"
        assert config.db_name == "wenetDummyDB"
        assert config.max_pool_size == 50
        assert config.min_pool_size == 10
        assert config.schema_version == "1.0.0"
        assert config.component_apikey is None
        assert config.http_timeout == 30.0
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.components == DEFAULT_COMPONENT_URLS
        config.validate()


class TestDummyConfigSources:
    """Test the environment variables and the explicit values."""

    def test_environment_variables(self, clean_env):
        clean_env.setenv("MONGO_URI", "mongodb://mongo:27017")
        clean_env.setenv("DB_NAME", "env_db")
        clean_env.setenv("WENET_SCHEMA_VERSION", "2.0.0")
        clean_env.setenv("WENET_PORT", "9090")
        clean_env.setenv("WENET_PROFILE_MANAGER_URL", "http://profile:8080")

        config = DummyConfig()

        assert config.mongo_uri == "mongodb://mongo:27017"
        assert config.db_name == "env_db"
        assert config.schema_version == "2.0.0"
        assert config.port == 9090
        assert config.components["profileManager"] == "http://profile:8080"
        assert config.components["dummy"] == "http://localhost:8080"

    def test_explicit_values_override_environment(self, clean_env):
        clean_env.setenv("DB_NAME", "env_db")
        clean_env.setenv("WENET_DUMMY_URL", "http://env-dummy:8080")

        config = DummyConfig(db_name="param_db", components={"dummy": "http://param:8080"})

        assert config.db_name == "param_db"
        assert config.components["dummy"] == "http://param:8080"


class TestDummyConfigValidation:
    """Test the validation of the configuration."""

    @pytest.mark.parametrize(
        "overrides, config_key",
        [
            ({"max_pool_size": 5, "min_pool_size": 10}, "min_pool_size"),
            ({"http_timeout": -1.0}, "http_timeout"),
            ({"port": 70000}, "port"),
            ({"components": {"taskManager": "ftp://tasks"}}, "WENET_TASK_MANAGER_URL"),
        ],
    )
    def test_invalid_values(self, clean_env, overrides, config_key):
        config = DummyConfig(**overrides)
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        assert exc_info.value.config_key == config_key

    def test_blank_schema_version(self, clean_env):
        config = DummyConfig(schema_version="   ")
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()
        assert exc_info.value.config_key == "schema_version"
