"""Unit tests for configuration loading and the context override system."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.bookstore.runtime.config.config_data import ConfigData, DatabaseConfig
from src.bookstore.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookstore.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    set_context,
    with_context,
)
from src.bookstore.runtime.settings import EnvironmentVariables


class TestSubstituteEnvVars:
    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("http://${HOST}:${PORT}/api")
            assert result == "http://localhost:8080/api"

    def test_default_used_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual"}):
            assert substitute_env_vars("${PRESENT_VAR:-fallback}") == "actual"

    def test_required_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR: needed for the database"):
                substitute_env_vars("${MISSING_VAR:?needed for the database}")


PROJECT_CONFIG = Path(__file__).resolve().parents[4] / "config.yaml"


class TestLoadTemplatedYaml:
    def test_project_config_loads_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(PROJECT_CONFIG)

        assert config.database.url == "sqlite:///./bookstore.db"
        assert config.app.environment == "development"
        assert config.client.search_debounce_ms == 1000
        assert config.app.cors.origins == ["http://localhost:4200"]

    def test_loads_sections(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  database:\n"
            "    url: ${DB_URL:-sqlite:///./other.db}\n"
            "  client:\n"
            "    search_debounce_ms: 250\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.database.url == "sqlite:///./other.db"
        assert config.client.search_debounce_ms == 250
        assert config.app.port == 8000

    def test_environment_prefixed_variable_wins(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  logging:\n    level: ${LOG_LEVEL:-INFO}\n")

        env = {"APP_ENVIRONMENT": "test", "TEST_LOG_LEVEL": "DEBUG", "LOG_LEVEL": "WARNING"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(config_file)

        assert config.logging.level == "DEBUG"

    def test_missing_file_yields_defaults(self, tmp_path):
        config = load_templated_yaml(tmp_path / "absent.yaml")

        assert config == ConfigData()

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    port: not-a-number\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_empty_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError):
            load_templated_yaml(config_file)


class TestDatabaseConfig:
    def test_connection_string_without_password(self):
        config = DatabaseConfig(url="sqlite:///./bookstore.db")

        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./bookstore.db"

    def test_password_taken_from_environment(self):
        config = DatabaseConfig(
            url="postgresql://catalog@db:5432/catalog",
            password_env_var="CATALOG_DB_PASSWORD",
        )

        with patch.dict(os.environ, {"CATALOG_DB_PASSWORD": "s3cret"}):
            assert config.connection_string == "postgresql://catalog:s3cret@db:5432/catalog"
        assert not config.is_sqlite


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_with_context_overrides_only_set_fields(self):
        original = get_config()

        override = ConfigData()
        override.client.search_debounce_ms = 5

        with with_context(override):
            config = get_config()
            assert config.client.search_debounce_ms == 5
            assert config.client.base_url == original.client.base_url
            assert config.database.url == original.database.url

        assert get_config() is original

    def test_nested_overrides(self):
        level1 = ConfigData()
        level1.database.url = "sqlite:///level1.db"
        level1.logging.level = "WARNING"

        with with_context(level1):
            level2 = ConfigData()
            level2.logging.level = "DEBUG"

            with with_context(level2):
                assert get_config().database.url == "sqlite:///level1.db"
                assert get_config().logging.level == "DEBUG"

            assert get_config().logging.level == "WARNING"
            assert get_config().database.url == "sqlite:///level1.db"

    def test_none_override_is_noop(self):
        original = get_config()
        with with_context(None):
            assert get_config() is original

    def test_rejects_other_types(self):
        with pytest.raises(ValueError, match="ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):
                pass

    def test_reverts_after_exception(self):
        original = get_config()
        override = ConfigData()
        override.app.port = 9999

        with pytest.raises(RuntimeError):
            with with_context(override):
                raise RuntimeError("boom")

        assert get_config() is original

    def test_set_config_replaces_configuration(self):
        original_context = get_context()
        replacement = ConfigData()
        replacement.app.port = 1234

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original_context)

        assert get_config() is original_context.config


class TestEnvironmentVariables:
    def test_config_file_defaults_to_project_yaml(self):
        with patch.dict(os.environ, {}, clear=True):
            assert EnvironmentVariables(_env_file=None).config_file == "config.yaml"

    def test_config_file_from_environment(self):
        with patch.dict(os.environ, {"BOOKSTORE_CONFIG": "/etc/bookstore/config.yaml"}):
            assert EnvironmentVariables().config_file == "/etc/bookstore/config.yaml"
