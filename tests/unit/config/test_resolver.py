"""Tests for multi-source setting resolution.

This module tests the SettingResolver class which resolves settings from
explicit values, environment variables, .env files and defaults.
"""

import pytest

from api_version_client.config import SettingResolver
from api_version_client.config.exceptions import SettingNotFoundError, SettingValueError


class TestSettingResolverInit:
    """Test SettingResolver initialization."""

    def test_init_default(self):
        """Test default initialization."""
        resolver = SettingResolver()
        assert resolver._dotenv_loaded

    def test_init_skip_dotenv(self):
        """Test initialization with dotenv loading disabled."""
        resolver = SettingResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_missing_dotenv_path(self, tmp_path):
        """A missing .env file is not an error."""
        resolver = SettingResolver(dotenv_path=str(tmp_path / "missing.env"))
        assert resolver._dotenv_loaded


class TestSettingResolverResolve:
    """Test basic setting resolution."""

    def test_resolve_from_explicit_value(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(value="2.0") == "2.0"

    def test_resolve_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("TEST_API_VERSION", "1.5")
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_API_VERSION") == "1.5"

    def test_empty_environment_variable_is_unset(self, monkeypatch):
        monkeypatch.setenv("TEST_API_VERSION", "")
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_API_VERSION", default="1.0") == "1.0"

    def test_resolve_from_dotenv_file(self, tmp_path):
        """Values from the .env file are loaded into the environment."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_API_VERSION=2024-06-01\n")

        resolver = SettingResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve(env_var_name="TEST_DOTENV_API_VERSION") == "2024-06-01"

    def test_resolve_returns_none_when_not_found(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="NONEXISTENT_VAR") is None

    def test_resolve_raises_when_required_and_not_found(self):
        resolver = SettingResolver(load_dotenv=False)

        with pytest.raises(SettingNotFoundError) as exc_info:
            resolver.resolve(env_var_name="NONEXISTENT_VAR", required=True)

        assert "Required setting not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "NONEXISTENT_VAR"


class TestSettingResolverPriority:
    """Test setting resolution priority ordering."""

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = SettingResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="TEST_PRIORITY_KEY", default="default-value")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_PRIORITY_KEY", default="default-value") == "env-value"


class TestSettingResolverInt:
    """Test integer settings."""

    def test_parses_environment_value(self, monkeypatch):
        monkeypatch.setenv("TEST_SEGMENT", " 2 ")
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_int(env_var_name="TEST_SEGMENT") == 2

    def test_explicit_and_default_values(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_int(value=3) == 3
        assert resolver.resolve_int(env_var_name="NONEXISTENT_VAR", default=0) == 0
        assert resolver.resolve_int(env_var_name="NONEXISTENT_VAR") is None

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("TEST_SEGMENT", "first")
        resolver = SettingResolver(load_dotenv=False)

        with pytest.raises(SettingValueError) as exc_info:
            resolver.resolve_int(env_var_name="TEST_SEGMENT")

        assert exc_info.value.env_var_name == "TEST_SEGMENT"
        assert exc_info.value.raw_value == "first"
        assert "TEST_SEGMENT" in str(exc_info.value)

    def test_required_integer_missing(self):
        resolver = SettingResolver(load_dotenv=False)

        with pytest.raises(SettingNotFoundError):
            resolver.resolve_int(env_var_name="NONEXISTENT_VAR", required=True)
