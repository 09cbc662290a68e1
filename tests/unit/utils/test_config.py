#!/usr/bin/env python3
"""Unit tests for ClientConfig resolution.

Tests:
- Credential resolution order (argument, then POLYGON_AUTH_KEY)
- Missing and empty credentials
- Base URL override and trailing slash handling
- Timeout validation
- Credential excluded from repr
"""

import attrs
import pytest

from polygon_client.utils.config import DEFAULT_API_URL, DEFAULT_WS_HOST, ClientConfig
from polygon_client.utils.exceptions import ConfigurationError, MissingCredentialError


class TestCredentialResolution:
    """Tests for where the API key comes from."""

    def test_explicit_key_wins_over_environment(self):
        """An explicit auth_key should take precedence over POLYGON_AUTH_KEY."""
        config = ClientConfig.resolve("explicit", environ={"POLYGON_AUTH_KEY": "from-env"})
        assert config.auth_key == "explicit"

    def test_environment_key_used_when_no_argument(self):
        """POLYGON_AUTH_KEY should be used when no key is passed."""
        config = ClientConfig.resolve(environ={"POLYGON_AUTH_KEY": "from-env"})
        assert config.auth_key == "from-env"

    def test_reads_process_environment_by_default(self, monkeypatch):
        """Without an environ mapping, os.environ should be consulted."""
        monkeypatch.setenv("POLYGON_AUTH_KEY", "process-env")
        assert ClientConfig.resolve().auth_key == "process-env"

    def test_missing_key_raises(self):
        """No argument and no variable should raise MissingCredentialError."""
        with pytest.raises(MissingCredentialError):
            ClientConfig.resolve(environ={})

    def test_missing_key_is_configuration_error(self):
        """MissingCredentialError should be catchable as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ClientConfig.resolve(environ={})

    @pytest.mark.parametrize("empty", ["", None])
    def test_empty_key_counts_as_missing(self, empty):
        """An empty credential should be treated as absent."""
        with pytest.raises(MissingCredentialError):
            ClientConfig.resolve(empty, environ={"POLYGON_AUTH_KEY": ""})

    def test_direct_construction_rejects_empty_key(self):
        """Constructing ClientConfig with an empty key should fail too."""
        with pytest.raises(MissingCredentialError):
            ClientConfig(auth_key="")


class TestEndpoints:
    """Tests for REST base URL and WebSocket host."""

    def test_defaults(self):
        """Defaults should point at the public API."""
        config = ClientConfig.resolve("k", environ={})
        assert config.api_url == DEFAULT_API_URL == "https://api.polygon.io"
        assert config.ws_host == DEFAULT_WS_HOST == "wss://socket.polygon.io"

    def test_api_url_from_environment(self):
        """POLYGON_API_URL should override the REST base URL."""
        config = ClientConfig.resolve("k", environ={"POLYGON_API_URL": "https://proxy.example.com"})
        assert config.api_url == "https://proxy.example.com"

    def test_explicit_api_url_wins(self):
        """An explicit api_url should take precedence over the environment."""
        config = ClientConfig.resolve(
            "k", api_url="https://explicit.example.com", environ={"POLYGON_API_URL": "https://env.example.com"}
        )
        assert config.api_url == "https://explicit.example.com"

    def test_trailing_slash_stripped(self):
        """Trailing slashes should be removed from both URLs."""
        config = ClientConfig(auth_key="k", api_url="https://api.polygon.io/", ws_host="wss://socket.polygon.io/")
        assert config.api_url == "https://api.polygon.io"
        assert config.ws_host == "wss://socket.polygon.io"

    def test_ws_host_is_not_read_from_environment(self):
        """The WebSocket host is only configurable through the config value."""
        config = ClientConfig.resolve("k", environ={"POLYGON_WS_HOST": "wss://elsewhere"})
        assert config.ws_host == DEFAULT_WS_HOST


class TestTimeoutAndImmutability:
    """Tests for timeout validation, immutability and repr."""

    def test_timeout_defaults_to_none(self):
        assert ClientConfig.resolve("k", environ={}).timeout is None

    def test_positive_timeout_accepted(self):
        assert ClientConfig.resolve("k", 2.5, environ={}).timeout == 2.5

    @pytest.mark.parametrize("timeout", [0, -1, -0.5])
    def test_non_positive_timeout_rejected(self, timeout):
        """Zero or negative timeouts should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="timeout must be positive"):
            ClientConfig.resolve("k", timeout, environ={})

    def test_config_is_frozen(self):
        """Resolved config should be immutable."""
        config = ClientConfig.resolve("k", environ={})
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            config.auth_key = "other"

    def test_repr_hides_credential(self):
        """The API key must never appear in repr."""
        config = ClientConfig.resolve("super-secret-key", environ={})
        assert "super-secret-key" not in repr(config)
        assert "api.polygon.io" in repr(config)
